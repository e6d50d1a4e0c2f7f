from contextlib import asynccontextmanager

import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import workspace_service.domain.entities  # noqa: F401 - register tables
from workspace_service.adapter.services.auth_provider import LocalAuthProvider
from workspace_service.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from workspace_service.depends import get_unit_of_work


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    from httpx import ASGITransport
    from workspace_service.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    @asynccontextmanager
    async def override_auth_provider_scope():
        yield LocalAuthProvider(SqlAlchemyUnitOfWork(db_session))

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.state.auth_provider_scope = override_auth_provider_scope

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
