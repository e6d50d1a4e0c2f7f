from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import Depends, Request, status
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from workspace_service.adapter.services.auth_provider import LocalAuthProvider
from workspace_service.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from workspace_service.api.error import ClientError
from workspace_service.app.services.auth_provider import AuthUser, IAuthProvider
from workspace_service.libs.result import Error

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


@asynccontextmanager
async def auth_provider_scope() -> AsyncIterator[IAuthProvider]:
    """
    Auth provider bound to its own database session.

    Installed on app.state so the session middleware and the request
    dependencies share one override point.
    """
    async with AsyncSessionLocal() as session:
        yield LocalAuthProvider(SqlAlchemyUnitOfWork(session))


async def get_auth_provider(request: Request):
    async with request.app.state.auth_provider_scope() as provider:
        yield provider


async def get_current_user_optional(request: Request) -> Optional[AuthUser]:
    """
    User resolved by the session middleware for this request.

    Returns:
        AuthUser, or None when the caller is signed out
    """
    return getattr(request.state, "auth_user", None)


async def get_current_user(
    user: Optional[AuthUser] = Depends(get_current_user_optional),
) -> AuthUser:
    """
    Dependency for endpoints that require a session.

    Raises:
        ClientError: 401 NOT_AUTHENTICATED when the caller is signed out
    """
    if user is None:
        raise ClientError(
            Error("NOT_AUTHENTICATED", "Not authenticated"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
    return user
