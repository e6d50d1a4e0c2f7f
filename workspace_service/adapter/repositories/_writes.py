from sqlalchemy.exc import IntegrityError
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from workspace_service.app.repositories.errors import ConflictError


async def flush_and_refresh(session: AsyncSession, entity: SQLModel, name: str):
    """
    Add, flush and refresh an entity.

    Unique-constraint violations surface as ConflictError; the caller must
    roll the unit of work back before using the session again.
    """
    session.add(entity)
    try:
        await session.flush()
    except IntegrityError as exc:
        raise ConflictError(name, str(exc.orig)) from exc
    await session.refresh(entity)
    return entity
