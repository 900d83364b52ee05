"""FastAPI dependency injection and shared lookups for the routers."""

from collections.abc import AsyncGenerator
from typing import TypeVar

from fastapi import HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from client_hub.models import Base

ModelT = TypeVar("ModelT", bound=Base)


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield a session from the app's session factory.

    Write handlers commit before they return so a failed commit still
    reaches the error handler. Anything left pending is committed on exit
    and the session is rolled back when the request raises.
    """
    async with request.app.state.async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


def not_found(resource: str, record_id: str) -> HTTPException:
    """Build the 404 raised for a missing record."""
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{resource} with ID {record_id} not found.",
    )


async def get_or_404(
    db: AsyncSession, model: type[ModelT], record_id: str, resource: str
) -> ModelT:
    """Load a record by primary key or raise 404."""
    record = await db.get(model, record_id)
    if record is None:
        raise not_found(resource, record_id)
    return record
