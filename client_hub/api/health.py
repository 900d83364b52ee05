"""Liveness probe for the Client Hub API and its store."""

from typing import Annotated, Literal

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from client_hub.api.deps import get_db
from client_hub.core.config import settings
from client_hub.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["health"])


class HealthResponse(BaseModel):
    """Service status plus whether the client/project/task store answers."""

    status: Literal["ok", "degraded"]
    database: Literal["reachable", "unreachable"]
    environment: str


async def _store_reachable(db: AsyncSession) -> bool:
    try:
        await db.execute(text("SELECT 1"))
    except Exception as e:
        logger.exception("store_unreachable", error=str(e))
        return False
    return True


@router.get("/health", response_model=HealthResponse)
async def health_check(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> HealthResponse:
    """Report degraded, still with 200, when the store does not answer."""
    reachable = await _store_reachable(db)
    return HealthResponse(
        status="ok" if reachable else "degraded",
        database="reachable" if reachable else "unreachable",
        environment=settings.environment,
    )
