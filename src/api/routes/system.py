"""System-level routes such as health checks."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.config import settings
from src.infrastructure.database import get_session

logger = logging.getLogger(__name__)

router = APIRouter(tags=["system"])


@router.get("/health")
async def health_check(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> dict[str, str]:
    """Report service health; degraded when the database cannot be reached."""

    try:
        await session.execute(text("SELECT 1"))
        database_status = "connected"
    except SQLAlchemyError as exc:
        logger.warning("Database health check failed: %s", exc)
        database_status = "disconnected"

    return {
        "status": "healthy" if database_status == "connected" else "degraded",
        "database": database_status,
        "environment": settings.environment,
    }
