"""
Health check endpoint with database status and table counts
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func, text
from sqlalchemy.exc import SQLAlchemyError
from api.dependencies import get_db
from schemas.api import HealthCheckResponse
from models import AuditRecord, NormalizedItem, User, Post, Comment, Album, Photo, Todo
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Health"])

COUNTED_TABLES = (AuditRecord, NormalizedItem, User, Post, Comment, Album, Photo, Todo)


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(db: AsyncSession = Depends(get_db)):
    """
    Health check endpoint.

    Returns:
    - Database connectivity status
    - Row count per table
    """
    db_connected = False
    table_counts = {}

    try:
        await db.execute(text("SELECT 1"))
        db_connected = True

        for model in COUNTED_TABLES:
            result = await db.execute(select(func.count()).select_from(model))
            table_counts[model.__tablename__] = result.scalar() or 0
    except SQLAlchemyError as e:
        logger.error(f"Health check database query failed: {str(e)}")

    return HealthCheckResponse(
        status="healthy" if db_connected else "unhealthy",
        timestamp=datetime.now(timezone.utc),
        database_connected=db_connected,
        table_counts=table_counts
    )
