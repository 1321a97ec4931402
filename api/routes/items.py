"""
Normalized item endpoints with filtering, pagination and grouping
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, and_
from api.dependencies import get_db
from api.views import group_items
from models.normalized_item import NormalizedItem
from schemas.api import NormalizedItemResponse
from typing import Any, Dict, List, Optional
import logging

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["Items"])

DEFAULT_ORDER = (
    NormalizedItem.endpoint,
    NormalizedItem.user_id,
    NormalizedItem.post_id,
    NormalizedItem.album_id,
    NormalizedItem.item_id,
    NormalizedItem.id,
)


@router.get("/items", response_model=List[NormalizedItemResponse])
async def get_items(
    endpoint: Optional[str] = Query(None, description="Filter by endpoint, e.g. /posts"),
    userId: Optional[int] = Query(None, description="Filter by user id"),
    postId: Optional[int] = Query(None, description="Filter by post id"),
    albumId: Optional[int] = Query(None, description="Filter by album id"),
    completed: Optional[int] = Query(None, ge=0, le=1, description="Filter by completed flag (0/1)"),
    limit: int = Query(100, ge=1, le=1000, description="Maximum items to return"),
    offset: int = Query(0, ge=0, description="Items to skip"),
    db: AsyncSession = Depends(get_db)
):
    """
    Normalized items filtered by any combination of endpoint and relational keys.

    Ordered by endpoint, user id, post id, album id, item id (NULLs first).
    """
    filters = []

    if endpoint:
        filters.append(NormalizedItem.endpoint == endpoint)
    if userId is not None:
        filters.append(NormalizedItem.user_id == userId)
    if postId is not None:
        filters.append(NormalizedItem.post_id == postId)
    if albumId is not None:
        filters.append(NormalizedItem.album_id == albumId)
    if completed is not None:
        filters.append(NormalizedItem.completed == completed)

    query = select(NormalizedItem)
    if filters:
        query = query.where(and_(*filters))

    query = query.order_by(*DEFAULT_ORDER).offset(offset).limit(limit)

    result = await db.execute(query)
    items = result.scalars().all()

    logger.debug(f"GET /api/items returned {len(items)} items (offset={offset}, limit={limit})")
    return [NormalizedItemResponse.model_validate(item) for item in items]


@router.get("/structured", response_model=Dict[str, Dict[str, List[Dict[str, Any]]]])
async def get_structured(db: AsyncSession = Depends(get_db)):
    """
    All normalized items grouped by endpoint, then by parent key
    (user:<id>, post:<id>, album:<id> or root).
    """
    result = await db.execute(select(NormalizedItem).order_by(*DEFAULT_ORDER))
    items = result.scalars().all()

    return group_items(
        items,
        lambda item: NormalizedItemResponse.model_validate(item).model_dump(mode="json")
    )
