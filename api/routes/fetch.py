"""
Fetch endpoint: pull a collection from the remote API and store it
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from api.dependencies import get_db, get_fetcher
from ingestion.extractors.api_extractor import RemoteFetcher
from ingestion.runner import FetchRunner
from schemas.api import FetchRequest, FetchResponse, ErrorResponse
import logging

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["Fetch"])


@router.post(
    "/fetch-data",
    response_model=FetchResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)
async def fetch_data(
    body: FetchRequest,
    request: Request,
    db: AsyncSession = Depends(get_db),
    fetcher: RemoteFetcher = Depends(get_fetcher)
):
    """
    Fetch, sort, normalize and store one remote collection.

    Body: {endpoint, userId?, postId?, albumId?}
    """
    request_id = getattr(request.state, "request_id", "-")
    logger.info(f"[{request_id}] POST /api/fetch-data endpoint={body.endpoint} filters={body.filters()}")

    result = await FetchRunner(db, fetcher).run(body.endpoint, body.filters())

    return FetchResponse(
        data=result["data"],
        savedId=result["saved_id"],
        itemsStored=result["items_stored"]
    )
