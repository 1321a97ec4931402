"""
Audit log endpoints: list, pretty preview, delete
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from api.dependencies import get_db
from api.views import pretty_audit_record
from ingestion.loaders.audit_log import AuditLog
from schemas.api import AuditRecordResponse, AuditRecordPretty, DeleteResponse, ErrorResponse
from typing import List
import logging

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["Stored Data"])


@router.get("/stored-data", response_model=List[AuditRecordResponse])
async def get_stored_data(db: AsyncSession = Depends(get_db)):
    """All audit records, newest first"""
    records = await AuditLog(db).list_newest_first()
    return [AuditRecordResponse.model_validate(record) for record in records]


@router.get("/stored-data-pretty", response_model=List[AuditRecordPretty])
async def get_stored_data_pretty(db: AsyncSession = Depends(get_db)):
    """
    Audit records with parsed parameters and a short payload preview.

    The preview holds at most three items; total_count is the full size of
    the stored payload.
    """
    records = await AuditLog(db).list_newest_first()
    return [AuditRecordPretty(**pretty_audit_record(record)) for record in records]


@router.delete(
    "/stored-data/{record_id}",
    response_model=DeleteResponse,
    response_model_exclude_none=True,
    responses={404: {"model": ErrorResponse}}
)
async def delete_stored_data(record_id: int, request: Request, db: AsyncSession = Depends(get_db)):
    """Delete one audit record"""
    request_id = getattr(request.state, "request_id", "-")
    logger.info(f"[{request_id}] DELETE audit record {record_id}")

    await AuditLog(db).delete(record_id)
    return DeleteResponse(message="Record deleted successfully")


@router.delete("/stored-data", response_model=DeleteResponse)
async def clear_stored_data(db: AsyncSession = Depends(get_db)):
    """Delete every audit record"""
    deleted = await AuditLog(db).delete_all()
    return DeleteResponse(message=f"Deleted {deleted} records", deleted=deleted)
