"""
Append-only audit log of raw remote responses
"""

from typing import Any, Dict, List, Optional
from sqlalchemy import select, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from models.audit import AuditRecord
from core.exceptions import NotFoundError, StorageError
import json
import logging

logger = logging.getLogger(__name__)


class AuditLog:
    """
    Store every raw fetch exactly as the remote API answered it.

    Rows are inserted or deleted, never updated.
    """

    def __init__(self, db_session: AsyncSession):
        self.db = db_session

    async def append(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]],
        payload: Any
    ) -> AuditRecord:
        """Insert one audit row and return it with its id and timestamp"""
        record = AuditRecord(
            api_endpoint=endpoint,
            parameters=json.dumps(params or {}),
            response_data=json.dumps(payload)
        )

        try:
            self.db.add(record)
            await self.db.commit()
            await self.db.refresh(record)
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise StorageError(
                str(e),
                context={"operation": "INSERT", "table_name": "api_responses", "endpoint": endpoint},
                original_exception=e
            )

        logger.info(f"Saved audit record {record.id} for {endpoint}")
        return record

    async def list_newest_first(self) -> List[AuditRecord]:
        result = await self.db.execute(
            select(AuditRecord).order_by(AuditRecord.created_at.desc(), AuditRecord.id.desc())
        )
        return list(result.scalars().all())

    async def delete(self, record_id: int) -> None:
        """
        Delete one audit row.

        Raises:
            NotFoundError: No row with ``record_id``
        """
        try:
            result = await self.db.execute(
                delete(AuditRecord).where(AuditRecord.id == record_id)
            )
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise StorageError(
                str(e),
                context={"operation": "DELETE", "table_name": "api_responses", "record_id": record_id},
                original_exception=e
            )

        if result.rowcount == 0:
            raise NotFoundError("Record not found", context={"record_id": record_id})

        logger.info(f"Deleted audit record {record_id}")

    async def delete_all(self) -> int:
        """Delete every audit row and return how many were removed"""
        try:
            result = await self.db.execute(delete(AuditRecord))
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise StorageError(
                str(e),
                context={"operation": "DELETE", "table_name": "api_responses"},
                original_exception=e
            )

        deleted = result.rowcount or 0
        logger.info(f"Deleted {deleted} audit records")
        return deleted
