# ============================================================================
# File: ingestion/runner.py
# Description: Fetch-and-store orchestrator
# ============================================================================
"""
Fetch Runner - Orchestrates fetch, sort, normalize, load and audit.

Pipeline phases for one request, strictly sequential:
1. Validate - reject unsupported endpoint selectors before any I/O
2. Fetch - one GET against the remote API
3. Sort - canonical per-endpoint ordering
4. Normalize - item log rows + domain rows
5. Load - domain upserts and item appends in one transaction
6. Audit - append the raw response, only after the load committed
"""

from typing import Any, Dict, Optional
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from ingestion.extractors.api_extractor import RemoteFetcher, build_query_params
from ingestion.transformers.normalizer import RecordNormalizer
from ingestion.transformers.sorter import sort_records
from ingestion.loaders.sqlite_loader import SQLiteLoader
from ingestion.loaders.audit_log import AuditLog
from models.base import Endpoint, FILTER_KEYS
from core.exceptions import ServiceError, ValidationError

logger = logging.getLogger(__name__)


def validate_endpoint(endpoint: Any) -> str:
    """Return ``endpoint`` if it is one of the six supported collections"""
    if not isinstance(endpoint, str) or endpoint not in Endpoint.values():
        raise ValidationError(
            "Invalid endpoint",
            context={"endpoint": endpoint, "allowed": Endpoint.values()}
        )
    return endpoint


class FetchRunner:
    """
    Fetch-and-store orchestrator.

    Responsibilities:
    - Orchestrate Fetch → Sort → Normalize → Load → Audit
    - Keep the domain load atomic
    - Write nothing when validation, the remote call or the load fails
    """

    def __init__(self, db_session: AsyncSession, fetcher: RemoteFetcher):
        self.db = db_session
        self.fetcher = fetcher

    async def run(self, endpoint: Optional[str], filters: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Run the pipeline for one endpoint.

        Args:
            endpoint: Collection selector such as "/todos"
            filters: Optional {userId, postId, albumId}; empty values are dropped

        Returns:
            Dictionary with:
            - data: the sorted remote payload
            - saved_id: id of the audit record
            - items_stored: number of normalized item rows appended

        Raises:
            ValidationError: Unsupported endpoint
            RemoteError: Remote API failure
            StorageError: Database failure
        """
        endpoint = validate_endpoint(endpoint)
        params = build_query_params(
            {key: value for key, value in (filters or {}).items() if key in FILTER_KEYS}
        )

        try:
            # PHASE 1: FETCH
            data = await self.fetcher.fetch(endpoint, params)

            # PHASE 2: SORT
            data = sort_records(endpoint, data)

            # PHASE 3: NORMALIZE
            records = data if isinstance(data, list) else [data]
            normalizer = RecordNormalizer(endpoint)

            items = []
            rows = []
            for record in records:
                if not isinstance(record, dict):
                    logger.warning(f"Skipping non-object record from {endpoint}: {record!r}")
                    continue
                item, row = normalizer.normalize(record)
                items.append(item)
                if row is not None:
                    rows.append(row)

            logger.info(f"Normalized {len(items)} items ({len(rows)} domain rows) from {endpoint}")

            # PHASE 4: LOAD (IDEMPOTENT UPSERT)
            loader = SQLiteLoader(self.db)
            items_stored = await loader.load(endpoint, items, rows)

            # PHASE 5: AUDIT
            audit_record = await AuditLog(self.db).append(endpoint, params, data)

        except ServiceError as e:
            logger.error(
                f"Fetch pipeline failed for {endpoint}: {e.message}",
                extra={"error_context": e.to_dict()}
            )
            raise

        logger.info(
            f"Fetch completed for {endpoint}: items={items_stored}, audit_id={audit_record.id}"
        )

        return {
            "data": data,
            "saved_id": audit_record.id,
            "items_stored": items_stored
        }
