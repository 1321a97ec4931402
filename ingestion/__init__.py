"""
Fetch-and-store pipeline components.

Modules:
    runner: FetchRunner, the orchestrator behind POST /api/fetch-data

Subpackages:
    extractors: RemoteFetcher for the JSONPlaceholder REST API
    transformers: Sorter and RecordNormalizer
    loaders: SQLiteLoader (domain upserts + item log) and AuditLog

Architecture:
    1. Fetch - one GET against the remote API, no retries
    2. Sort - canonical per-collection order
    3. Normalize - flat item rows and per-table domain rows
    4. Load - one transaction: domain upserts + item appends
    5. Audit - raw response appended once the load committed

Usage:
    from ingestion.extractors.api_extractor import RemoteFetcher
    from ingestion.runner import FetchRunner

Example:
    runner = FetchRunner(session, RemoteFetcher())
    result = await runner.run("/todos", {"userId": 1})

    print(f"Stored {result['items_stored']} items, audit id {result['saved_id']}")
"""

__all__ = [
    "FetchRunner",
    "RemoteFetcher",
    "RecordNormalizer",
    "SQLiteLoader",
    "AuditLog",
]
