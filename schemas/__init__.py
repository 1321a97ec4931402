"""
Pydantic schemas for data validation and serialization.

Schemas:
    normalized: Rows produced by the normalizer (item log + domain tables)
    api: API endpoint request/response schemas

Validation:
    Every entity field is declared Optional so records that omit a field
    normalize to None instead of failing.
"""

__all__ = [
    "NormalizedItemCreate",
    "UserRow",
    "PostRow",
    "CommentRow",
    "AlbumRow",
    "PhotoRow",
    "TodoRow",
    "FetchRequest",
    "FetchResponse",
    "AuditRecordResponse",
    "AuditRecordPretty",
    "NormalizedItemResponse",
]
