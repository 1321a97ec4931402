"""
SQLAlchemy ORM models for database tables.

Models:
    base: Base declarative class and the Endpoint enum
    audit: Append-only log of raw remote responses (AuditRecord)
    normalized_item: Append-only flattened item log (NormalizedItem)
    user, post, album, todo: Deduplicated domain tables keyed by remote id

Relationships:
    - User → Post, Album, Todo (ON DELETE CASCADE)
    - Post → Comment (ON DELETE CASCADE)
    - Album → Photo (ON DELETE CASCADE)
    - NormalizedItem references domain ids loosely (no constraint)
"""

from models.base import Base, Endpoint, FILTER_KEYS
from models.audit import AuditRecord
from models.normalized_item import NormalizedItem
from models.user import User
from models.post import Post, Comment
from models.album import Album, Photo
from models.todo import Todo

__all__ = [
    "Base",
    "Endpoint",
    "FILTER_KEYS",
    "AuditRecord",
    "NormalizedItem",
    "User",
    "Post",
    "Comment",
    "Album",
    "Photo",
    "Todo",
]
