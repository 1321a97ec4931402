"""
Pydantic schemas for normalized rows produced from remote records
"""

from pydantic import BaseModel, Field
from typing import Optional


class NormalizedItemCreate(BaseModel):
    """
    Flat item row appended to the normalized item log.

    Every entity field is an explicit Optional: a field the remote record
    does not carry is None, never a missing key.
    """

    endpoint: str = Field(..., min_length=1, max_length=32)
    item_id: Optional[int] = None

    user_id: Optional[int] = None
    post_id: Optional[int] = None
    album_id: Optional[int] = None

    title: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    completed: Optional[int] = Field(None, ge=0, le=1)
    url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    body: Optional[str] = None


# ============================================================================
# Domain rows (one per table, keyed by remote id)
# ============================================================================

class UserRow(BaseModel):
    id: int
    name: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    address: Optional[str] = None
    company: Optional[str] = None


class PostRow(BaseModel):
    id: int
    user_id: Optional[int] = None
    title: Optional[str] = None
    body: Optional[str] = None


class CommentRow(BaseModel):
    id: int
    post_id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    body: Optional[str] = None


class AlbumRow(BaseModel):
    id: int
    user_id: Optional[int] = None
    title: Optional[str] = None


class PhotoRow(BaseModel):
    id: int
    album_id: Optional[int] = None
    title: Optional[str] = None
    url: Optional[str] = None
    thumbnail_url: Optional[str] = None


class TodoRow(BaseModel):
    id: int
    user_id: Optional[int] = None
    title: Optional[str] = None
    completed: Optional[int] = Field(None, ge=0, le=1)
