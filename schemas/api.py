"""
Pydantic schemas for API request/response models
"""

from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any, Union
from datetime import datetime


# ============================================================================
# Health Check Schemas
# ============================================================================

class HealthCheckResponse(BaseModel):
    """Health check response model"""
    status: str = Field(..., description="Overall system status: healthy or unhealthy")
    timestamp: datetime
    database_connected: bool
    table_counts: Dict[str, int] = Field(default_factory=dict)


# ============================================================================
# Fetch Schemas
# ============================================================================

class FetchRequest(BaseModel):
    """
    Body of POST /api/fetch-data.

    endpoint is validated against the supported collections by the
    pipeline, so an unknown value answers 400 instead of a schema error.
    """
    endpoint: Optional[Any] = None
    userId: Optional[Union[int, str]] = None
    postId: Optional[Union[int, str]] = None
    albumId: Optional[Union[int, str]] = None

    def filters(self) -> Dict[str, Any]:
        return {
            "userId": self.userId,
            "postId": self.postId,
            "albumId": self.albumId,
        }

    class Config:
        json_schema_extra = {
            "example": {
                "endpoint": "/todos",
                "userId": 1
            }
        }


class FetchResponse(BaseModel):
    """Result of a fetch-and-store run"""
    success: bool = True
    data: Any
    savedId: int
    itemsStored: int
    message: str = "Data fetched and saved successfully"


# ============================================================================
# Audit Log Schemas
# ============================================================================

class AuditRecordResponse(BaseModel):
    """Raw audit row as stored"""
    id: int
    api_endpoint: str
    parameters: Optional[str]
    response_data: str
    created_at: datetime

    class Config:
        from_attributes = True


class AuditRecordPretty(BaseModel):
    """Audit row with parsed parameters and a short payload preview"""
    id: int
    api_endpoint: str
    parameters: Dict[str, Any] = Field(default_factory=dict)
    preview: List[Any] = Field(default_factory=list)
    total_count: int
    created_at: datetime


class DeleteResponse(BaseModel):
    success: bool = True
    message: str
    deleted: Optional[int] = None


class ErrorResponse(BaseModel):
    """Standard error response"""
    error: str

    class Config:
        json_schema_extra = {
            "example": {
                "error": "Record not found"
            }
        }


# ============================================================================
# Normalized Item Schemas
# ============================================================================

class NormalizedItemResponse(BaseModel):
    id: int
    endpoint: str
    item_id: Optional[int]
    user_id: Optional[int]
    post_id: Optional[int]
    album_id: Optional[int]
    title: Optional[str]
    name: Optional[str]
    email: Optional[str]
    completed: Optional[int]
    url: Optional[str]
    thumbnail_url: Optional[str]
    body: Optional[str]
    created_at: datetime

    class Config:
        from_attributes = True


# ============================================================================
# Domain Schemas
# ============================================================================

class UserResponse(BaseModel):
    id: int
    name: Optional[str]
    username: Optional[str]
    email: Optional[str]
    phone: Optional[str]
    website: Optional[str]
    address: Optional[str]
    company: Optional[str]

    class Config:
        from_attributes = True


class PostResponse(BaseModel):
    id: int
    user_id: Optional[int]
    title: Optional[str]
    body: Optional[str]

    class Config:
        from_attributes = True


class CommentResponse(BaseModel):
    id: int
    post_id: Optional[int]
    name: Optional[str]
    email: Optional[str]
    body: Optional[str]

    class Config:
        from_attributes = True


class AlbumResponse(BaseModel):
    id: int
    user_id: Optional[int]
    title: Optional[str]

    class Config:
        from_attributes = True


class PhotoResponse(BaseModel):
    id: int
    album_id: Optional[int]
    title: Optional[str]
    url: Optional[str]
    thumbnail_url: Optional[str]

    class Config:
        from_attributes = True


class TodoResponse(BaseModel):
    id: int
    user_id: Optional[int]
    title: Optional[str]
    completed: Optional[int]

    class Config:
        from_attributes = True
