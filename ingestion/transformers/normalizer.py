"""
Transform raw remote records into the item log row and the domain table row
"""

from typing import Any, Dict, Optional, Tuple
from pydantic import BaseModel
from schemas.normalized import (
    NormalizedItemCreate,
    UserRow,
    PostRow,
    CommentRow,
    AlbumRow,
    PhotoRow,
    TodoRow,
)
from models.base import Endpoint
from core.exceptions import ValidationError
import json
import logging

logger = logging.getLogger(__name__)


class RecordNormalizer:
    """
    Normalize records from one remote collection.

    Handles:
    - Field mapping (camelCase remote keys to snake_case columns)
    - Type conversion (ids to int, completed to 0/1, nested objects to JSON text)
    - Null coalescing: a missing field becomes None, never an error
    """

    def __init__(self, endpoint: str):
        if endpoint not in Endpoint.values():
            raise ValidationError(
                "Invalid endpoint",
                context={"endpoint": endpoint, "allowed": Endpoint.values()}
            )
        self.endpoint = endpoint

    def normalize(self, record: Dict[str, Any]) -> Tuple[NormalizedItemCreate, Optional[BaseModel]]:
        """
        Normalize one raw record.

        Returns:
            (item row, domain row). The domain row is None when the record
            has no usable id.
        """
        item = self.to_item(record)
        row = self.to_row(record)
        if row is None:
            logger.warning(f"Record from {self.endpoint} has no usable id, skipping domain upsert")
        return item, row

    def to_item(self, record: Dict[str, Any]) -> NormalizedItemCreate:
        """Flat row for the append-only item log"""
        fields: Dict[str, Any] = {
            "endpoint": self.endpoint,
            "item_id": self._parse_int(record.get("id")),
        }

        if self.endpoint == Endpoint.USERS.value:
            fields.update(
                name=self._parse_str(record.get("name")),
                email=self._parse_str(record.get("email")),
            )
        elif self.endpoint == Endpoint.POSTS.value:
            fields.update(
                user_id=self._parse_int(record.get("userId")),
                title=self._parse_str(record.get("title")),
                body=self._parse_str(record.get("body")),
            )
        elif self.endpoint == Endpoint.COMMENTS.value:
            fields.update(
                post_id=self._parse_int(record.get("postId")),
                name=self._parse_str(record.get("name")),
                email=self._parse_str(record.get("email")),
                body=self._parse_str(record.get("body")),
            )
        elif self.endpoint == Endpoint.ALBUMS.value:
            fields.update(
                user_id=self._parse_int(record.get("userId")),
                title=self._parse_str(record.get("title")),
            )
        elif self.endpoint == Endpoint.PHOTOS.value:
            fields.update(
                album_id=self._parse_int(record.get("albumId")),
                title=self._parse_str(record.get("title")),
                url=self._parse_str(record.get("url")),
                thumbnail_url=self._parse_str(record.get("thumbnailUrl")),
            )
        elif self.endpoint == Endpoint.TODOS.value:
            fields.update(
                user_id=self._parse_int(record.get("userId")),
                title=self._parse_str(record.get("title")),
                completed=self._parse_flag(record.get("completed")),
            )

        return NormalizedItemCreate(**fields)

    def to_row(self, record: Dict[str, Any]) -> Optional[BaseModel]:
        """Row shaped for the collection's domain table"""
        record_id = self._parse_int(record.get("id"))
        if record_id is None:
            return None

        if self.endpoint == Endpoint.USERS.value:
            return UserRow(
                id=record_id,
                name=self._parse_str(record.get("name")),
                username=self._parse_str(record.get("username")),
                email=self._parse_str(record.get("email")),
                phone=self._parse_str(record.get("phone")),
                website=self._parse_str(record.get("website")),
                address=self._serialize(record.get("address")),
                company=self._serialize(record.get("company")),
            )
        if self.endpoint == Endpoint.POSTS.value:
            return PostRow(
                id=record_id,
                user_id=self._parse_int(record.get("userId")),
                title=self._parse_str(record.get("title")),
                body=self._parse_str(record.get("body")),
            )
        if self.endpoint == Endpoint.COMMENTS.value:
            return CommentRow(
                id=record_id,
                post_id=self._parse_int(record.get("postId")),
                name=self._parse_str(record.get("name")),
                email=self._parse_str(record.get("email")),
                body=self._parse_str(record.get("body")),
            )
        if self.endpoint == Endpoint.ALBUMS.value:
            return AlbumRow(
                id=record_id,
                user_id=self._parse_int(record.get("userId")),
                title=self._parse_str(record.get("title")),
            )
        if self.endpoint == Endpoint.PHOTOS.value:
            return PhotoRow(
                id=record_id,
                album_id=self._parse_int(record.get("albumId")),
                title=self._parse_str(record.get("title")),
                url=self._parse_str(record.get("url")),
                thumbnail_url=self._parse_str(record.get("thumbnailUrl")),
            )
        return TodoRow(
            id=record_id,
            user_id=self._parse_int(record.get("userId")),
            title=self._parse_str(record.get("title")),
            completed=self._parse_flag(record.get("completed")),
        )

    @staticmethod
    def _parse_int(value: Any) -> Optional[int]:
        """Safely parse int value"""
        if value is None or value == "" or isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                pass
        try:
            return int(float(value))  # Handle "10.0" strings
        except (ValueError, TypeError, OverflowError):
            return None

    @staticmethod
    def _parse_str(value: Any) -> Optional[str]:
        if value is None:
            return None
        return str(value)

    @staticmethod
    def _parse_flag(value: Any) -> Optional[int]:
        """Boolean to 0/1, None stays None"""
        if value is None:
            return None
        if isinstance(value, str):
            return 1 if value.strip().lower() in ("1", "true", "yes") else 0
        return 1 if value else 0

    @staticmethod
    def _serialize(value: Any) -> Optional[str]:
        """Nested objects to JSON text"""
        if value is None:
            return None
        return json.dumps(value)
