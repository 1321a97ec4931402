"""
Load normalized rows into SQLite with upsert logic (idempotency)
"""

from typing import Dict, Iterable, List, Optional, Sequence, Type
from pydantic import BaseModel
from sqlalchemy import func
from sqlalchemy.dialects.sqlite import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from models import Base, Endpoint, NormalizedItem, User, Post, Comment, Album, Photo, Todo
from schemas.normalized import (
    NormalizedItemCreate,
    UserRow,
    PostRow,
    CommentRow,
    AlbumRow,
    PhotoRow,
    TodoRow,
)
from core.exceptions import StorageError
import logging

logger = logging.getLogger(__name__)


class SQLiteLoader:
    """
    Load data into the domain tables with idempotent upsert operations.

    Ensures:
    - No duplicate rows on repeated fetches (INSERT ... ON CONFLICT(id) DO UPDATE)
    - Every non-key column is overwritten with the latest remote value
    - One fetch batch is committed atomically or not at all
    - Child rows never point at a missing parent: a key-only stub parent is
      inserted first and filled in when the parent collection is fetched
    """

    def __init__(self, db_session: AsyncSession):
        self.db = db_session

    async def load(
        self,
        endpoint: str,
        items: Sequence[NormalizedItemCreate],
        rows: Sequence[BaseModel]
    ) -> int:
        """
        Upsert domain rows and append item rows for one fetch as one transaction.

        Returns:
            Number of item rows appended

        Raises:
            StorageError: Any database failure; nothing from the batch is kept
        """
        try:
            await self.upsert(endpoint, rows)
            await self.append_items(items)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Load failed for {endpoint}, batch rolled back: {str(e)}")
            raise StorageError(
                str(e),
                context={
                    "operation": "UPSERT",
                    "endpoint": endpoint,
                    "rows": len(rows),
                    "items": len(items)
                },
                original_exception=e
            )

        logger.info(f"Loaded {len(rows)} {endpoint} rows and {len(items)} items")
        return len(items)

    async def upsert(self, endpoint: str, rows: Sequence[BaseModel]) -> int:
        """Dispatch to the upsert for ``endpoint``"""
        handler = {
            Endpoint.USERS.value: self.upsert_users,
            Endpoint.POSTS.value: self.upsert_posts,
            Endpoint.COMMENTS.value: self.upsert_comments,
            Endpoint.ALBUMS.value: self.upsert_albums,
            Endpoint.PHOTOS.value: self.upsert_photos,
            Endpoint.TODOS.value: self.upsert_todos,
        }[endpoint]
        return await handler(list(rows))

    async def upsert_users(self, rows: List[UserRow]) -> int:
        return await self._upsert(User, rows)

    async def upsert_posts(self, rows: List[PostRow]) -> int:
        await self._ensure_parents(User, (row.user_id for row in rows))
        return await self._upsert(Post, rows)

    async def upsert_comments(self, rows: List[CommentRow]) -> int:
        await self._ensure_parents(Post, (row.post_id for row in rows))
        return await self._upsert(Comment, rows)

    async def upsert_albums(self, rows: List[AlbumRow]) -> int:
        await self._ensure_parents(User, (row.user_id for row in rows))
        return await self._upsert(Album, rows)

    async def upsert_photos(self, rows: List[PhotoRow]) -> int:
        await self._ensure_parents(Album, (row.album_id for row in rows))
        return await self._upsert(Photo, rows)

    async def upsert_todos(self, rows: List[TodoRow]) -> int:
        await self._ensure_parents(User, (row.user_id for row in rows))
        return await self._upsert(Todo, rows)

    async def append_items(self, items: Sequence[NormalizedItemCreate]) -> int:
        """Append item rows; never deduplicated"""
        if not items:
            return 0
        await self.db.execute(
            insert(NormalizedItem.__table__),
            [item.model_dump() for item in items]
        )
        return len(items)

    async def _upsert(self, model: Type[Base], rows: Sequence[BaseModel]) -> int:
        if not rows:
            return 0

        stmt = insert(model.__table__)
        update_columns: Dict[str, object] = {
            column.name: stmt.excluded[column.name]
            for column in model.__table__.columns
            if column.name not in ("id", "updated_at")
        }
        update_columns["updated_at"] = func.current_timestamp()

        stmt = stmt.on_conflict_do_update(
            index_elements=["id"],
            set_=update_columns
        )

        await self.db.execute(stmt, [row.model_dump() for row in rows])
        logger.debug(f"Upserted {len(rows)} rows into {model.__tablename__}")
        return len(rows)

    async def _ensure_parents(self, model: Type[Base], parent_ids: Iterable[Optional[int]]) -> int:
        ids = sorted({parent_id for parent_id in parent_ids if parent_id is not None})
        if not ids:
            return 0

        stmt = insert(model.__table__).on_conflict_do_nothing(index_elements=["id"])
        await self.db.execute(stmt, [{"id": parent_id} for parent_id in ids])
        return len(ids)
