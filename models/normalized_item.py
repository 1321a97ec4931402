from sqlalchemy import Column, Integer, String, Text, DateTime, Index, func
from models.base import Base


class NormalizedItem(Base):
    """
    Flattened per-fetch record of every item the remote API returned.

    Schema Design Philosophy:
    - One wide table shared by all six collections
    - Only the fields relevant to the source collection are populated,
      the rest stay NULL
    - Append-only: fetching the same item twice yields two rows, unlike the
      deduplicated domain tables
    - user_id / post_id / album_id reference domain rows loosely (no FK)

    Field Mapping Strategy:

    /users:    name, email
    /posts:    userId -> user_id, title, body
    /comments: postId -> post_id, name, email, body
    /albums:   userId -> user_id, title
    /photos:   albumId -> album_id, title, url, thumbnailUrl -> thumbnail_url
    /todos:    userId -> user_id, title, completed (0/1)
    """
    __tablename__ = "normalized_items"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Source tracking
    endpoint = Column(String(32), nullable=False)
    item_id = Column(Integer, nullable=True)

    # Relational keys
    user_id = Column(Integer, nullable=True)
    post_id = Column(Integer, nullable=True)
    album_id = Column(Integer, nullable=True)

    # Entity fields
    title = Column(Text, nullable=True)
    name = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True)
    completed = Column(Integer, nullable=True)
    url = Column(String(2048), nullable=True)
    thumbnail_url = Column(String(2048), nullable=True)
    body = Column(Text, nullable=True)

    created_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())

    __table_args__ = (
        Index("idx_items_endpoint", "endpoint"),
        Index("idx_items_user", "user_id"),
        Index("idx_items_post", "post_id"),
        Index("idx_items_album", "album_id"),
        Index("idx_items_completed", "completed"),
        Index("idx_items_created", "created_at"),
    )
