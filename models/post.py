from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from models.base import Base


class Post(Base):
    """Posts owned by a user; deleting the user removes them."""
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, autoincrement=False)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=True, index=True)

    title = Column(Text, nullable=True)
    body = Column(Text, nullable=True)

    updated_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())

    user = relationship("User", back_populates="posts")
    comments = relationship("Comment", back_populates="post", cascade="all, delete-orphan", passive_deletes=True)


class Comment(Base):
    """Comments on a post; deleting the post removes them."""
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, autoincrement=False)
    post_id = Column(Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=True, index=True)

    name = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True)
    body = Column(Text, nullable=True)

    updated_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())

    post = relationship("Post", back_populates="comments")
