from sqlalchemy import Column, Integer, String, Text, DateTime, func
from sqlalchemy.orm import relationship
from models.base import Base


class User(Base):
    """
    Deduplicated users, keyed by the remote API id.

    address and company are nested objects upstream and are stored as
    serialized JSON text.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=False)

    name = Column(String(255), nullable=True)
    username = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True)
    phone = Column(String(64), nullable=True)
    website = Column(String(255), nullable=True)
    address = Column(Text, nullable=True)
    company = Column(Text, nullable=True)

    updated_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())

    # Relationships
    posts = relationship("Post", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
    albums = relationship("Album", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
    todos = relationship("Todo", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
