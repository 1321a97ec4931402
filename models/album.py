from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from models.base import Base


class Album(Base):
    """Albums owned by a user; deleting the user removes them."""
    __tablename__ = "albums"

    id = Column(Integer, primary_key=True, autoincrement=False)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=True, index=True)

    title = Column(Text, nullable=True)

    updated_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())

    user = relationship("User", back_populates="albums")
    photos = relationship("Photo", back_populates="album", cascade="all, delete-orphan", passive_deletes=True)


class Photo(Base):
    """Photos in an album; deleting the album removes them."""
    __tablename__ = "photos"

    id = Column(Integer, primary_key=True, autoincrement=False)
    album_id = Column(Integer, ForeignKey("albums.id", ondelete="CASCADE"), nullable=True, index=True)

    title = Column(Text, nullable=True)
    url = Column(String(2048), nullable=True)
    thumbnail_url = Column(String(2048), nullable=True)

    updated_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())

    album = relationship("Album", back_populates="photos")
