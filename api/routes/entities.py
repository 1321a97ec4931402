"""
Domain table browse endpoints with parent-key filters
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from api.dependencies import get_db
from models import User, Post, Comment, Album, Photo, Todo
from schemas.api import (
    UserResponse,
    PostResponse,
    CommentResponse,
    AlbumResponse,
    PhotoResponse,
    TodoResponse,
)
from typing import List, Optional

router = APIRouter(prefix="/api", tags=["Entities"])


async def _list(db: AsyncSession, model, **equals):
    query = select(model)
    for column, value in equals.items():
        if value is not None:
            query = query.where(getattr(model, column) == value)
    result = await db.execute(query.order_by(model.id))
    return result.scalars().all()


@router.get("/users", response_model=List[UserResponse])
async def list_users(db: AsyncSession = Depends(get_db)):
    return await _list(db, User)


@router.get("/posts", response_model=List[PostResponse])
async def list_posts(
    userId: Optional[int] = Query(None),
    db: AsyncSession = Depends(get_db)
):
    return await _list(db, Post, user_id=userId)


@router.get("/comments", response_model=List[CommentResponse])
async def list_comments(
    postId: Optional[int] = Query(None),
    db: AsyncSession = Depends(get_db)
):
    return await _list(db, Comment, post_id=postId)


@router.get("/albums", response_model=List[AlbumResponse])
async def list_albums(
    userId: Optional[int] = Query(None),
    db: AsyncSession = Depends(get_db)
):
    return await _list(db, Album, user_id=userId)


@router.get("/photos", response_model=List[PhotoResponse])
async def list_photos(
    albumId: Optional[int] = Query(None),
    db: AsyncSession = Depends(get_db)
):
    return await _list(db, Photo, album_id=albumId)


@router.get("/todos", response_model=List[TodoResponse])
async def list_todos(
    userId: Optional[int] = Query(None),
    completed: Optional[int] = Query(None, ge=0, le=1, description="Filter by completed flag (0/1)"),
    db: AsyncSession = Depends(get_db)
):
    return await _list(db, Todo, user_id=userId, completed=completed)
