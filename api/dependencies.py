"""
FastAPI dependencies: storage session and remote fetcher
"""

from typing import AsyncGenerator
from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession
from ingestion.extractors.api_extractor import RemoteFetcher


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Session from the Database the app was built with"""
    async with request.app.state.database.session_maker() as session:
        yield session


def get_fetcher(request: Request) -> RemoteFetcher:
    return request.app.state.fetcher
