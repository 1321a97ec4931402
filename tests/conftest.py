"""
Pytest configuration and fixtures
"""

import copy
import pytest
import pytest_asyncio
import httpx
from typing import AsyncGenerator, Dict, List
from sqlalchemy.ext.asyncio import AsyncSession
from core.database import Database
from ingestion.extractors.api_extractor import RemoteFetcher

REMOTE_BASE_URL = "https://jsonplaceholder.test"


@pytest_asyncio.fixture(scope="function")
async def database(tmp_path) -> AsyncGenerator[Database, None]:
    """File-backed SQLite database with all tables created"""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'test_api_data.db'}")
    await db.create_all()

    yield db

    await db.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(database) -> AsyncGenerator[AsyncSession, None]:
    """Create database session for tests"""
    async with database.session_maker() as session:
        yield session
        await session.rollback()


@pytest.fixture
def mock_users():
    return [
        {
            "id": 1,
            "name": "Leanne Graham",
            "username": "Bret",
            "email": "Sincere@april.biz",
            "address": {
                "street": "Kulas Light",
                "city": "Gwenborough",
                "geo": {"lat": "-37.3159", "lng": "81.1496"}
            },
            "phone": "1-770-736-8031 x56442",
            "website": "hildegard.org",
            "company": {"name": "Romaguera-Crona", "bs": "harness real-time e-markets"}
        },
        {
            "id": 2,
            "name": "Ervin Howell",
            "username": "Antonette",
            "email": "Shanna@melissa.tv",
            "address": {"street": "Victor Plains", "city": "Wisokyburgh"},
            "phone": "010-692-6593 x09125",
            "website": "anastasia.net",
            "company": {"name": "Deckow-Crist"}
        }
    ]


@pytest.fixture
def mock_posts():
    return [
        {"userId": 2, "id": 11, "title": "et ea vero quia laudantium autem", "body": "delectus reiciendis"},
        {"userId": 1, "id": 2, "title": "qui est esse", "body": "est rerum tempore"},
        {"userId": 1, "id": 1, "title": "sunt aut facere", "body": "quia et suscipit"}
    ]


@pytest.fixture
def mock_comments():
    return [
        {"postId": 11, "id": 51, "name": "molestias et odio", "email": "Samara@ora.biz", "body": "vero aut"},
        {"postId": 1, "id": 2, "name": "quo vero reiciendis", "email": "Jayne_Kuhic@sydney.com", "body": "est natus"},
        {"postId": 1, "id": 1, "name": "id labore ex et quam", "email": "Eliseo@gardner.biz", "body": "laudantium"}
    ]


@pytest.fixture
def mock_albums():
    return [
        {"userId": 2, "id": 11, "title": "quam nostrum impedit"},
        {"userId": 1, "id": 1, "title": "quidem molestiae enim"}
    ]


@pytest.fixture
def mock_photos():
    return [
        {
            "albumId": 11,
            "id": 501,
            "title": "asperiores nobis",
            "url": "https://via.placeholder.com/600/8be9c5",
            "thumbnailUrl": "https://via.placeholder.com/150/8be9c5"
        },
        {
            "albumId": 1,
            "id": 2,
            "title": "reprehenderit est deserunt",
            "url": "https://via.placeholder.com/600/771796",
            "thumbnailUrl": "https://via.placeholder.com/150/771796"
        },
        {
            "albumId": 1,
            "id": 1,
            "title": "accusamus beatae ad",
            "url": "https://via.placeholder.com/600/92c952",
            "thumbnailUrl": "https://via.placeholder.com/150/92c952"
        }
    ]


@pytest.fixture
def mock_todos():
    """Deliberately out of order: incomplete and complete todos interleaved"""
    return [
        {"userId": 1, "id": 4, "title": "et porro tempora", "completed": True},
        {"userId": 1, "id": 2, "title": "quis ut nam facilis", "completed": True},
        {"userId": 2, "id": 21, "title": "suscipit repellat esse", "completed": False},
        {"userId": 1, "id": 3, "title": "fugiat veniam minus", "completed": False},
        {"userId": 1, "id": 1, "title": "delectus aut autem", "completed": False}
    ]


@pytest.fixture
def remote_collections(mock_users, mock_posts, mock_comments, mock_albums, mock_photos, mock_todos):
    return {
        "/users": mock_users,
        "/posts": mock_posts,
        "/comments": mock_comments,
        "/albums": mock_albums,
        "/photos": mock_photos,
        "/todos": mock_todos,
    }


class FakeRemoteAPI:
    """
    Stand-in for the remote REST API behind an httpx.MockTransport.

    Filters collections by query parameters the way the real API does and
    records every request it receives.
    """

    def __init__(self, collections: Dict[str, List[dict]]):
        self.collections = collections
        self.requests: List[httpx.Request] = []
        self.fail_with_status = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if self.fail_with_status is not None:
            return httpx.Response(self.fail_with_status, json={})

        records = self.collections.get(request.url.path)
        if records is None:
            return httpx.Response(404, json={})

        for key, value in request.url.params.items():
            records = [r for r in records if str(r.get(key)) == value]

        return httpx.Response(200, json=copy.deepcopy(records))

    def fetcher(self) -> RemoteFetcher:
        return RemoteFetcher(
            base_url=REMOTE_BASE_URL,
            transport=httpx.MockTransport(self.handler)
        )


@pytest.fixture
def remote_api(remote_collections) -> FakeRemoteAPI:
    return FakeRemoteAPI(remote_collections)


@pytest.fixture
def fetcher(remote_api) -> RemoteFetcher:
    return remote_api.fetcher()
