"""
Integration tests for the complete fetch pipeline
"""

import json
import pytest
from sqlalchemy import select, func, delete
from ingestion.runner import FetchRunner
from models import AuditRecord, NormalizedItem, User, Post, Comment, Album, Photo, Todo


async def _count(session, model, *criteria) -> int:
    query = select(func.count()).select_from(model)
    if criteria:
        query = query.where(*criteria)
    return (await session.execute(query)).scalar_one()


@pytest.mark.asyncio
async def test_full_fetch_pipeline_integration(db_session, fetcher):
    """
    Integration test: Fetch → Sort → Normalize → Load → Audit
    """
    runner = FetchRunner(db_session, fetcher)

    result = await runner.run("/users")

    # Sorted by name before anything is stored
    assert [u["name"] for u in result["data"]] == ["Ervin Howell", "Leanne Graham"]
    assert result["items_stored"] == 2
    assert result["saved_id"] is not None

    audit = (await db_session.execute(select(AuditRecord))).scalar_one()
    assert audit.id == result["saved_id"]
    assert audit.api_endpoint == "/users"
    assert json.loads(audit.response_data) == result["data"]

    assert await _count(db_session, User) == 2
    assert await _count(db_session, NormalizedItem, NormalizedItem.endpoint == "/users") == 2


@pytest.mark.asyncio
async def test_pipeline_idempotency(db_session, fetcher):
    """
    Fetching the same collection twice keeps one domain row per id while the
    item log and the audit log grow with every fetch
    """
    runner = FetchRunner(db_session, fetcher)

    await runner.run("/posts")
    await runner.run("/posts")

    assert await _count(db_session, Post) == 3
    assert await _count(db_session, NormalizedItem) == 6
    assert await _count(db_session, AuditRecord) == 2


@pytest.mark.asyncio
async def test_todos_filtered_and_sorted(db_session, fetcher, remote_api):
    """Incomplete todos come first; the filter is forwarded to the remote API"""
    runner = FetchRunner(db_session, fetcher)

    result = await runner.run("/todos", {"userId": 1, "postId": None, "albumId": ""})

    assert [t["id"] for t in result["data"]] == [1, 3, 2, 4]
    assert dict(remote_api.requests[-1].url.params) == {"userId": "1"}

    audit = (await db_session.execute(select(AuditRecord))).scalar_one()
    assert json.loads(audit.parameters) == {"userId": 1}

    completed = (await db_session.execute(
        select(Todo.completed).order_by(Todo.id)
    )).scalars().all()
    assert completed == [0, 1, 0, 1]


@pytest.mark.asyncio
async def test_unknown_filter_keys_ignored(db_session, fetcher, remote_api):
    await FetchRunner(db_session, fetcher).run("/albums", {"userId": 2, "sort": "desc"})

    assert dict(remote_api.requests[-1].url.params) == {"userId": "2"}
    assert await _count(db_session, Album) == 1


@pytest.mark.asyncio
async def test_children_before_parents(db_session, fetcher):
    """Photos fetched before albums get stub albums, later filled in"""
    runner = FetchRunner(db_session, fetcher)

    await runner.run("/photos")

    stub = (await db_session.execute(select(Album).where(Album.id == 1))).scalar_one()
    assert stub.title is None
    assert await _count(db_session, Photo) == 3

    await runner.run("/albums")

    await db_session.refresh(stub)
    assert stub.title == "quidem molestiae enim"
    assert await _count(db_session, Album) == 2


@pytest.mark.asyncio
async def test_single_object_payload(db_session, fetcher, remote_api):
    remote_api.collections["/users"] = {"id": 5, "name": "Chelsey Dietrich"}

    result = await FetchRunner(db_session, fetcher).run("/users")

    assert result["data"] == {"id": 5, "name": "Chelsey Dietrich"}
    assert result["items_stored"] == 1
    assert await _count(db_session, User) == 1


@pytest.mark.asyncio
async def test_records_without_id_only_reach_item_log(db_session, fetcher, remote_api):
    remote_api.collections["/posts"] = [{"userId": 1, "title": "no id"}, {"userId": 1, "id": 1}]

    result = await FetchRunner(db_session, fetcher).run("/posts")

    assert result["items_stored"] == 2
    assert await _count(db_session, Post) == 1


@pytest.mark.asyncio
async def test_delete_user_cascades(db_session, fetcher):
    """Deleting a user removes their posts, albums, todos and everything below"""
    runner = FetchRunner(db_session, fetcher)
    for endpoint in ("/users", "/posts", "/comments", "/albums", "/photos", "/todos"):
        await runner.run(endpoint)

    await db_session.execute(delete(User).where(User.id == 1))
    await db_session.commit()

    assert await _count(db_session, Post, Post.user_id == 1) == 0
    assert await _count(db_session, Album, Album.user_id == 1) == 0
    assert await _count(db_session, Todo, Todo.user_id == 1) == 0
    assert await _count(db_session, Comment, Comment.post_id.in_([1, 2])) == 0
    assert await _count(db_session, Photo, Photo.album_id == 1) == 0

    # user 2 is untouched
    assert await _count(db_session, Post) == 1
    assert await _count(db_session, Comment) == 1
    assert await _count(db_session, Photo) == 1
    assert await _count(db_session, Todo) == 1

    # the logs are not tied to the domain tables
    assert await _count(db_session, NormalizedItem) == 18
    assert await _count(db_session, AuditRecord) == 6


@pytest.mark.asyncio
async def test_delete_post_cascades_to_comments(db_session, fetcher):
    runner = FetchRunner(db_session, fetcher)
    await runner.run("/comments")

    await db_session.execute(delete(Post).where(Post.id == 1))
    await db_session.commit()

    assert await _count(db_session, Comment) == 1
