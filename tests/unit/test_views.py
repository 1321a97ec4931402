"""
Unit tests for the read-side reshaping helpers
"""

import json
from datetime import datetime
from types import SimpleNamespace
from api.views import payload_preview, pretty_audit_record, parent_key, group_items


def _item(endpoint, item_id, user_id=None, post_id=None, album_id=None):
    return SimpleNamespace(
        endpoint=endpoint,
        item_id=item_id,
        user_id=user_id,
        post_id=post_id,
        album_id=album_id
    )


class TestPayloadPreview:

    def test_list_truncated_to_three(self):
        preview, total = payload_preview([1, 2, 3, 4, 5])

        assert preview == [1, 2, 3]
        assert total == 5

    def test_short_list(self):
        assert payload_preview([{"id": 1}]) == ([{"id": 1}], 1)
        assert payload_preview([]) == ([], 0)

    def test_object_counts_as_one(self):
        assert payload_preview({"id": 1}) == ([{"id": 1}], 1)

    def test_missing_payload(self):
        assert payload_preview(None) == ([], 0)


def test_pretty_audit_record():
    created = datetime(2024, 1, 15, 10, 0, 0)
    record = SimpleNamespace(
        id=4,
        api_endpoint="/todos",
        parameters=json.dumps({"userId": "1"}),
        response_data=json.dumps([{"id": n} for n in range(1, 6)]),
        created_at=created
    )

    pretty = pretty_audit_record(record)

    assert pretty["id"] == 4
    assert pretty["parameters"] == {"userId": "1"}
    assert pretty["preview"] == [{"id": 1}, {"id": 2}, {"id": 3}]
    assert pretty["total_count"] == 5
    assert pretty["created_at"] == created


class TestParentKey:

    def test_child_endpoints(self):
        assert parent_key(_item("/posts", 1, user_id=1)) == "user:1"
        assert parent_key(_item("/todos", 1, user_id=2)) == "user:2"
        assert parent_key(_item("/albums", 1, user_id=3)) == "user:3"
        assert parent_key(_item("/comments", 1, post_id=4)) == "post:4"
        assert parent_key(_item("/photos", 1, album_id=5)) == "album:5"

    def test_root_keys(self):
        assert parent_key(_item("/users", 1)) == "root"
        assert parent_key(_item("/posts", 1)) == "root"


def test_group_items_keeps_order():
    items = [
        _item("/posts", 1, user_id=1),
        _item("/posts", 11, user_id=2),
        _item("/posts", 2, user_id=1),
        _item("/users", 1),
    ]

    grouped = group_items(items, lambda item: item.item_id)

    assert grouped == {
        "/posts": {"user:1": [1, 2], "user:2": [11]},
        "/users": {"root": [1]},
    }
