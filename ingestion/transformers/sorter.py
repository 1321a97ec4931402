"""
Canonical ordering of fetched collections before they are stored
"""

from typing import Any, Callable, Dict, Tuple

from ingestion.transformers.normalizer import RecordNormalizer
from models.base import Endpoint


def _num(record: Dict[str, Any], key: str) -> int:
    # same parsing as the stored columns; unparseable sorts as 0
    value = RecordNormalizer._parse_int(record.get(key))
    return 0 if value is None else value


def _user_key(record: Dict[str, Any]) -> Tuple:
    return (str(record.get("name") or ""), _num(record, "id"))


def _owned_by(parent_key: str) -> Callable[[Dict[str, Any]], Tuple]:
    def key(record: Dict[str, Any]) -> Tuple:
        return (_num(record, parent_key), _num(record, "id"))
    return key


def _todo_key(record: Dict[str, Any]) -> Tuple:
    # incomplete todos first
    completed = RecordNormalizer._parse_flag(record.get("completed")) or 0
    return (completed, _num(record, "userId"), _num(record, "id"))


SORT_KEYS: Dict[str, Callable[[Dict[str, Any]], Tuple]] = {
    Endpoint.USERS.value: _user_key,
    Endpoint.POSTS.value: _owned_by("userId"),
    Endpoint.ALBUMS.value: _owned_by("userId"),
    Endpoint.PHOTOS.value: _owned_by("albumId"),
    Endpoint.COMMENTS.value: _owned_by("postId"),
    Endpoint.TODOS.value: _todo_key,
}


def sort_records(endpoint: str, data: Any) -> Any:
    """
    Return ``data`` in the canonical order for ``endpoint``.

    Non-list payloads and unknown endpoints pass through unchanged. The
    input list is never mutated.
    """
    if not isinstance(data, list):
        return data

    key = SORT_KEYS.get(endpoint)
    if key is None:
        return list(data)

    return sorted(
        data,
        key=lambda record: key(record) if isinstance(record, dict) else ()
    )
