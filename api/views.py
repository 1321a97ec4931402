"""
Reshaping helpers for the read endpoints
"""

from typing import Any, Dict, Iterable, List, Tuple
import json

from models.audit import AuditRecord
from models.base import Endpoint
from models.normalized_item import NormalizedItem

PREVIEW_SIZE = 3

# endpoint -> (parent label, item attribute holding the parent id)
PARENT_KEYS: Dict[str, Tuple[str, str]] = {
    Endpoint.POSTS.value: ("user", "user_id"),
    Endpoint.TODOS.value: ("user", "user_id"),
    Endpoint.ALBUMS.value: ("user", "user_id"),
    Endpoint.COMMENTS.value: ("post", "post_id"),
    Endpoint.PHOTOS.value: ("album", "album_id"),
}


def _loads(text: Any, default: Any) -> Any:
    if text is None or text == "":
        return default
    try:
        return json.loads(text)
    except (TypeError, ValueError):
        return default


def payload_preview(payload: Any) -> Tuple[List[Any], int]:
    """First PREVIEW_SIZE items of a list payload and its length; an object counts as one"""
    if isinstance(payload, list):
        return payload[:PREVIEW_SIZE], len(payload)
    if payload is None:
        return [], 0
    return [payload], 1


def pretty_audit_record(record: AuditRecord) -> Dict[str, Any]:
    payload = _loads(record.response_data, None)
    preview, total_count = payload_preview(payload)
    return {
        "id": record.id,
        "api_endpoint": record.api_endpoint,
        "parameters": _loads(record.parameters, {}),
        "preview": preview,
        "total_count": total_count,
        "created_at": record.created_at,
    }


def parent_key(item: NormalizedItem) -> str:
    """Grouping key for an item: user:<id>, post:<id>, album:<id> or root"""
    mapping = PARENT_KEYS.get(item.endpoint)
    if mapping is None:
        return "root"
    label, attribute = mapping
    parent_id = getattr(item, attribute)
    if parent_id is None:
        return "root"
    return f"{label}:{parent_id}"


def group_items(items: Iterable[NormalizedItem], serialize) -> Dict[str, Dict[str, List[Any]]]:
    """Bucket items by endpoint, then by parent key, keeping input order"""
    grouped: Dict[str, Dict[str, List[Any]]] = {}
    for item in items:
        bucket = grouped.setdefault(item.endpoint, {})
        bucket.setdefault(parent_key(item), []).append(serialize(item))
    return grouped
