"""Helper utility functions."""

import math
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional

from bson import ObjectId

from services.errors import BadRequestError


def is_valid_object_id(value: Any) -> bool:
    """Return True when value is an ObjectId or its 24-char hex form."""
    if isinstance(value, ObjectId):
        return True
    return isinstance(value, str) and ObjectId.is_valid(value)


def normalize_id(value: Any) -> Optional[str]:
    """Normalized comparable form of a stored identifier.

    Sub-items written by older clients may carry their ``_id`` as a plain
    string instead of an ObjectId, so ids are always compared through this.
    """
    if value is None:
        return None
    return str(value)


def ids_match(left: Any, right: Any) -> bool:
    """Compare two identifiers by normalized value rather than by type."""
    normalized = normalize_id(left)
    return normalized is not None and normalized == normalize_id(right)


def serialize_document(value: Any) -> Any:
    """Recursively convert BSON-only types into JSON-friendly values."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, dict):
        return {key: serialize_document(item) for key, item in value.items()}
    if isinstance(value, list):
        return [serialize_document(item) for item in value]
    return value


def resolve_page(page: Optional[int], page_size: Optional[int], default_page_size: int = 10) -> tuple:
    """Clamp page/pageSize to positive integers, falling back to defaults."""
    p = page if page is not None and page > 0 else 1
    size = page_size if page_size is not None and page_size > 0 else default_page_size
    return p, size


def total_pages(total: int, page_size: int) -> int:
    """Number of pages for total items; an empty sequence still has one page."""
    return max(1, math.ceil(total / page_size))


def paginate_items(
    items: List[Any],
    page: Optional[int] = None,
    page_size: Optional[int] = None,
    default_page_size: int = 10,
) -> Dict[str, Any]:
    """Slice an in-memory sequence; out-of-range pages yield an empty list."""
    p, size = resolve_page(page, page_size, default_page_size)
    skip = (p - 1) * size
    total = len(items)
    return {
        "page": p,
        "pageSize": size,
        "total": total,
        "totalPages": total_pages(total, size),
        "items": items[skip:skip + size],
    }


def parse_object_id(value: Any, message: str = "Invalid id") -> ObjectId:
    """Convert a path identifier to an ObjectId, rejecting malformed input."""
    if isinstance(value, ObjectId):
        return value
    if not is_valid_object_id(value):
        raise BadRequestError(message)
    return ObjectId(value)


def to_iso_utc(value: Any) -> Optional[str]:
    """Render a stored datetime as an ISO-8601 UTC string with millisecond precision."""
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
    return str(value)
