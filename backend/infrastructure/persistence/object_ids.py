"""ObjectId coercion shared by the user repositories."""

from typing import Any, Dict, Optional

from bson import ObjectId
from bson.errors import InvalidId


def to_object_id(value: Any) -> Optional[ObjectId]:
    """
    Coerce an id to ObjectId.

    Args:
        value: ObjectId or 24-char hex string

    Returns:
        ObjectId, or None if ``value`` cannot be an ObjectId
    """
    if isinstance(value, ObjectId):
        return value
    if value is None:
        return None
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


def normalize_criteria(criteria: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Return a copy of ``criteria`` with a string ``_id`` converted to ObjectId.

    Values that cannot be ObjectIds are left as given, so they match nothing.
    """
    normalized = dict(criteria or {})
    if "_id" in normalized:
        object_id = to_object_id(normalized["_id"])
        if object_id is not None:
            normalized["_id"] = object_id
    return normalized
