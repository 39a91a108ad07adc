"""Field selectors shared by the MongoDB and in-memory repositories."""

from typing import Any, Dict, List, Optional, Union

FieldSelector = Union[str, List[str]]


def build_projection(fields: Optional[FieldSelector]) -> Optional[Dict[str, int]]:
    """Convert a field selector into a MongoDB projection.

    Args:
        fields: ``"name email"``, ``"-password"`` or a list of names

    Returns:
        Projection dict, or None when nothing is selected

    Raises:
        ValueError: If inclusion and exclusion are mixed (``_id`` excepted)

    Examples:
        >>> build_projection("-password -totpSecret")
        {'password': 0, 'totpSecret': 0}
        >>> build_projection(["name", "email"])
        {'name': 1, 'email': 1}
    """
    if not fields:
        return None

    names = fields.split() if isinstance(fields, str) else list(fields)
    projection: Dict[str, int] = {}
    for name in names:
        if name.startswith("-"):
            projection[name[1:]] = 0
        else:
            projection[name.lstrip("+")] = 1

    modes = {flag for key, flag in projection.items() if key != "_id"}
    if len(modes) > 1:
        raise ValueError(f"Cannot mix inclusion and exclusion in field selector: {fields}")

    return projection or None


def apply_projection(
    document: Dict[str, Any], projection: Optional[Dict[str, int]]
) -> Dict[str, Any]:
    """Apply a projection to a document held in memory."""
    if not projection:
        return document

    inclusive = any(flag == 1 for key, flag in projection.items() if key != "_id")
    if inclusive:
        keep = [key for key, flag in projection.items() if flag == 1]
        if projection.get("_id", 1) == 1 and "_id" not in keep:
            keep.insert(0, "_id")
        return {key: document[key] for key in keep if key in document}

    return {key: value for key, value in document.items() if projection.get(key, 1) != 0}
