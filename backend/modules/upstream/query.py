"""
Query string serialization for upstream requests.

ClickUp expects array filters as JSON text and booleans in lowercase.
"""

import json
from typing import Any, Mapping, Optional


def serialize_value(value: Any) -> str:
    """Serialize one query value the way the upstream API expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return json.dumps(list(value), separators=(",", ":"))
    return str(value)


def build_query(params: Optional[Mapping[str, Any]]) -> list[tuple[str, str]]:
    """
    Turn filter parameters into ordered query pairs.

    None values are omitted, everything else goes through serialize_value().
    """
    if not params:
        return []
    return [
        (key, serialize_value(value))
        for key, value in params.items()
        if value is not None
    ]
