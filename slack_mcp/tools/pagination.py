"""
Pagination helpers shared by the listing tools.

Cursors are opaque and passed back to Slack untouched; only page sizes are
interpreted here.
"""

from typing import Any, Dict, Optional

# Upper bound advertised for conversations.list and users.list page sizes
MAX_PAGE_LIMIT = 200


def page_limit(
    arguments: Dict[str, Any],
    default: int,
    maximum: Optional[int] = None,
) -> Any:
    """
    Resolve the "limit" argument of a tool call.

    Args:
        arguments: Raw tool arguments
        default: Value used when limit is absent or null
        maximum: Clamp applied before the value is sent upstream (None = unclamped)

    Returns:
        The page size to send to Slack
    """
    limit = arguments.get("limit")
    if limit is None:
        limit = default
    if maximum is not None:
        limit = min(limit, maximum)
    return limit


def limit_schema(description: str, default: int, maximum: Optional[int] = None) -> Dict[str, Any]:
    """JSON Schema for a numeric page size argument."""
    schema: Dict[str, Any] = {
        "type": "number",
        "description": description,
        "default": default,
    }
    if maximum is not None:
        schema["maximum"] = maximum
    return schema


CURSOR_SCHEMA = {
    "type": "string",
    "description": "Pagination cursor for next page",
}
