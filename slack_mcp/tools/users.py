"""
Slack User Tools.

Provides user listing and profile information.
"""

from typing import Any, Dict, List, Optional

from slack_sdk import WebClient

from slack_mcp.config import SlackConfig
from slack_mcp.tools.pagination import (
    CURSOR_SCHEMA,
    MAX_PAGE_LIMIT,
    limit_schema,
    page_limit,
)
from slack_mcp.tools.registration import registry

DEFAULT_USER_LIMIT = 100


@registry.tool(
    name="slack_get_users",
    description="Get list of workspace users with basic profile information",
    properties={
        "cursor": CURSOR_SCHEMA,
        "limit": limit_schema(
            f"Maximum users to return (max: {MAX_PAGE_LIMIT})",
            default=DEFAULT_USER_LIMIT,
            maximum=MAX_PAGE_LIMIT,
        ),
    },
)
def list_users(
    client: WebClient, config: SlackConfig, arguments: Dict[str, Any]
) -> List[Dict[str, Any]]:
    """
    List workspace members.

    Args:
        client: Authenticated Slack WebClient
        config: Server configuration
        arguments: cursor and limit (default 100, max 200)

    Returns:
        list: Member objects from users.list
    """
    result = client.users_list(
        limit=page_limit(arguments, DEFAULT_USER_LIMIT, MAX_PAGE_LIMIT),
        cursor=arguments.get("cursor"),
    )
    return result.get("members") or []


@registry.tool(
    name="slack_get_user_profile",
    description="Get detailed profile information for a specific user",
    properties={
        "user_id": {
            "type": "string",
            "description": "The user's ID",
        },
    },
    required=["user_id"],
)
def get_user_info(
    client: WebClient, config: SlackConfig, arguments: Dict[str, Any]
) -> Optional[Dict[str, Any]]:
    """
    Get detailed user profile information.

    Args:
        client: Authenticated Slack WebClient
        config: Server configuration
        arguments: user_id (e.g., U1234567890)

    Returns:
        dict: The user object from users.info
    """
    result = client.users_info(user=arguments.get("user_id"))
    return result.get("user")
