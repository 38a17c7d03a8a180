"""
Slack Channel Tools.

Provides public channel listing, optionally restricted to an allow-list.
"""

from typing import Any, Dict, List

from slack_sdk import WebClient

from slack_mcp.config import SlackConfig
from slack_mcp.tools.pagination import (
    CURSOR_SCHEMA,
    MAX_PAGE_LIMIT,
    limit_schema,
    page_limit,
)
from slack_mcp.tools.registration import registry

DEFAULT_CHANNEL_LIMIT = 100


@registry.tool(
    name="slack_list_channels",
    description="List public or pre-defined channels in the workspace",
    properties={
        "limit": limit_schema(
            f"Maximum number of channels to return (max: {MAX_PAGE_LIMIT})",
            default=DEFAULT_CHANNEL_LIMIT,
            maximum=MAX_PAGE_LIMIT,
        ),
        "cursor": CURSOR_SCHEMA,
    },
)
def list_channels(
    client: WebClient, config: SlackConfig, arguments: Dict[str, Any]
) -> List[Dict[str, Any]]:
    """
    List public channels of the configured team.

    Args:
        client: Authenticated Slack WebClient
        config: Server configuration (team and channel allow-list)
        arguments: limit (default 100, max 200) and cursor

    Returns:
        list: Channel objects as returned by conversations.list, filtered to
        the allow-list when one is configured
    """
    result = client.conversations_list(
        limit=page_limit(arguments, DEFAULT_CHANNEL_LIMIT, MAX_PAGE_LIMIT),
        cursor=arguments.get("cursor"),
        types="public_channel",
        team_id=config.team_id,
    )

    channels = result.get("channels") or []
    if config.channel_ids:
        channels = [ch for ch in channels if config.is_channel_allowed(ch.get("id"))]
    return channels
