"""
Slack Message Tools.

Provides message posting, thread replies, reactions, and history retrieval.
"""

from typing import Any, Dict, List

from slack_sdk import WebClient

from slack_mcp.config import SlackConfig
from slack_mcp.tools.pagination import limit_schema, page_limit
from slack_mcp.tools.registration import registry

DEFAULT_HISTORY_LIMIT = 10


@registry.tool(
    name="slack_post_message",
    description="Post a new message to a Slack channel",
    properties={
        "channel_id": {
            "type": "string",
            "description": "The ID of the channel to post to",
        },
        "text": {
            "type": "string",
            "description": "The message text to post",
        },
    },
    required=["channel_id", "text"],
)
def post_message(
    client: WebClient, config: SlackConfig, arguments: Dict[str, Any]
) -> Dict[str, Any]:
    """
    Send a message to a Slack channel.

    Args:
        client: Authenticated Slack WebClient
        config: Server configuration
        arguments: channel_id and text

    Returns:
        dict: Full chat.postMessage response
    """
    result = client.chat_postMessage(
        channel=arguments.get("channel_id"),
        text=arguments.get("text"),
    )
    return result.data


@registry.tool(
    name="slack_reply_to_thread",
    description="Reply to a specific message thread",
    properties={
        "channel_id": {
            "type": "string",
            "description": "The channel containing the thread",
        },
        "thread_ts": {
            "type": "string",
            "description": "Timestamp of the parent message",
        },
        "text": {
            "type": "string",
            "description": "The reply text",
        },
    },
    required=["channel_id", "thread_ts", "text"],
)
def reply_to_thread(
    client: WebClient, config: SlackConfig, arguments: Dict[str, Any]
) -> Dict[str, Any]:
    """
    Reply to a thread in a channel.

    Args:
        client: Authenticated Slack WebClient
        config: Server configuration
        arguments: channel_id, thread_ts and text

    Returns:
        dict: Full chat.postMessage response
    """
    result = client.chat_postMessage(
        channel=arguments.get("channel_id"),
        thread_ts=arguments.get("thread_ts"),
        text=arguments.get("text"),
    )
    return result.data


@registry.tool(
    name="slack_add_reaction",
    description="Add an emoji reaction to a message",
    properties={
        "channel_id": {
            "type": "string",
            "description": "The channel containing the message",
        },
        "timestamp": {
            "type": "string",
            "description": "Message timestamp to react to",
        },
        "reaction": {
            "type": "string",
            "description": "Emoji name without colons",
        },
    },
    required=["channel_id", "timestamp", "reaction"],
)
def add_reaction(
    client: WebClient, config: SlackConfig, arguments: Dict[str, Any]
) -> Dict[str, Any]:
    """Add an emoji reaction (e.g. "thumbsup") to a message."""
    result = client.reactions_add(
        channel=arguments.get("channel_id"),
        timestamp=arguments.get("timestamp"),
        name=arguments.get("reaction"),
    )
    return result.data


@registry.tool(
    name="slack_get_channel_history",
    description="Get recent messages from a channel",
    properties={
        "channel_id": {
            "type": "string",
            "description": "The channel ID",
        },
        "limit": limit_schema(
            "Number of messages to retrieve",
            default=DEFAULT_HISTORY_LIMIT,
        ),
    },
    required=["channel_id"],
)
def get_channel_history(
    client: WebClient, config: SlackConfig, arguments: Dict[str, Any]
) -> List[Dict[str, Any]]:
    """
    Get message history from a channel.

    The limit is forwarded as given; Slack applies its own ceiling.

    Args:
        client: Authenticated Slack WebClient
        config: Server configuration
        arguments: channel_id and limit (default 10)

    Returns:
        list: Messages, newest first
    """
    result = client.conversations_history(
        channel=arguments.get("channel_id"),
        limit=page_limit(arguments, DEFAULT_HISTORY_LIMIT),
    )
    return result.get("messages") or []


@registry.tool(
    name="slack_get_thread_replies",
    description="Get all replies in a message thread",
    properties={
        "channel_id": {
            "type": "string",
            "description": "The channel containing the thread",
        },
        "thread_ts": {
            "type": "string",
            "description": "Timestamp of the parent message",
        },
    },
    required=["channel_id", "thread_ts"],
)
def get_thread_replies(
    client: WebClient, config: SlackConfig, arguments: Dict[str, Any]
) -> List[Dict[str, Any]]:
    """Get the parent message and its replies from conversations.replies."""
    result = client.conversations_replies(
        channel=arguments.get("channel_id"),
        ts=arguments.get("thread_ts"),
    )
    return result.get("messages") or []
