"""
Slack MCP Tools Module.

Organized tool implementations for Slack API operations:
- channels: Channel listing
- messages: Posting, replies, reactions, and history
- users: User listing and profiles

Importing this package registers every tool on the shared registry, in
catalog order.
"""

from .registration import RegisteredTool, ToolRegistry, registry
from .channels import list_channels
from .messages import (
    add_reaction,
    get_channel_history,
    get_thread_replies,
    post_message,
    reply_to_thread,
)
from .users import get_user_info, list_users

__all__ = [
    "RegisteredTool",
    "ToolRegistry",
    "registry",
    "list_channels",
    "post_message",
    "reply_to_thread",
    "add_reaction",
    "get_channel_history",
    "get_thread_replies",
    "list_users",
    "get_user_info",
]
