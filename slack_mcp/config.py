"""
Configuration Management for Slack MCP

Loads the bot credentials and the optional channel allow-list from the
process environment once at startup. The resulting SlackConfig is passed
explicitly to the tool dispatcher so nothing downstream reads os.environ.
"""

import os
from dataclasses import dataclass, field
from typing import FrozenSet, Mapping, Optional


class ConfigurationError(ValueError):
    """Raised when a required setting is missing from the environment."""


def parse_channel_ids(raw: Optional[str]) -> Optional[FrozenSet[str]]:
    """
    Parse a comma-separated list of channel IDs.

    Args:
        raw: Value of SLACK_CHANNEL_IDS, e.g. "C01, C02"

    Returns:
        Frozen set of trimmed IDs, or None when no IDs are configured
    """
    if not raw:
        return None
    channel_ids = frozenset(cid.strip() for cid in raw.split(",") if cid.strip())
    return channel_ids or None


@dataclass(frozen=True)
class SlackConfig:
    """
    Settings for a single Slack workspace.

    Attributes:
        bot_token: Bot token (xoxb-...) used for every API call
        team_id: Workspace the channel listing is scoped to
        channel_ids: Optional allow-list restricting slack_list_channels
    """

    bot_token: str = field(repr=False)
    team_id: str
    channel_ids: Optional[FrozenSet[str]] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SlackConfig":
        """
        Build the configuration from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Raises:
            ConfigurationError: If SLACK_BOT_TOKEN or SLACK_TEAM_ID is unset
        """
        env = os.environ if environ is None else environ

        bot_token = env.get("SLACK_BOT_TOKEN")
        if not bot_token:
            raise ConfigurationError("SLACK_BOT_TOKEN environment variable is required")

        team_id = env.get("SLACK_TEAM_ID")
        if not team_id:
            raise ConfigurationError("SLACK_TEAM_ID environment variable is required")

        return cls(
            bot_token=bot_token,
            team_id=team_id,
            channel_ids=parse_channel_ids(env.get("SLACK_CHANNEL_IDS")),
        )

    def is_channel_allowed(self, channel_id: Optional[str]) -> bool:
        """Check a channel against the allow-list (everything passes without one)."""
        if not self.channel_ids:
            return True
        return channel_id in self.channel_ids
