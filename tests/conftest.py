"""Shared fixtures for Slack MCP tests."""

from typing import Any, Dict
from unittest.mock import MagicMock

import pytest
from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError
from slack_sdk.web.slack_response import SlackResponse

from slack_mcp.config import SlackConfig
from slack_mcp.dispatcher import ToolDispatcher


def make_response(data: Dict[str, Any], api_method: str = "api.test") -> SlackResponse:
    """Build a SlackResponse like the ones WebClient returns."""
    return SlackResponse(
        client=None,
        http_verb="POST",
        api_url=f"https://slack.com/api/{api_method}",
        req_args={},
        data=data,
        headers={},
        status_code=200,
    )


def make_api_error(code: str) -> SlackApiError:
    """Build the SlackApiError raised for an ok=false response."""
    return SlackApiError(
        "The request to the Slack API failed.",
        make_response({"ok": False, "error": code}),
    )


@pytest.fixture
def config():
    return SlackConfig(bot_token="xoxb-test", team_id="T123")


@pytest.fixture
def allow_list_config():
    return SlackConfig(
        bot_token="xoxb-test",
        team_id="T123",
        channel_ids=frozenset({"C1", "C2"}),
    )


@pytest.fixture
def slack_client():
    return MagicMock(spec=WebClient)


@pytest.fixture
def dispatcher(slack_client, config):
    return ToolDispatcher(slack_client, config)
