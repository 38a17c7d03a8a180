"""Tests for slack_mcp.config."""

import pytest

from slack_mcp.config import ConfigurationError, SlackConfig, parse_channel_ids


class TestParseChannelIds:
    """Tests for the SLACK_CHANNEL_IDS parser."""

    def test_none_when_unset(self):
        assert parse_channel_ids(None) is None

    def test_none_when_empty(self):
        assert parse_channel_ids("") is None

    def test_trims_whitespace(self):
        assert parse_channel_ids(" C1 ,C2,  C3") == frozenset({"C1", "C2", "C3"})

    def test_drops_empty_entries(self):
        assert parse_channel_ids("C1,,C2,") == frozenset({"C1", "C2"})

    def test_only_separators_means_no_allow_list(self):
        assert parse_channel_ids(" , ,") is None


class TestSlackConfigFromEnv:
    """Tests for SlackConfig.from_env."""

    def test_reads_required_values(self):
        config = SlackConfig.from_env(
            {"SLACK_BOT_TOKEN": "xoxb-1", "SLACK_TEAM_ID": "T1"}
        )
        assert config.bot_token == "xoxb-1"
        assert config.team_id == "T1"
        assert config.channel_ids is None

    def test_reads_channel_allow_list(self):
        config = SlackConfig.from_env(
            {
                "SLACK_BOT_TOKEN": "xoxb-1",
                "SLACK_TEAM_ID": "T1",
                "SLACK_CHANNEL_IDS": "C1, C2",
            }
        )
        assert config.channel_ids == frozenset({"C1", "C2"})

    def test_missing_token_raises(self):
        with pytest.raises(ConfigurationError, match="SLACK_BOT_TOKEN"):
            SlackConfig.from_env({"SLACK_TEAM_ID": "T1"})

    def test_empty_token_raises(self):
        with pytest.raises(ConfigurationError, match="SLACK_BOT_TOKEN"):
            SlackConfig.from_env({"SLACK_BOT_TOKEN": "", "SLACK_TEAM_ID": "T1"})

    def test_missing_team_raises(self):
        with pytest.raises(ConfigurationError, match="SLACK_TEAM_ID"):
            SlackConfig.from_env({"SLACK_BOT_TOKEN": "xoxb-1"})

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            SlackConfig.from_env({})

    def test_defaults_to_process_environment(self, monkeypatch):
        monkeypatch.setenv("SLACK_BOT_TOKEN", "xoxb-env")
        monkeypatch.setenv("SLACK_TEAM_ID", "T-env")
        monkeypatch.delenv("SLACK_CHANNEL_IDS", raising=False)
        config = SlackConfig.from_env()
        assert config.bot_token == "xoxb-env"
        assert config.team_id == "T-env"

    def test_token_not_in_repr(self):
        config = SlackConfig(bot_token="xoxb-secret", team_id="T1")
        assert "xoxb-secret" not in repr(config)


class TestIsChannelAllowed:
    """Tests for SlackConfig.is_channel_allowed."""

    def test_everything_allowed_without_list(self, config):
        assert config.is_channel_allowed("C999")

    def test_listed_channel_allowed(self, allow_list_config):
        assert allow_list_config.is_channel_allowed("C1")

    def test_unlisted_channel_rejected(self, allow_list_config):
        assert not allow_list_config.is_channel_allowed("C3")
