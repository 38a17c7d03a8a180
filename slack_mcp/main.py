"""
Main entry point for the Slack MCP server.

Reads SLACK_BOT_TOKEN, SLACK_TEAM_ID and the optional SLACK_CHANNEL_IDS
allow-list from the environment (or a .env file), then serves the Slack
tools over stdio until interrupted.
"""

import asyncio
import logging
import os
import sys

from dotenv import load_dotenv
from mcp.server.stdio import stdio_server
from slack_sdk import WebClient

from slack_mcp.config import ConfigurationError, SlackConfig
from slack_mcp.dispatcher import ToolDispatcher
from slack_mcp.server import create_server

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging() -> None:
    """Send logs to stderr; stdout carries the MCP protocol."""
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


async def serve(config: SlackConfig) -> None:
    """Run the MCP server on stdin/stdout until the stream closes."""
    client = WebClient(token=config.bot_token)
    dispatcher = ToolDispatcher(client, config)
    server = create_server(dispatcher)

    if config.channel_ids:
        logger.info(f"Channel listing restricted to {len(config.channel_ids)} channel(s)")

    async with stdio_server() as (read_stream, write_stream):
        logger.info("Slack MCP server running on stdio")
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def main() -> None:
    load_dotenv()
    configure_logging()

    try:
        config = SlackConfig.from_env()
    except ConfigurationError as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        asyncio.run(serve(config))
    except KeyboardInterrupt:
        logger.info("Received interrupt, shutting down")


if __name__ == "__main__":
    main()
