"""
Slack MCP Server.

Exposes Slack channel, message, reaction and user operations as MCP tools
over stdio.
"""

__version__ = "0.1.0"
