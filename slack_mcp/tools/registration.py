"""
Tool Registry.

Maps each tool name to its MCP descriptor and handler. The catalog served on
tools/list and the dispatch table used on tools/call are both read from here.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional

from mcp import types
from slack_sdk import WebClient

from slack_mcp.config import SlackConfig

logger = logging.getLogger(__name__)

ToolHandler = Callable[[WebClient, SlackConfig, Dict[str, Any]], Any]


@dataclass(frozen=True)
class RegisteredTool:
    descriptor: types.Tool
    handler: ToolHandler

    @property
    def name(self) -> str:
        return self.descriptor.name


class ToolRegistry:
    """Ordered registration table of Slack tools."""

    def __init__(self):
        self._tools: Dict[str, RegisteredTool] = {}

    def tool(
        self,
        name: str,
        description: str,
        properties: Optional[Dict[str, Dict[str, Any]]] = None,
        required: Optional[List[str]] = None,
    ) -> Callable[[ToolHandler], ToolHandler]:
        """
        Register a handler under a tool name.

        Args:
            name: Tool name advertised to MCP clients (must be unique)
            description: Human readable description
            properties: JSON Schema properties of the tool arguments
            required: Names of arguments the caller must supply

        Returns:
            Decorator that registers and returns the handler unchanged
        """
        input_schema: Dict[str, Any] = {
            "type": "object",
            "properties": properties or {},
        }
        if required:
            input_schema["required"] = list(required)

        def decorator(func: ToolHandler) -> ToolHandler:
            if name in self._tools:
                raise ValueError(f"Tool already registered: {name}")
            descriptor = types.Tool(
                name=name,
                description=description,
                inputSchema=input_schema,
            )
            self._tools[name] = RegisteredTool(descriptor=descriptor, handler=func)
            logger.debug(f"Registered tool {name}")
            return func

        return decorator

    def get(self, name: str) -> Optional[RegisteredTool]:
        return self._tools.get(name)

    def descriptors(self) -> List[types.Tool]:
        """Return the tool catalog in registration order."""
        return [entry.descriptor for entry in self._tools.values()]

    def names(self) -> List[str]:
        return list(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[RegisteredTool]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)


# Shared registry populated by the tool modules on import
registry = ToolRegistry()
