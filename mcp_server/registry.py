"""Static tool registry.

Maps tool names to their argument model and handler. Handlers are
coroutines taking the Miro client and the decoded arguments and
returning the content blocks of a successful result.
"""

from __future__ import annotations

import json
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from mcp import types

from mcp_server.schemas import ToolArguments
from miro_boards.errors import UnknownToolError

if TYPE_CHECKING:
    from miro_boards.client import MiroClient

Content = list[types.TextContent]
Handler = Callable[["MiroClient", Any], Awaitable[Content]]


def text_block(text: str) -> types.TextContent:
    """Wrap a string as a text content block."""
    return types.TextContent(type="text", text=text)


def json_block(value: Any) -> types.TextContent:
    """Render a value as pretty-printed JSON in a text block."""
    return text_block(json.dumps(value, indent=2))


@dataclass(frozen=True)
class ToolSpec:
    """A registered tool.

    Attributes:
        name: Tool name (the wire contract).
        description: Human-readable description.
        arguments: Pydantic model that decodes the arguments.
        handler: Coroutine performing the call.
    """

    name: str
    description: str
    arguments: type[ToolArguments]
    handler: Handler

    def input_schema(self) -> dict[str, Any]:
        """Return the JSON schema of the tool's arguments."""
        return self.arguments.model_json_schema(by_alias=True)

    def to_tool(self) -> types.Tool:
        """Describe the tool for ``tools/list``."""
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema(),
        )


class ToolRegistry:
    """Name-keyed collection of tools, in registration order."""

    def __init__(self) -> None:
        self._tools: dict[str, ToolSpec] = {}

    def tool(
        self,
        name: str,
        arguments: type[ToolArguments],
        description: str,
    ) -> Callable[[Handler], Handler]:
        """Register the decorated coroutine as a tool handler.

        Args:
            name: Tool name.
            arguments: Argument model.
            description: Tool description.

        Returns:
            Decorator returning the handler unchanged.

        Raises:
            ValueError: If the name is already registered.
        """

        def decorator(handler: Handler) -> Handler:
            if name in self._tools:
                raise ValueError(f"Tool already registered: {name}")
            self._tools[name] = ToolSpec(name, description, arguments, handler)
            return handler

        return decorator

    def get(self, name: str) -> ToolSpec:
        """Look up a tool.

        Raises:
            UnknownToolError: If no tool has that name.
        """
        try:
            return self._tools[name]
        except KeyError:
            raise UnknownToolError(name) from None

    def names(self) -> list[str]:
        return list(self._tools)

    def specs(self) -> list[ToolSpec]:
        return list(self._tools.values())

    def list_tools(self) -> list[types.Tool]:
        """Describe every tool for ``tools/list``."""
        return [spec.to_tool() for spec in self._tools.values()]


__all__ = [
    "Content",
    "Handler",
    "ToolRegistry",
    "ToolSpec",
    "json_block",
    "text_block",
]
