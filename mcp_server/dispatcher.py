"""Tool dispatch.

Resolves a tool by name, decodes its arguments, runs the handler and
wraps the outcome in a CallToolResult. Nothing raised by a single
invocation escapes: failures become ``isError`` results carrying the
JSON error envelope, so the server loop keeps serving.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import pydantic
from mcp import types

from mcp_server.errors import error_from_exception
from mcp_server.registry import ToolRegistry, text_block
from mcp_server.tools import registry as default_registry
from miro_boards.errors import MiroError, ValidationError

if TYPE_CHECKING:
    from miro_boards.client import MiroClient

logger = logging.getLogger(__name__)


def _format_validation_error(tool: str, exc: pydantic.ValidationError) -> str:
    """Summarize a pydantic error, naming each offending argument."""
    problems = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "arguments"
        problems.append(f"{field}: {error['msg']}")
    return f"Invalid arguments for {tool}: " + "; ".join(problems)


def error_result(exc: BaseException) -> types.CallToolResult:
    """Build a failed tool result from an exception."""
    error = error_from_exception(exc)
    return types.CallToolResult(
        content=[text_block(json.dumps(error.to_dict()))],
        isError=True,
    )


class Dispatcher:
    """Routes tool invocations to their handlers.

    Args:
        client: Miro API client shared by all handlers.
        registry: Tool registry; defaults to the built-in tools.
    """

    def __init__(
        self,
        client: MiroClient,
        registry: ToolRegistry | None = None,
    ) -> None:
        self.client = client
        self.registry = registry if registry is not None else default_registry

    def list_tools(self) -> list[types.Tool]:
        return self.registry.list_tools()

    async def call_tool(
        self, name: str, arguments: dict[str, Any] | None
    ) -> types.CallToolResult:
        """Run one tool invocation.

        Unknown tools and invalid arguments are rejected before any
        request is made.

        Args:
            name: Tool name.
            arguments: Raw arguments from the client.

        Returns:
            CallToolResult; ``isError`` is set on any failure.
        """
        logger.debug("Calling tool %s", name)
        try:
            spec = self.registry.get(name)
            try:
                args = spec.arguments.model_validate(arguments or {})
            except pydantic.ValidationError as e:
                raise ValidationError(_format_validation_error(name, e)) from e
            content = await spec.handler(self.client, args)
        except MiroError as e:
            logger.warning("Tool %s failed: %s", name, e)
            return error_result(e)
        except Exception as e:
            logger.exception("Unexpected error in tool %s", name)
            return error_result(e)
        return types.CallToolResult(content=list(content), isError=False)


__all__ = ["Dispatcher", "error_result"]
