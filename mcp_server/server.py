"""MCP server implementation.

This module wires the Miro client into a low-level MCP Server:
- resources: one ``miro://board/<id>`` resource per board
- tools: the static registry, dispatched by Dispatcher
- prompts: the static prompt catalog

Board resources are listed from the service on every request, so the
server is built with explicit handlers rather than decorators on a
module-level instance.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from pydantic import AnyUrl

from mcp_server.dispatcher import Dispatcher
from mcp_server.registry import ToolRegistry
from miro_boards import __version__
from miro_boards.client import MiroClient
from miro_boards.config import ClientConfig
from miro_boards.prompts import list_prompts, load_prompt
from miro_boards.resources import list_board_resources, read_board_resource

logger = logging.getLogger(__name__)

SERVER_NAME = "mcp-miro"


def create_server(
    client: MiroClient,
    prompt_path: Path,
    registry: ToolRegistry | None = None,
) -> Server:
    """Build the MCP server around a Miro client.

    Args:
        client: Miro API client used by every handler.
        prompt_path: File holding the prompt body.
        registry: Tool registry; defaults to the built-in tools.

    Returns:
        Configured low-level Server.
    """
    server: Server = Server(SERVER_NAME, version=__version__)
    dispatcher = Dispatcher(client, registry)

    @server.list_resources()
    async def handle_list_resources() -> list[types.Resource]:
        resources = await list_board_resources(client)
        return [
            types.Resource(
                uri=AnyUrl(resource.uri),
                name=resource.name,
                description=resource.description,
                mimeType=resource.mime_type,
            )
            for resource in resources
        ]

    @server.read_resource()
    async def handle_read_resource(uri: AnyUrl) -> list[ReadResourceContents]:
        text = await read_board_resource(client, str(uri))
        return [ReadResourceContents(content=text, mime_type="application/json")]

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return dispatcher.list_tools()

    @server.call_tool(validate_input=False)
    async def handle_call_tool(
        name: str, arguments: dict[str, Any] | None
    ) -> types.CallToolResult:
        return await dispatcher.call_tool(name, arguments)

    @server.list_prompts()
    async def handle_list_prompts() -> list[types.Prompt]:
        return [
            types.Prompt(name=prompt.name, description=prompt.description)
            for prompt in list_prompts()
        ]

    @server.get_prompt()
    async def handle_get_prompt(
        name: str, arguments: dict[str, str] | None
    ) -> types.GetPromptResult:
        text = load_prompt(name, prompt_path)
        return types.GetPromptResult(
            messages=[
                types.PromptMessage(
                    role="user",
                    content=types.TextContent(type="text", text=text),
                )
            ]
        )

    return server


async def run_stdio(config: ClientConfig, prompt_path: Path) -> None:
    """Serve MCP over stdin/stdout until the client disconnects.

    Args:
        config: Miro connection settings.
        prompt_path: File holding the prompt body.
    """
    async with MiroClient(config) as client:
        server = create_server(client, prompt_path)
        logger.info("Starting %s %s on stdio", SERVER_NAME, __version__)
        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
    logger.info("%s stopped", SERVER_NAME)


__all__ = ["SERVER_NAME", "create_server", "run_stdio"]
