"""MCP server exposing Miro boards.

This package implements the Model Context Protocol (MCP) frontend
over miro_boards: board resources, the tool registry and dispatcher,
and the prompt catalog.

MCP tools:
- Validate arguments before any request is made
- Return structured errors with codes
- Map directly to Miro client operations
"""

from mcp_server.dispatcher import Dispatcher
from mcp_server.server import create_server, run_stdio
from mcp_server.tools import registry

__all__ = ["Dispatcher", "create_server", "registry", "run_stdio"]
