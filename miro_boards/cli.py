"""Thin CLI wrapper for miro_boards.

This module provides the command-line interface using Typer.
``serve`` runs the MCP server over stdio; stdout belongs to the
protocol, so logs and errors go to stderr.
"""

import asyncio
import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from miro_boards import __version__
from miro_boards.config import get_settings, print_settings_json
from miro_boards.errors import StartupError

app = typer.Typer(
    name="miro-mcp",
    help="Miro MCP server - expose Miro boards to MCP clients",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"miro-boards-mcp version {__version__}")
        raise typer.Exit()


def configure_logging(level: str) -> None:
    """Send log records to stderr through Rich."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True)],
        force=True,
    )


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Miro MCP server - expose Miro boards to MCP clients."""


@app.command()
def serve(
    token: Annotated[
        str | None,
        typer.Option(
            "--token",
            "-t",
            help="Miro OAuth token (overrides MIRO_OAUTH_TOKEN)",
        ),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Logging level (overrides MIRO_LOG_LEVEL)"),
    ] = None,
) -> None:
    """Run the MCP server on stdin/stdout."""
    from mcp_server.server import run_stdio

    settings = get_settings()
    configure_logging(log_level or settings.log_level)

    try:
        client_config = settings.client_config(token)
    except StartupError as e:
        err_console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(code=1) from None

    try:
        asyncio.run(run_stdio(client_config, settings.prompt_path))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        logging.getLogger(__name__).exception("Server stopped with an error")
        err_console.print(f"[red]Server error: {e}[/red]")
        raise typer.Exit(code=1) from None


@app.command()
def config(
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON"),
    ] = False,
) -> None:
    """Show effective configuration."""
    settings = get_settings()
    if json_output:
        print(print_settings_json(settings))
    else:
        token_display = "set" if settings.oauth_token else "(not set)"
        console.print("[bold]Effective Configuration:[/bold]")
        console.print()
        console.print(f"  OAuth token:   {token_display}")
        console.print(f"  API base URL:  {settings.api_base_url}")
        console.print(f"  Prompt file:   {settings.prompt_path}")
        console.print(f"  Log level:     {settings.log_level}")


@app.command()
def tools(
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output input schemas as JSON"),
    ] = False,
) -> None:
    """List the tools exposed to MCP clients."""
    from mcp_server.tools import describe_tools

    if json_output:
        print(describe_tools(as_json=True))
    else:
        console.print(describe_tools())


if __name__ == "__main__":
    app()
