"""MCP server over stdio."""

import asyncio
import sys
from typing import Any

import logfire
import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from publisher import __version__
from publisher.config import Settings
from publisher.interface.mcp.handlers import ToolDispatcher
from publisher.interface.mcp.tools import TOOLS
from publisher.util.di.container import create_container
from publisher.util.logging import setup_logging
from publisher.util.observability import configure_logfire, instrument_httpx

SERVER_NAME = "halo-blog-publisher"


def create_server(dispatcher: ToolDispatcher) -> Server:
    """Create the MCP server and register tool handlers.

    Args:
        dispatcher: Tool dispatcher bound to the DI container

    Returns:
        Configured low-level MCP server
    """
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return TOOLS

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
        # A raised ToolError becomes an isError result carrying its message
        text = await dispatcher.call(name, arguments)
        return [types.TextContent(type="text", text=text)]

    return server


async def serve() -> None:
    """Run the server until the host closes stdin."""
    container = create_container()
    server = create_server(ToolDispatcher(container))

    try:
        async with stdio_server() as (read_stream, write_stream):
            logfire.info("Halo MCP server started", server=SERVER_NAME)
            await server.run(
                read_stream, write_stream, server.create_initialization_options()
            )
    finally:
        await container.close()


def main() -> int:
    """Configure observability and run the stdio server."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)
    instrument_httpx()

    try:
        asyncio.run(serve())
        return 0
    except Exception as e:
        logfire.error(
            "MCP server failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
