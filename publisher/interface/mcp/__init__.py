"""MCP tool interface."""

from .handlers import ToolDispatcher
from .server import create_server, main
from .tools import TOOLS

__all__ = ["TOOLS", "ToolDispatcher", "create_server", "main"]
