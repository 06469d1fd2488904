"""MCP surface: tool catalog, dispatch and the stdio server."""

from contacts_mcp.server.tools import TOOLS, TOOLS_BY_NAME, FieldKind, FieldSpec, ToolSpec
from contacts_mcp.server.dispatch import coerce_arguments, dispatch
from contacts_mcp.server.app import create_server, main, serve

__all__ = [
    "TOOLS",
    "TOOLS_BY_NAME",
    "FieldKind",
    "FieldSpec",
    "ToolSpec",
    "coerce_arguments",
    "dispatch",
    "create_server",
    "main",
    "serve",
]
