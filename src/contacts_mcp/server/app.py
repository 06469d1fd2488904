"""MCP server wiring and the ``contacts-mcp`` entry point."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from contacts_mcp import __version__, config
from contacts_mcp.contacts.client import ContactsClient
from contacts_mcp.exceptions import ContactsMCPError
from contacts_mcp.server.dispatch import dispatch
from contacts_mcp.server.tools import TOOLS

logger = logging.getLogger(__name__)


def error_result(message: str) -> types.CallToolResult:
    """A tool response flagged as an error, so the host can tell it from a result."""
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=f"Error: {message}")],
        isError=True,
    )


def create_server(client: ContactsClient | None = None) -> Server:
    """Build an MCP server whose tools run against ``client``."""
    client = client or ContactsClient()
    server = Server(config.SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [spec.to_tool() for spec in TOOLS]

    # Arguments are checked by dispatch(), which drops mistyped values
    # instead of rejecting the call.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict | None):
        try:
            text = await asyncio.to_thread(dispatch, client, name, arguments)
        except Exception as e:
            # Tracebacks only for failures outside the known hierarchy.
            logger.error(
                f"Error executing tool {name}: {e}",
                exc_info=not isinstance(e, ContactsMCPError),
            )
            return error_result(str(e))
        return [types.TextContent(type="text", text=text)]

    return server


async def serve(client: ContactsClient | None = None) -> None:
    """Serve the Contacts tools over stdio until the host disconnects."""
    server = create_server(client)
    logger.info(f"{config.SERVER_NAME} v{__version__} running on stdio")
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="contacts-mcp",
        description="MCP server for Apple Contacts (macOS).",
    )
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level for stderr output (default: %(default)s)",
    )
    parser.add_argument(
        "--check-permissions",
        action="store_true",
        help="Print Contacts access status as JSON and exit",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    # stdout carries the MCP stream; logs go to stderr.
    logging.basicConfig(
        level=args.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.check_permissions:
        status = ContactsClient().check_permissions()
        print(json.dumps(status.to_dict(), indent=2))
        return 0 if status.contacts else 1

    try:
        asyncio.run(serve())
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except Exception as e:
        logger.critical(f"Fatal error: {e}", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
