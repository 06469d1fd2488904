"""Runtime settings, read from the environment at import time."""

from __future__ import annotations

import os

from contacts_mcp.exceptions import ConfigurationError

SERVER_NAME = "contacts-mcp"


def _env_number(name: str, default: str, cast=float):
    raw = os.environ.get(name, default)
    try:
        return cast(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e


OSASCRIPT_BIN = os.environ.get("CONTACTS_MCP_OSASCRIPT", "osascript")
OPEN_BIN = os.environ.get("CONTACTS_MCP_OPEN", "open")
APP_NAME = os.environ.get("CONTACTS_MCP_APP_NAME", "Contacts")

SCRIPT_TIMEOUT: float = _env_number("CONTACTS_MCP_TIMEOUT", "30")
MAX_OUTPUT_BYTES: int = _env_number("CONTACTS_MCP_MAX_OUTPUT", str(50 * 1024 * 1024), int)

LOG_LEVEL = os.environ.get("CONTACTS_MCP_LOG_LEVEL", "INFO").upper()
