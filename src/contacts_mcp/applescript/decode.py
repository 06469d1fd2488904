"""Interpret osascript output as JSON, falling back to the raw text."""

from __future__ import annotations

import json
import logging
from typing import Any

from contacts_mcp.exceptions import ScriptDecodeError

logger = logging.getLogger(__name__)

# Scripts that look up a single record print this when it does not exist.
NULL_OUTPUT = "null"


def decode_output(text: str) -> Any:
    """Decode trimmed script output.

    Empty output decodes to an empty list. Output that is not valid JSON is
    returned unchanged, since some scripts print a bare identifier rather
    than a JSON string.
    """
    if not text:
        return []
    try:
        # Contacts text may hold raw control characters the handlers do not escape.
        return json.loads(text, strict=False)
    except json.JSONDecodeError:
        logger.debug(f"Script output is not JSON, using raw text: {text[:200]}")
        return text


def expect_list(value: Any, what: str) -> list:
    """Ensure a decoded value is a list, raising :class:`ScriptDecodeError` otherwise."""
    if not isinstance(value, list):
        raise ScriptDecodeError(
            f"Unexpected output while reading {what}: {str(value)[:200]}"
        )
    return value


def expect_dict(value: Any, what: str) -> dict:
    """Ensure a decoded value is a JSON object, raising :class:`ScriptDecodeError` otherwise."""
    if not isinstance(value, dict):
        raise ScriptDecodeError(
            f"Unexpected output while reading {what}: {str(value)[:200]}"
        )
    return value
