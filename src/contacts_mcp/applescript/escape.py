"""Escaping for text embedded in AppleScript double-quoted string literals."""

from __future__ import annotations


def escape_applescript(text: str) -> str:
    """Escape ``text`` for safe inclusion in an AppleScript double-quoted string.

    Backslashes must be doubled before quotes are escaped, otherwise the
    backslash inserted in front of each quote would be doubled as well.
    """
    return text.replace("\\", "\\\\").replace('"', '\\"')


def escape_multiline(text: str) -> str:
    """Like :func:`escape_applescript`, also turning newlines into ``\\n``."""
    return escape_applescript(text).replace("\n", "\\n")


def quote(text: str, multiline: bool = False) -> str:
    """Return ``text`` as a complete AppleScript string literal, quotes included."""
    escaped = escape_multiline(text) if multiline else escape_applescript(text)
    return f'"{escaped}"'
