"""AppleScript execution: escaping, the osascript runner and output decoding."""

from contacts_mcp.applescript.escape import escape_applescript, escape_multiline, quote
from contacts_mcp.applescript.runner import (
    BaseScriptRunner,
    OsascriptRunner,
    PERMISSION_DENIED_MESSAGE,
    classify_failure,
)
from contacts_mcp.applescript.decode import NULL_OUTPUT, decode_output, expect_dict, expect_list

__all__ = [
    "escape_applescript",
    "escape_multiline",
    "quote",
    "BaseScriptRunner",
    "OsascriptRunner",
    "PERMISSION_DENIED_MESSAGE",
    "classify_failure",
    "NULL_OUTPUT",
    "decode_output",
    "expect_dict",
    "expect_list",
]
