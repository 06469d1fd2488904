"""Unified exception hierarchy for contacts-mcp."""


class ContactsMCPError(Exception):
    """Base exception for all contacts-mcp errors."""


class ConfigurationError(ContactsMCPError):
    """An environment setting could not be parsed."""


# AppleScript execution
class ScriptError(ContactsMCPError):
    """Base exception for AppleScript interpreter failures."""


class ScriptExecutionError(ScriptError):
    """osascript exited with an error; carries the interpreter's message."""


class ScriptTimeoutError(ScriptError):
    """The script ran longer than the configured timeout."""


class ScriptOutputTooLargeError(ScriptError):
    """The script produced more output than the configured cap."""


class ScriptDecodeError(ScriptError):
    """Script output could not be interpreted in the expected shape."""


class PermissionDeniedError(ScriptError):
    """This process is not authorized to control Contacts.app."""


# Tool dispatch
class ToolError(ContactsMCPError):
    """Base exception for tool dispatch failures."""


class UnknownToolError(ToolError):
    """No tool is registered under the requested name."""


class ToolArgumentError(ToolError):
    """A required tool argument is missing or has the wrong type."""
