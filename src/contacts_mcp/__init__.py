"""Apple Contacts exposed as Model Context Protocol tools (macOS only)."""

__version__ = "1.0.0"
