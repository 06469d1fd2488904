"""macOS Contacts.app operations (requires osascript)."""

from contacts_mcp.contacts.client import ContactsClient, DEFAULT_LIST_LIMIT, DEFAULT_SEARCH_LIMIT
from contacts_mcp.contacts.models import (
    Contact,
    ContactGroup,
    LabeledValue,
    MutationResult,
    PermissionStatus,
)

__all__ = [
    "ContactsClient",
    "DEFAULT_LIST_LIMIT",
    "DEFAULT_SEARCH_LIMIT",
    "Contact",
    "ContactGroup",
    "LabeledValue",
    "MutationResult",
    "PermissionStatus",
]
