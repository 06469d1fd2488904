"""Catalog of the tools exposed over MCP.

Each :class:`ToolSpec` names the :class:`~contacts_mcp.contacts.ContactsClient`
method it calls. Field names double as that method's keyword arguments.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any

from mcp import types


class FieldKind(Enum):
    STRING = "string"
    NUMBER = "number"
    LABELED_VALUES = "labeled_values"


@dataclass(frozen=True)
class FieldSpec:
    name: str
    kind: FieldKind
    description: str
    required: bool = False
    # (label description, value description) for LABELED_VALUES fields
    item_descriptions: tuple[str, str] | None = None

    def schema(self) -> dict[str, Any]:
        if self.kind is FieldKind.LABELED_VALUES:
            label_desc, value_desc = self.item_descriptions or ("Label", "Value")
            return {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "label": {"type": "string", "description": label_desc},
                        "value": {"type": "string", "description": value_desc},
                    },
                    "required": ["label", "value"],
                },
                "description": self.description,
            }
        return {"type": self.kind.value, "description": self.description}


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    operation: str
    fields: tuple[FieldSpec, ...] = ()
    # Payload returned when the operation yields None.
    not_found: str | None = None

    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {f.name: f.schema() for f in self.fields},
            "required": [f.name for f in self.fields if f.required],
        }

    def to_tool(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema(),
        )


def _string(name: str, description: str, required: bool = False) -> FieldSpec:
    return FieldSpec(name, FieldKind.STRING, description, required)


def _contact_id(description: str = "The contact ID") -> FieldSpec:
    return _string("contact_id", description, required=True)


TOOLS: tuple[ToolSpec, ...] = (
    ToolSpec(
        name="contacts_check_permissions",
        description="Check if the MCP server has permission to access Apple Contacts.",
        operation="check_permissions",
    ),
    ToolSpec(
        name="contacts_get_all",
        description="Get all contacts or contacts in a specific group.",
        operation="list_contacts",
        fields=(
            FieldSpec("limit", FieldKind.NUMBER, "Maximum contacts to return (default: 100)"),
            _string("group", "Filter by group name (optional)"),
        ),
    ),
    ToolSpec(
        name="contacts_get_contact",
        description="Get a specific contact by ID with full details.",
        operation="get_contact",
        fields=(_contact_id(),),
        not_found="Contact not found",
    ),
    ToolSpec(
        name="contacts_search",
        description="Search contacts by name, phone, email, or company.",
        operation="search_contacts",
        fields=(
            _string("query", "Search text", required=True),
            FieldSpec("limit", FieldKind.NUMBER, "Maximum results (default: 50)"),
        ),
    ),
    ToolSpec(
        name="contacts_create",
        description="Create a new contact.",
        operation="create_contact",
        fields=(
            _string("first_name", "First name"),
            _string("last_name", "Last name"),
            _string("company", "Company/organization"),
            _string("job_title", "Job title"),
            FieldSpec(
                "phones",
                FieldKind.LABELED_VALUES,
                "Phone numbers",
                item_descriptions=("Phone label (home, work, mobile, etc.)", "Phone number"),
            ),
            FieldSpec(
                "emails",
                FieldKind.LABELED_VALUES,
                "Email addresses",
                item_descriptions=("Email label (home, work, etc.)", "Email address"),
            ),
            _string("note", "Notes"),
        ),
    ),
    ToolSpec(
        name="contacts_update",
        description="Update an existing contact's information.",
        operation="update_contact",
        fields=(
            _contact_id("The contact ID to update"),
            _string("first_name", "New first name"),
            _string("last_name", "New last name"),
            _string("company", "New company"),
            _string("job_title", "New job title"),
            _string("nickname", "New nickname"),
            _string("note", "New notes"),
        ),
    ),
    ToolSpec(
        name="contacts_delete",
        description="Delete a contact.",
        operation="delete_contact",
        fields=(_contact_id("The contact ID to delete"),),
    ),
    ToolSpec(
        name="contacts_get_groups",
        description="Get all contact groups.",
        operation="list_groups",
    ),
    ToolSpec(
        name="contacts_create_group",
        description="Create a new contact group.",
        operation="create_group",
        fields=(_string("name", "Group name", required=True),),
    ),
    ToolSpec(
        name="contacts_delete_group",
        description="Delete a contact group.",
        operation="delete_group",
        fields=(_string("name", "Group name to delete", required=True),),
    ),
    ToolSpec(
        name="contacts_add_to_group",
        description="Add a contact to a group.",
        operation="add_to_group",
        fields=(_contact_id("Contact ID"), _string("group", "Group name", required=True)),
    ),
    ToolSpec(
        name="contacts_remove_from_group",
        description="Remove a contact from a group.",
        operation="remove_from_group",
        fields=(_contact_id("Contact ID"), _string("group", "Group name", required=True)),
    ),
    ToolSpec(
        name="contacts_open",
        description="Open the Contacts app.",
        operation="open_app",
    ),
    ToolSpec(
        name="contacts_open_contact",
        description="Open a specific contact in the Contacts app.",
        operation="open_contact",
        fields=(_contact_id("Contact ID to open"),),
    ),
)

TOOLS_BY_NAME = MappingProxyType({spec.name: spec for spec in TOOLS})
