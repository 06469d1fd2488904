"""Tests for argument coercion and dispatch."""

import json

import pytest

from contacts_mcp.contacts.models import LabeledValue
from contacts_mcp.exceptions import ToolArgumentError, UnknownToolError
from contacts_mcp.server.dispatch import coerce_arguments, dispatch
from contacts_mcp.server.tools import TOOLS, TOOLS_BY_NAME


def test_unknown_tool(client, runner):
    with pytest.raises(UnknownToolError, match="Unknown tool: contacts_explode"):
        dispatch(client, "contacts_explode", {})
    assert runner.scripts == []


def test_list_with_no_arguments(client, runner):
    runner.outputs = ["[]"]
    assert json.loads(dispatch(client, "contacts_get_all", None)) == []


def test_result_is_pretty_printed(client, runner):
    runner.outputs = ["GRP9"]
    text = dispatch(client, "contacts_create_group", {"name": "Family"})
    assert text == '{\n  "success": true,\n  "id": "GRP9"\n}'


def test_get_contact_not_found(client, runner):
    runner.outputs = ["null"]
    text = dispatch(client, "contacts_get_contact", {"contact_id": "ABC123"})
    assert json.loads(text) == {"error": "Contact not found"}


def test_search_scenario(client, runner):
    runner.outputs = [json.dumps([{"id": "ABC123", "firstName": "John", "lastName": "Doe"}])]
    results = json.loads(dispatch(client, "contacts_search", {"query": "john"}))
    assert [r["firstName"] for r in results] == ["John"]
    assert results[0]["groups"] == []


def test_create_scenario(client, runner):
    runner.outputs = ["NEW123"]
    text = dispatch(client, "contacts_create", {
        "first_name": "Jane",
        "phones": [{"label": "mobile", "value": "555-1234"}],
    })
    assert json.loads(text) == {"success": True, "id": "NEW123"}
    assert runner.last_script.count("make new phone") == 1
    assert '"555-1234"' in runner.last_script


def test_update_without_fields(client, runner):
    text = dispatch(client, "contacts_update", {"contact_id": "ABC123"})
    assert json.loads(text) == {"success": False, "error": "No updates provided"}
    assert runner.scripts == []


def test_unicode_is_not_escaped(client, runner):
    runner.outputs = [json.dumps([{"id": "G1", "name": "Famille Müller", "contactCount": 2}])]
    assert "Famille Müller" in dispatch(client, "contacts_get_groups", {})


@pytest.mark.parametrize("spec", [s for s in TOOLS if any(f.required for f in s.fields)], ids=lambda s: s.name)
def test_required_fields_checked_before_running(spec, client, runner):
    field = next(f for f in spec.fields if f.required)
    with pytest.raises(ToolArgumentError) as exc_info:
        dispatch(client, spec.name, {})
    assert field.name in str(exc_info.value)
    assert "required" in str(exc_info.value)
    assert runner.scripts == []
    assert runner.opened == []


def test_empty_required_string_is_missing(client, runner):
    with pytest.raises(ToolArgumentError, match="query is required"):
        dispatch(client, "contacts_search", {"query": ""})
    assert runner.scripts == []


def test_second_required_field_named(client, runner):
    with pytest.raises(ToolArgumentError, match="group is required"):
        dispatch(client, "contacts_add_to_group", {"contact_id": "ABC123"})


def test_mistyped_values_are_dropped():
    spec = TOOLS_BY_NAME["contacts_get_all"]
    assert coerce_arguments(spec, {"limit": "10", "group": 5}) == {}
    assert coerce_arguments(spec, {"limit": True}) == {}
    assert coerce_arguments(spec, {"limit": 2.0, "group": "Work"}) == {"limit": 2.0, "group": "Work"}


def test_non_finite_limit_is_dropped():
    spec = TOOLS_BY_NAME["contacts_get_all"]
    assert coerce_arguments(spec, {"limit": float("inf")}) == {}
    assert coerce_arguments(spec, {"limit": float("-inf")}) == {}
    assert coerce_arguments(spec, {"limit": float("nan")}) == {}


def test_non_finite_limit_uses_default(client, runner):
    assert json.loads(dispatch(client, "contacts_get_all", {"limit": float("inf")})) == []
    assert "if itemCount > 100" in runner.last_script


def test_mistyped_required_value_is_missing():
    with pytest.raises(ToolArgumentError, match="contact_id is required"):
        coerce_arguments(TOOLS_BY_NAME["contacts_delete"], {"contact_id": 123})


def test_labeled_values_filtered():
    spec = TOOLS_BY_NAME["contacts_create"]
    coerced = coerce_arguments(spec, {
        "phones": [
            {"label": "home", "value": "1"},
            {"label": "home"},
            "555",
            {"label": 1, "value": "2"},
            {"label": "work", "value": "3"},
        ],
        "emails": "jane@example.com",
    })
    assert coerced == {"phones": [LabeledValue("home", "1"), LabeledValue("work", "3")]}


def test_undeclared_arguments_ignored(client, runner):
    dispatch(client, "contacts_delete", {"contact_id": "ABC123", "force": True})
    assert 'delete person id "ABC123"' in runner.last_script
