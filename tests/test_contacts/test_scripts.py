"""Tests for generated AppleScript."""

import pytest

from contacts_mcp.contacts import scripts
from contacts_mcp.contacts.models import LabeledValue


def test_list_script_without_group():
    script = scripts.list_contacts_script(100)
    assert "set allPeople to people\n" in script
    assert "if itemCount > 100 then set itemCount to 100" in script
    assert "on personJSON(p, fullDetail)" in script


def test_list_script_with_group_is_escaped():
    script = scripts.list_contacts_script(10, group='Best "Friends"')
    assert 'set allPeople to people of group "Best \\"Friends\\""' in script


def test_get_script_looks_up_by_id():
    script = scripts.get_contact_script("ABC123")
    assert 'set p to person id "ABC123"' in script
    assert 'return "null"' in script


def test_search_script_embeds_query_and_limit():
    script = scripts.search_contacts_script('o"brien', 7)
    assert 'set searchQuery to "o\\"brien"' in script
    assert "if matchCount >= 7 then exit repeat" in script
    assert "my personJSON(contents of p, false)" in script


def test_search_script_match_order():
    script = scripts.search_contacts_script("555", 10)
    names = script.index("{first name of p, last name of p, organization of p, nickname of p}")
    phones = script.index("repeat with ph in phones of p")
    emails = script.index("repeat with em in emails of p")
    assert names < phones < emails

    # Names and emails ignore case; phone numbers are compared as stored.
    first_ignoring = script.index("ignoring case")
    first_end = script.index("end ignoring")
    second_ignoring = script.index("ignoring case", first_end)
    assert first_ignoring < names < first_end
    assert first_end < phones < second_ignoring < emails

    # Later checks only run while nothing has matched yet.
    guard = "if not matched then"
    assert script.rindex(guard, 0, phones) > first_end
    assert script.rindex(guard, 0, emails) > phones
    assert script.count(guard) == 2


def test_create_script_statements_in_order():
    script = scripts.create_contact_script(
        first_name="Jane",
        last_name="",
        company="",
        job_title="",
        phones=[LabeledValue("mobile", "555-1234"), LabeledValue("work", "555-9999")],
        emails=[LabeledValue("home", "jane@example.com")],
        note="line one\nline two",
    )
    assert script.count("make new phone") == 2
    assert script.count("make new email") == 1
    assert script.index("555-1234") < script.index("555-9999") < script.index("jane@example.com")
    assert 'note:"line one\\nline two"' in script
    assert script.count("save") == 1
    assert "return id of newPerson" in script


def test_update_script_only_given_fields():
    script = scripts.update_contact_script("ABC", {"nickname": "JD", "note": 'a\n"b"'})
    assert 'set nickname of thePerson to "JD"' in script
    assert 'set note of thePerson to "a\\n\\"b\\""' in script
    assert "first name" not in script


def test_update_script_requires_changes():
    with pytest.raises(ValueError):
        scripts.update_contact_script("ABC", {})


def test_delete_group_script():
    script = scripts.delete_group_script("Work")
    assert 'delete group "Work"' in script
    assert "delete person" not in script


def test_membership_scripts():
    add = scripts.add_to_group_script("ABC", "Work")
    remove = scripts.remove_from_group_script("ABC", "Work")
    assert "add thePerson to theGroup" in add
    assert "remove thePerson from theGroup" in remove
    assert 'set theGroup to group "Work"' in add
    assert "make new group" not in add


def test_open_contact_script():
    script = scripts.open_contact_script('evil" & (do shell script "ls") & "')
    assert "activate" in script
    assert 'person id "evil\\" & (do shell script \\"ls\\") & \\""' in script
