"""AppleScript source for each Contacts operation.

Every value supplied by a caller reaches a script only through
:func:`~contacts_mcp.applescript.escape.quote`. Records are serialized to JSON
inside the script by the handlers in ``HANDLERS``, which escape each text
field and turn ``missing value`` into an empty string.
"""

from __future__ import annotations

from contacts_mcp.applescript.escape import quote
from contacts_mcp.contacts.models import LabeledValue

HANDLERS = r'''
on replaceText(theText, searchText, replacementText)
    set savedDelimiters to AppleScript's text item delimiters
    set AppleScript's text item delimiters to searchText
    set textItems to text items of theText
    set AppleScript's text item delimiters to replacementText
    set theText to textItems as text
    set AppleScript's text item delimiters to savedDelimiters
    return theText
end replaceText

on textOf(theValue)
    if theValue is missing value then return ""
    return theValue as text
end textOf

on jsonString(theValue)
    set theText to my textOf(theValue)
    set theText to my replaceText(theText, "\\", "\\\\")
    set theText to my replaceText(theText, "\"", "\\\"")
    set theText to my replaceText(theText, return & linefeed, "\\n")
    set theText to my replaceText(theText, return, "\\n")
    set theText to my replaceText(theText, linefeed, "\\n")
    set theText to my replaceText(theText, tab, "\\t")
    return "\"" & theText & "\""
end jsonString

on labeledJSON(entries)
    tell application "Contacts"
        set output to "["
        repeat with j from 1 to count of entries
            set theEntry to item j of entries
            set entryLabel to label of theEntry
            if entryLabel is missing value then set entryLabel to "other"
            if j > 1 then set output to output & ","
            set output to output & "{\"label\":" & my jsonString(entryLabel) & ",\"value\":" & my jsonString(value of theEntry) & "}"
        end repeat
    end tell
    return output & "]"
end labeledJSON

on groupNamesJSON(p)
    tell application "Contacts"
        try
            set personGroups to groups of p
        on error
            set personGroups to {}
        end try
        set output to "["
        repeat with j from 1 to count of personGroups
            if j > 1 then set output to output & ","
            set output to output & my jsonString(name of item j of personGroups)
        end repeat
    end tell
    return output & "]"
end groupNamesJSON

on personJSON(p, fullDetail)
    tell application "Contacts"
        set output to "{\"id\":" & my jsonString(id of p)
        set output to output & ",\"firstName\":" & my jsonString(first name of p)
        set output to output & ",\"lastName\":" & my jsonString(last name of p)
        set output to output & ",\"nickname\":" & my jsonString(nickname of p)
        set output to output & ",\"company\":" & my jsonString(organization of p)
        set output to output & ",\"jobTitle\":" & my jsonString(job title of p)
        set output to output & ",\"phones\":" & my labeledJSON(phones of p)
        set output to output & ",\"emails\":" & my labeledJSON(emails of p)
        set output to output & ",\"addresses\":[]"
        if fullDetail then
            set output to output & ",\"department\":" & my jsonString(department of p)
            set output to output & ",\"note\":" & my jsonString(note of p)
            set birthDate to birth date of p
            if birthDate is missing value then
                set output to output & ",\"birthday\":\"\""
            else
                set output to output & ",\"birthday\":" & my jsonString(birthDate as «class isot» as string)
            end if
            set output to output & ",\"groups\":" & my groupNamesJSON(p)
        else
            set output to output & ",\"groups\":[]"
        end if
    end tell
    return output & "}"
end personJSON
'''

PERMISSION_PROBE_SCRIPT = 'tell application "Contacts" to count of people'

# Python field name -> Contacts person property.
UPDATABLE_PROPERTIES = {
    "first_name": "first name",
    "last_name": "last name",
    "company": "organization",
    "job_title": "job title",
    "nickname": "nickname",
    "note": "note",
}
MULTILINE_FIELDS = frozenset({"note"})


def _with_handlers(body: str) -> str:
    return f"{body.strip()}\n{HANDLERS}"


def list_contacts_script(limit: int, group: str | None = None) -> str:
    source = f"people of group {quote(group)}" if group else "people"
    return _with_handlers(f'''
tell application "Contacts"
    set allPeople to {source}
    set itemCount to count of allPeople
    if itemCount > {limit} then set itemCount to {limit}
    set output to "["
    repeat with i from 1 to itemCount
        if i > 1 then set output to output & ","
        set output to output & my personJSON(item i of allPeople, true)
    end repeat
    return output & "]"
end tell
''')


def get_contact_script(contact_id: str) -> str:
    return _with_handlers(f'''
tell application "Contacts"
    try
        set p to person id {quote(contact_id)}
    on error
        return "null"
    end try
    return my personJSON(p, true)
end tell
''')


def search_contacts_script(query: str, limit: int) -> str:
    """Search script; ``query`` is expected to be lower-cased already."""
    return _with_handlers(f'''
tell application "Contacts"
    set searchQuery to {quote(query)}
    set matchCount to 0
    set output to "["
    set allPeople to people
    repeat with p in allPeople
        if matchCount >= {limit} then exit repeat
        set matched to false
        ignoring case
            repeat with fieldValue in {{first name of p, last name of p, organization of p, nickname of p}}
                if my textOf(contents of fieldValue) contains searchQuery then
                    set matched to true
                    exit repeat
                end if
            end repeat
        end ignoring
        if not matched then
            repeat with ph in phones of p
                if my textOf(value of ph) contains searchQuery then
                    set matched to true
                    exit repeat
                end if
            end repeat
        end if
        if not matched then
            ignoring case
                repeat with em in emails of p
                    if my textOf(value of em) contains searchQuery then
                        set matched to true
                        exit repeat
                    end if
                end repeat
            end ignoring
        end if
        if matched then
            if matchCount > 0 then set output to output & ","
            set output to output & my personJSON(contents of p, false)
            set matchCount to matchCount + 1
        end if
    end repeat
    return output & "]"
end tell
''')


def create_contact_script(
    first_name: str,
    last_name: str,
    company: str,
    job_title: str,
    phones: list[LabeledValue],
    emails: list[LabeledValue],
    note: str,
) -> str:
    properties = ", ".join([
        f"first name:{quote(first_name)}",
        f"last name:{quote(last_name)}",
        f"organization:{quote(company)}",
        f"job title:{quote(job_title)}",
        f"note:{quote(note, multiline=True)}",
    ])
    statements = [f"set newPerson to make new person with properties {{{properties}}}"]
    for phone in phones:
        statements.append(
            "make new phone at end of phones of newPerson with properties "
            f"{{label:{quote(phone.label)}, value:{quote(phone.value)}}}"
        )
    for email in emails:
        statements.append(
            "make new email at end of emails of newPerson with properties "
            f"{{label:{quote(email.label)}, value:{quote(email.value)}}}"
        )
    body = "\n    ".join(statements)
    return f'''
tell application "Contacts"
    {body}
    save
    return id of newPerson
end tell
'''


def update_contact_script(contact_id: str, changes: dict[str, str]) -> str:
    """Build the update script for ``changes`` (keys from ``UPDATABLE_PROPERTIES``)."""
    if not changes:
        raise ValueError("changes must not be empty")
    assignments = "\n    ".join(
        f"set {UPDATABLE_PROPERTIES[name]} of thePerson to "
        f"{quote(value, multiline=name in MULTILINE_FIELDS)}"
        for name, value in changes.items()
    )
    return f'''
tell application "Contacts"
    set thePerson to person id {quote(contact_id)}
    {assignments}
    save
    return "done"
end tell
'''


def delete_contact_script(contact_id: str) -> str:
    return f'''
tell application "Contacts"
    delete person id {quote(contact_id)}
    save
    return "done"
end tell
'''


def list_groups_script() -> str:
    return _with_handlers('''
tell application "Contacts"
    set output to "["
    set allGroups to groups
    repeat with i from 1 to count of allGroups
        set g to item i of allGroups
        if i > 1 then set output to output & ","
        set output to output & "{\\"id\\":" & my jsonString(id of g)
        set output to output & ",\\"name\\":" & my jsonString(name of g)
        set output to output & ",\\"contactCount\\":" & (count of people of g) & "}"
    end repeat
    return output & "]"
end tell
''')


def create_group_script(name: str) -> str:
    return f'''
tell application "Contacts"
    set newGroup to make new group with properties {{name:{quote(name)}}}
    save
    return id of newGroup
end tell
'''


def delete_group_script(name: str) -> str:
    # Deleting a group leaves its member people in place.
    return f'''
tell application "Contacts"
    delete group {quote(name)}
    save
    return "done"
end tell
'''


def _membership_script(verb: str, preposition: str, contact_id: str, group: str) -> str:
    return f'''
tell application "Contacts"
    set thePerson to person id {quote(contact_id)}
    set theGroup to group {quote(group)}
    {verb} thePerson {preposition} theGroup
    save
    return "done"
end tell
'''


def add_to_group_script(contact_id: str, group: str) -> str:
    return _membership_script("add", "to", contact_id, group)


def remove_from_group_script(contact_id: str, group: str) -> str:
    return _membership_script("remove", "from", contact_id, group)


def open_contact_script(contact_id: str) -> str:
    return f'''
tell application "Contacts"
    set thePerson to person id {quote(contact_id)}
    activate
end tell
'''
