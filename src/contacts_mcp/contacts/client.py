"""Contacts.app operations built on generated AppleScript."""

from __future__ import annotations

import logging

from contacts_mcp import config
from contacts_mcp.applescript.decode import NULL_OUTPUT, decode_output, expect_dict, expect_list
from contacts_mcp.applescript.runner import BaseScriptRunner, OsascriptRunner
from contacts_mcp.contacts import scripts
from contacts_mcp.contacts.models import (
    Contact,
    ContactGroup,
    LabeledValue,
    MutationResult,
    PermissionStatus,
)
from contacts_mcp.exceptions import ContactsMCPError, PermissionDeniedError

logger = logging.getLogger(__name__)

DEFAULT_LIST_LIMIT = 100
DEFAULT_SEARCH_LIMIT = 50


def _clamp_limit(limit: int | float) -> int:
    return max(0, int(limit))


class ContactsClient:
    """Read and modify macOS Contacts through a script runner.

    Args:
        runner: Executes generated AppleScript. Defaults to a fresh
            :class:`OsascriptRunner`; tests pass a double.
    """

    def __init__(self, runner: BaseScriptRunner | None = None):
        self.runner = runner or OsascriptRunner()

    # ---- Reads ----

    def list_contacts(
        self,
        limit: int = DEFAULT_LIST_LIMIT,
        group: str | None = None,
    ) -> list[Contact]:
        """List up to ``limit`` contacts, optionally only members of ``group``."""
        script = scripts.list_contacts_script(_clamp_limit(limit), group)
        records = expect_list(decode_output(self.runner.run(script)), "contacts")
        return [Contact.from_dict(expect_dict(r, "contact")) for r in records]

    def get_contact(self, contact_id: str) -> Contact | None:
        """Look up a contact by identifier; ``None`` when it does not exist."""
        output = self.runner.run(scripts.get_contact_script(contact_id))
        if output == NULL_OUTPUT:
            logger.info(f"Contact {contact_id} not found")
            return None
        return Contact.from_dict(expect_dict(decode_output(output), "contact"))

    def search_contacts(self, query: str, limit: int = DEFAULT_SEARCH_LIMIT) -> list[Contact]:
        """Case-insensitive substring search over names, company, nickname, phones and emails.

        Results carry no group membership.
        """
        script = scripts.search_contacts_script(query.lower(), _clamp_limit(limit))
        records = expect_list(decode_output(self.runner.run(script)), "search results")
        return [Contact.from_dict(expect_dict(r, "contact")) for r in records]

    def list_groups(self) -> list[ContactGroup]:
        records = expect_list(decode_output(self.runner.run(scripts.list_groups_script())), "groups")
        return [ContactGroup.from_dict(expect_dict(r, "group")) for r in records]

    def check_permissions(self) -> PermissionStatus:
        """Probe Contacts with a read-only count; never raises for runner failures."""
        status = PermissionStatus()
        try:
            self.runner.run(scripts.PERMISSION_PROBE_SCRIPT)
        except PermissionDeniedError:
            status.details.append(
                "Contacts: NOT accessible (grant Contacts permission in System Settings)"
            )
        except ContactsMCPError as e:
            status.details.append(f"Contacts: NOT accessible ({e})")
        else:
            status.contacts = True
            status.details.append("Contacts: accessible")
        return status

    # ---- Writes ----

    def create_contact(
        self,
        first_name: str | None = None,
        last_name: str | None = None,
        company: str | None = None,
        job_title: str | None = None,
        phones: list[LabeledValue] | None = None,
        emails: list[LabeledValue] | None = None,
        note: str | None = None,
    ) -> MutationResult:
        """Create a person; the new identifier is returned in the result."""
        script = scripts.create_contact_script(
            first_name=first_name or "",
            last_name=last_name or "",
            company=company or "",
            job_title=job_title or "",
            phones=phones or [],
            emails=emails or [],
            note=note or "",
        )
        result = self._mutate(script, returns_id=True)
        if result.success:
            logger.info(f"Created contact {result.id}")
        return result

    def update_contact(
        self,
        contact_id: str,
        first_name: str | None = None,
        last_name: str | None = None,
        company: str | None = None,
        job_title: str | None = None,
        nickname: str | None = None,
        note: str | None = None,
    ) -> MutationResult:
        """Set only the fields that are not ``None``; other fields are left untouched."""
        candidates = {
            "first_name": first_name,
            "last_name": last_name,
            "company": company,
            "job_title": job_title,
            "nickname": nickname,
            "note": note,
        }
        changes = {name: value for name, value in candidates.items() if value is not None}
        if not changes:
            return MutationResult.failed("No updates provided")

        result = self._mutate(scripts.update_contact_script(contact_id, changes))
        if result.success:
            logger.info(f"Updated contact {contact_id}: {', '.join(changes)}")
        return result

    def delete_contact(self, contact_id: str) -> MutationResult:
        result = self._mutate(scripts.delete_contact_script(contact_id))
        if result.success:
            logger.info(f"Deleted contact {contact_id}")
        return result

    def create_group(self, name: str) -> MutationResult:
        result = self._mutate(scripts.create_group_script(name), returns_id=True)
        if result.success:
            logger.info(f"Created group {name!r} ({result.id})")
        return result

    def delete_group(self, name: str) -> MutationResult:
        """Delete a group by name; its members stay in Contacts."""
        result = self._mutate(scripts.delete_group_script(name))
        if result.success:
            logger.info(f"Deleted group {name!r}")
        return result

    def add_to_group(self, contact_id: str, group: str) -> MutationResult:
        result = self._mutate(scripts.add_to_group_script(contact_id, group))
        if result.success:
            logger.info(f"Added contact {contact_id} to group {group!r}")
        return result

    def remove_from_group(self, contact_id: str, group: str) -> MutationResult:
        result = self._mutate(scripts.remove_from_group_script(contact_id, group))
        if result.success:
            logger.info(f"Removed contact {contact_id} from group {group!r}")
        return result

    # ---- App activation ----

    def open_app(self) -> MutationResult:
        try:
            self.runner.open_application(config.APP_NAME)
        except ContactsMCPError as e:
            return MutationResult.failed(str(e))
        return MutationResult.ok()

    def open_contact(self, contact_id: str) -> MutationResult:
        return self._mutate(scripts.open_contact_script(contact_id))

    def _mutate(self, script: str, returns_id: bool = False) -> MutationResult:
        try:
            output = self.runner.run(script)
        except ContactsMCPError as e:
            logger.warning(f"Contacts update failed: {e}")
            return MutationResult.failed(str(e))
        if not returns_id:
            return MutationResult.ok()
        # Scripts print the bare identifier, which decode_output passes through.
        return MutationResult.ok(id=str(decode_output(output)) if output else "")
