"""Data models for the Contacts tools."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any

import dateutil.parser as parser

logger = logging.getLogger(__name__)

# Year, month and day must all be present; partial dates are not padded out.
_FULL_DATE = re.compile(r"\d{4}-?\d{2}-?\d{2}($|T)")


@dataclass
class LabeledValue:
    """A phone number or email address with its label."""

    label: str
    value: str

    @classmethod
    def from_dict(cls, data: dict) -> LabeledValue:
        return cls(
            label=data.get("label") or "other",
            value=data.get("value") or "",
        )

    def to_dict(self) -> dict:
        return {"label": self.label, "value": self.value}


def normalize_birthday(raw: str | None) -> str | None:
    """Reduce a Contacts birth date (``1990-01-15T00:00:00``) to ``YYYY-MM-DD``."""
    if not raw:
        return None
    if _FULL_DATE.match(raw):
        try:
            return parser.isoparse(raw).date().isoformat()
        except (ValueError, OverflowError):
            pass
    logger.warning(f"Ignoring unparseable birthday: {raw!r}")
    return None


@dataclass
class Contact:
    """A person record from Contacts.app.

    Optional text fields hold ``""`` when the store has no value; they are
    left out of :meth:`to_dict` in that case.
    """

    id: str
    first_name: str = ""
    last_name: str = ""
    nickname: str = ""
    company: str = ""
    job_title: str = ""
    department: str = ""
    note: str = ""
    birthday: str | None = None
    phones: list[LabeledValue] = field(default_factory=list)
    emails: list[LabeledValue] = field(default_factory=list)
    # Always empty; postal addresses are not read from the store.
    addresses: list[dict] = field(default_factory=list)
    groups: list[str] = field(default_factory=list)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @classmethod
    def from_dict(cls, data: dict) -> Contact:
        """Build a Contact from the JSON object emitted by the Contacts scripts."""
        return cls(
            id=str(data.get("id") or ""),
            first_name=data.get("firstName") or "",
            last_name=data.get("lastName") or "",
            nickname=data.get("nickname") or "",
            company=data.get("company") or "",
            job_title=data.get("jobTitle") or "",
            department=data.get("department") or "",
            note=data.get("note") or "",
            birthday=normalize_birthday(data.get("birthday")),
            phones=[LabeledValue.from_dict(p) for p in data.get("phones") or []],
            emails=[LabeledValue.from_dict(e) for e in data.get("emails") or []],
            groups=[str(g) for g in data.get("groups") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "fullName": self.full_name,
        }
        optional = {
            "nickname": self.nickname,
            "company": self.company,
            "jobTitle": self.job_title,
            "department": self.department,
        }
        out.update({key: value for key, value in optional.items() if value})
        out["phones"] = [p.to_dict() for p in self.phones]
        out["emails"] = [e.to_dict() for e in self.emails]
        out["addresses"] = list(self.addresses)
        if self.birthday:
            out["birthday"] = self.birthday
        if self.note:
            out["note"] = self.note
        out["groups"] = list(self.groups)
        return out


@dataclass
class ContactGroup:
    """A Contacts.app group; ``contact_count`` is computed by the store on read."""

    id: str
    name: str
    contact_count: int = 0

    @classmethod
    def from_dict(cls, data: dict) -> ContactGroup:
        return cls(
            id=str(data.get("id") or ""),
            name=data.get("name") or "",
            contact_count=int(data.get("contactCount") or 0),
        )

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "contactCount": self.contact_count}


@dataclass
class PermissionStatus:
    contacts: bool = False
    details: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"contacts": self.contacts, "details": list(self.details)}


@dataclass
class MutationResult:
    """Outcome of a write or app-activation operation."""

    success: bool
    id: str | None = None
    error: str | None = None

    @classmethod
    def ok(cls, id: str | None = None) -> MutationResult:
        return cls(success=True, id=id)

    @classmethod
    def failed(cls, error: str) -> MutationResult:
        return cls(success=False, error=error)

    def to_dict(self) -> dict:
        out: dict[str, Any] = {"success": self.success}
        if self.id is not None:
            out["id"] = self.id
        if self.error is not None:
            out["error"] = self.error
        return out
