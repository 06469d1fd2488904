"""Route a tool call to the matching ContactsClient operation."""

from __future__ import annotations

import json
import logging
import math
from typing import Any, Mapping

from contacts_mcp.contacts.client import ContactsClient
from contacts_mcp.contacts.models import LabeledValue
from contacts_mcp.exceptions import ToolArgumentError, UnknownToolError
from contacts_mcp.server.tools import TOOLS_BY_NAME, FieldKind, FieldSpec, ToolSpec

logger = logging.getLogger(__name__)


def _coerce_labeled_values(value: Any) -> list[LabeledValue] | None:
    if not isinstance(value, list):
        return None
    return [
        LabeledValue(label=item["label"], value=item["value"])
        for item in value
        if isinstance(item, Mapping)
        and isinstance(item.get("label"), str)
        and isinstance(item.get("value"), str)
    ]


def coerce_value(field: FieldSpec, value: Any) -> Any:
    """Return ``value`` if it matches the field's kind, otherwise ``None``."""
    if field.kind is FieldKind.STRING:
        return value if isinstance(value, str) else None
    if field.kind is FieldKind.NUMBER:
        if isinstance(value, bool):
            return None
        if isinstance(value, float) and not math.isfinite(value):
            return None
        return value if isinstance(value, (int, float)) else None
    if field.kind is FieldKind.LABELED_VALUES:
        return _coerce_labeled_values(value)
    raise ValueError(f"Unsupported field kind: {field.kind}")


def coerce_arguments(spec: ToolSpec, arguments: Mapping[str, Any] | None) -> dict[str, Any]:
    """Pick the declared fields out of untyped call arguments.

    Values of the wrong type are dropped. Raises :class:`ToolArgumentError`
    when a required field is missing or empty.
    """
    arguments = arguments or {}
    coerced: dict[str, Any] = {}
    for field in spec.fields:
        value = coerce_value(field, arguments.get(field.name))
        if value is None or (field.required and value == ""):
            if field.required:
                raise ToolArgumentError(f"{field.name} is required")
            continue
        coerced[field.name] = value
    return coerced


def _to_jsonable(result: Any) -> Any:
    if hasattr(result, "to_dict"):
        return result.to_dict()
    if isinstance(result, list):
        return [_to_jsonable(item) for item in result]
    return result


def dispatch(client: ContactsClient, name: str, arguments: Mapping[str, Any] | None) -> str:
    """Run tool ``name`` and return its result as pretty-printed JSON."""
    spec = TOOLS_BY_NAME.get(name)
    if spec is None:
        raise UnknownToolError(f"Unknown tool: {name}")

    kwargs = coerce_arguments(spec, arguments)
    logger.info(f"Tool called: {name} ({', '.join(kwargs) or 'no arguments'})")
    result = getattr(client, spec.operation)(**kwargs)

    if result is None and spec.not_found:
        payload: Any = {"error": spec.not_found}
    else:
        payload = _to_jsonable(result)
    return json.dumps(payload, indent=2, ensure_ascii=False)
