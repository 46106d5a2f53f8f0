"""Draft seeding and field updates.

A draft is a fully populated working copy of one entity. It is built by
laying the source entity over the entity kind's template, so every template
key is always present even when the source omits it.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from eventdraft.core.constants import DISCOUNT_CODE_TEMPLATE, TICKET_TEMPLATE

TEMPLATES: dict[str, Mapping[str, Any]] = {
    "ticket": TICKET_TEMPLATE,
    "discount_code": DISCOUNT_CODE_TEMPLATE,
}


class InputKind(str, Enum):
    """Kind of input control a field value came from."""

    TEXT = "text"
    NUMBER = "number"
    TEXTAREA = "textarea"
    SELECT = "select"
    CHECKBOX = "checkbox"


def template_for(kind: str) -> Mapping[str, Any]:
    """Return the template for an entity kind.

    Raises:
        ValueError: If ``kind`` is not a known entity kind.
    """
    try:
        return TEMPLATES[kind]
    except KeyError:
        msg = f"Unknown entity kind: {kind!r}. Must be one of: {list(TEMPLATES)}"
        raise ValueError(msg) from None


def seed_draft(
    template: Mapping[str, Any],
    source: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Merge ``source`` over ``template`` into a new draft.

    Keys present in ``source`` win, template keys absent from ``source``
    keep their default. Extra source keys (``id``, ``status``, ...) are
    carried through. ``None`` and ``{}`` both produce a create-mode draft.
    """
    draft: dict[str, Any] = {key: template[key] for key in template}
    if source:
        for key, value in source.items():
            draft[key] = value
    return draft


def missing_keys(template: Mapping[str, Any], draft: Mapping[str, Any]) -> list[str]:
    """Template keys absent from ``draft``; empty for any seeded draft."""
    return [key for key in template if key not in draft]


def update_field(
    draft: Mapping[str, Any],
    name: str,
    raw_value: Any,
    input_kind: InputKind | str = InputKind.TEXT,
) -> dict[str, Any]:
    """Return a copy of ``draft`` with ``name`` replaced.

    Checkbox inputs store their checked state as a bool. Everything else is
    stored exactly as typed; numeric parsing waits for validation.
    """
    if InputKind(input_kind) is InputKind.CHECKBOX:
        value: Any = _checked(raw_value)
    else:
        value = raw_value
    return {**draft, name: value}


def _checked(raw_value: Any) -> bool:
    if isinstance(raw_value, str):
        return raw_value.strip().lower() in ("true", "on", "1", "checked")
    return bool(raw_value)
