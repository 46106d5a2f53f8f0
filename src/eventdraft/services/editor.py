"""Modal editor — lifecycle controller for one draft at a time.

Manages the editor lifecycle: closed → open (seed draft) → edit → submit →
closed. Submitting validates the draft when the entity kind has a validator;
a failed validation keeps the editor open with a field error map, a passing
one hands the draft to ``on_save`` and closes.

Validation failures are data, never exceptions. ``EditorError`` is only
raised for operations that make no sense in the current state, such as
editing a closed editor.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

from eventdraft.core.constants import (
    DISCOUNT_SAVE,
    DISCOUNT_TITLE_CREATE,
    DISCOUNT_TITLE_EDIT,
    TICKET_SAVE_CREATE,
    TICKET_SAVE_EDIT,
    TICKET_TITLE_CREATE,
    TICKET_TITLE_EDIT,
)
from eventdraft.services.drafts import InputKind, seed_draft, template_for, update_field
from eventdraft.services.toggles import (
    DetailsPanel,
    QuantityMode,
    SaleWindowMode,
    initial_quantity_mode,
    initial_sale_window_mode,
    transition_details_panel,
    transition_quantity_mode,
    transition_sale_window_mode,
)
from eventdraft.services.validation import validate_discount_code

logger = logging.getLogger(__name__)

SaveCallback = Callable[[dict[str, Any]], Any]
CloseCallback = Callable[[], Any]
Validator = Callable[[Mapping[str, Any]], dict[str, str]]

# Carried through from the source entity; never edited in the modal
READ_ONLY_FIELDS = frozenset({"id", "status"})


class EditorError(Exception):
    """Editor error with HTTP status hint."""

    def __init__(self, detail: str, status_code: int = 409) -> None:
        self.detail = detail
        self.status_code = status_code
        super().__init__(detail)


class EditorState(str, Enum):
    CLOSED = "closed"
    OPEN = "open"


class ModalEditor(ABC):
    """Draft-edit-validate-commit controller for one entity kind."""

    kind: str = ""
    validator: Validator | None = None

    def __init__(
        self,
        on_save: SaveCallback,
        on_close: CloseCallback | None = None,
    ) -> None:
        self.on_save = on_save
        self.on_close = on_close
        self.template = template_for(self.kind)
        self.state = EditorState.CLOSED
        self._draft: dict[str, Any] = {}
        self._errors: dict[str, str] = {}
        self._source: Mapping[str, Any] | None = None

    # ── Read ────────────────────────────────────────────────────────

    @property
    def is_open(self) -> bool:
        return self.state is EditorState.OPEN

    @property
    def draft(self) -> dict[str, Any]:
        return dict(self._draft)

    @property
    def errors(self) -> dict[str, str]:
        return dict(self._errors)

    @property
    def is_edit(self) -> bool:
        return bool(self._draft.get("id"))

    @property
    @abstractmethod
    def title(self) -> str:
        """Modal heading for the current draft."""

    @property
    @abstractmethod
    def save_label(self) -> str:
        """Label of the submit button."""

    def snapshot(self) -> dict[str, Any]:
        """Current editor state as plain data."""
        return {
            "kind": self.kind,
            "state": self.state.value,
            "title": self.title if self.is_open else None,
            "save_label": self.save_label if self.is_open else None,
            "draft": self.draft if self.is_open else None,
            "errors": self.errors,
        }

    # ── Lifecycle transitions ───────────────────────────────────────

    def open(self, entity: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Open on ``entity`` (or a blank draft) and return the seeded draft."""
        self._source = entity
        self._draft = seed_draft(self.template, entity)
        self._errors = {}
        self._reset_modes()
        self.state = EditorState.OPEN
        logger.debug(
            "Opened %s editor (%s)", self.kind, "edit" if self.is_edit else "create",
        )
        return self.draft

    def close(self) -> None:
        """Discard the draft and its errors, then notify ``on_close``."""
        self._discard()
        if self.on_close is not None:
            self.on_close()

    def sync(self, entity: Mapping[str, Any] | None, is_open: bool) -> None:
        """Follow the parent's ``(entity, is_open)`` pair.

        The draft is re-seeded when the editor opens and whenever a different
        entity object becomes the target while open. Turning ``is_open`` off
        discards the draft without calling ``on_close``; the parent already
        knows.
        """
        if not is_open:
            if self.is_open:
                self._discard()
            return
        if not self.is_open or entity is not self._source:
            self.open(entity)

    def submit(self) -> dict[str, str]:
        """Validate and commit.

        Returns the error map. An empty map means ``on_save`` was called once
        with the draft and the editor is closed; otherwise nothing was
        committed and the editor stays open.
        """
        self._require_open("submit")
        if self.validator is not None:
            errors = self.validator(self._draft)
            if errors:
                self._errors = errors
                logger.info(
                    "Rejected %s submit: %s", self.kind, ", ".join(sorted(errors)),
                )
                return self.errors

        self.on_save(self.draft)
        logger.info("Committed %s draft", self.kind)
        self.close()
        return {}

    # ── Edits ───────────────────────────────────────────────────────

    def update_field(
        self,
        name: str,
        value: Any,
        input_kind: InputKind | str = InputKind.TEXT,
    ) -> dict[str, Any]:
        """Set one draft field; clears any error shown for it."""
        self._require_open("update a field")
        if name in READ_ONLY_FIELDS:
            raise EditorError(f"Field '{name}' is read-only", status_code=400)
        self._draft = update_field(self._draft, name, value, input_kind)
        self._errors.pop(name, None)
        return self.draft

    # ── helpers ──────────────────────────────────────────────────────

    def _discard(self) -> None:
        self.state = EditorState.CLOSED
        self._draft = {}
        self._errors = {}
        self._source = None
        logger.debug("Closed %s editor", self.kind)

    def _reset_modes(self) -> None:
        """Re-derive toggle states from a freshly seeded draft."""

    def _require_open(self, action: str) -> None:
        if not self.is_open:
            raise EditorError(f"Cannot {action}: {self.kind} editor is closed")


class TicketEditor(ModalEditor):
    """Ticket editor. No validation step; every submit commits."""

    kind = "ticket"

    def __init__(
        self,
        on_save: SaveCallback,
        on_close: CloseCallback | None = None,
    ) -> None:
        super().__init__(on_save=on_save, on_close=on_close)
        self.quantity_mode = QuantityMode.LIMITED
        self.sale_window_mode = SaleWindowMode.CUSTOM
        self.panel = DetailsPanel.BASIC

    @property
    def title(self) -> str:
        return TICKET_TITLE_EDIT if self.is_edit else TICKET_TITLE_CREATE

    @property
    def save_label(self) -> str:
        return TICKET_SAVE_EDIT if self.is_edit else TICKET_SAVE_CREATE

    def snapshot(self) -> dict[str, Any]:
        return {
            **super().snapshot(),
            "quantity_mode": self.quantity_mode.value,
            "sale_window_mode": self.sale_window_mode.value,
            "panel": self.panel.value,
        }

    def set_quantity_mode(self, mode: QuantityMode | str) -> dict[str, Any]:
        self._require_open("change quantity mode")
        self.quantity_mode, self._draft = transition_quantity_mode(
            self.quantity_mode, self._draft, mode,
        )
        return self.draft

    def set_sale_window_mode(self, mode: SaleWindowMode | str) -> dict[str, Any]:
        self._require_open("change sale window mode")
        self.sale_window_mode, self._draft = transition_sale_window_mode(
            self.sale_window_mode, self._draft, mode,
        )
        return self.draft

    def set_panel(self, panel: DetailsPanel | str) -> dict[str, Any]:
        self._require_open("change panel")
        self.panel, self._draft = transition_details_panel(self.panel, self._draft, panel)
        return self.draft

    def _reset_modes(self) -> None:
        self.quantity_mode = initial_quantity_mode(self._draft)
        self.sale_window_mode = initial_sale_window_mode(self._draft)
        self.panel = DetailsPanel.BASIC


class DiscountCodeEditor(ModalEditor):
    """Discount code editor. Submit is gated by ``validate_discount_code``."""

    kind = "discount_code"
    validator = staticmethod(validate_discount_code)

    @property
    def is_edit(self) -> bool:
        return bool(self._draft.get("code"))

    @property
    def title(self) -> str:
        return DISCOUNT_TITLE_EDIT if self.is_edit else DISCOUNT_TITLE_CREATE

    @property
    def save_label(self) -> str:
        return DISCOUNT_SAVE
