"""Event workspace — wires each entity list to its editor.

One workspace holds the ticket and discount code lists for a single event,
plus one editor per entity kind. The two kinds share no state.
"""

from __future__ import annotations

import logging
from typing import Any

from eventdraft.core.constants import SAMPLE_DISCOUNT_CODES, SAMPLE_TICKETS
from eventdraft.repositories.discount_code_repository import DiscountCodeRepository
from eventdraft.repositories.ticket_repository import TicketRepository
from eventdraft.services.editor import DiscountCodeEditor, TicketEditor
from eventdraft.services.entity_list import EntityListService, ticket_options

logger = logging.getLogger(__name__)


class EventWorkspace:
    """Entity lists and editors for one event."""

    def __init__(
        self,
        tickets: list[dict[str, Any]] | None = None,
        discount_codes: list[dict[str, Any]] | None = None,
    ) -> None:
        self.tickets = EntityListService(TicketRepository(tickets), kind="ticket")
        self.discount_codes = EntityListService(
            DiscountCodeRepository(discount_codes), kind="discount_code",
        )
        self.ticket_editor = TicketEditor(on_save=self.tickets.save)
        self.discount_code_editor = DiscountCodeEditor(on_save=self.discount_codes.save)

    @classmethod
    def with_sample_data(cls) -> EventWorkspace:
        logger.info(
            "Loading sample data (%d tickets, %d discount codes)",
            len(SAMPLE_TICKETS),
            len(SAMPLE_DISCOUNT_CODES),
        )
        return cls(tickets=SAMPLE_TICKETS, discount_codes=SAMPLE_DISCOUNT_CODES)

    def ticket_options(self) -> list[dict[str, str]]:
        """Ticket-type choices offered by the discount code editor."""
        return ticket_options(self.tickets.list())
