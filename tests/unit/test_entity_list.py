"""Tests for the entity list service and its in-memory repositories."""

from __future__ import annotations

import pytest

from eventdraft.repositories.base import BaseRepository
from eventdraft.repositories.discount_code_repository import DiscountCodeRepository
from eventdraft.repositories.ticket_repository import TicketRepository
from eventdraft.services.entity_list import (
    EntityListError,
    EntityListService,
    discount_label,
    ticket_options,
)
from eventdraft.services.workspace import EventWorkspace
from tests.factories.data_factories import build_discount_code, build_ticket, build_ticket_batch

# ── Repository ──────────────────────────────────────────────────────


class TestBaseRepository:
    def test_preserves_insertion_order(self):
        rows = build_ticket_batch(4)
        repo = TicketRepository(rows)
        assert [r["id"] for r in repo.find_all()] == [r["id"] for r in rows]

    def test_generated_ids_unique(self):
        repo = BaseRepository(collection="things")
        ids = {repo.create({"name": str(i)}) for i in range(50)}
        assert len(ids) == 50

    def test_duplicate_id_rejected(self):
        repo = TicketRepository([{"id": "01"}])
        with pytest.raises(ValueError, match="Duplicate"):
            repo.create({"name": "x"}, new_id="01")

    def test_replace_keeps_position(self):
        repo = TicketRepository([{"id": "a"}, {"id": "b"}, {"id": "c"}])
        assert repo.replace("b", {"name": "B2"}) == 1
        assert [r["id"] for r in repo.find_all()] == ["a", "b", "c"]
        assert repo.find_by_id("b") == {"id": "b", "name": "B2"}

    def test_replace_missing(self):
        assert TicketRepository().replace("zz", {}) == 0

    def test_rows_are_copies(self):
        repo = TicketRepository([{"id": "a", "name": "A"}])
        row = repo.find_by_id("a")
        row["name"] = "mutated"
        assert repo.find_by_id("a")["name"] == "A"

    def test_find_by_field_and_delete(self):
        repo = DiscountCodeRepository([
            build_discount_code(id="1", ticketType="all"),
            build_discount_code(id="2", ticketType="t1"),
        ])
        assert [r["id"] for r in repo.find_by_field("ticketType", "t1")] == ["2"]
        assert repo.delete("2") == 1
        assert repo.delete("2") == 0
        assert [r["id"] for r in repo.find_all()] == ["1"]
        assert repo.find_by_id("2") is None


# ── Service ─────────────────────────────────────────────────────────


def _service(rows=None) -> EntityListService:
    return EntityListService(TicketRepository(rows), kind="ticket")


class TestEntityListService:
    def test_create_appends_with_fresh_id(self):
        svc = _service([build_ticket(id="01")])
        created = svc.create({"name": "Late Bird"})
        assert created["id"] and created["id"] != "01"
        assert [t["id"] for t in svc.list()] == ["01", created["id"]]

    def test_create_ignores_draft_id(self):
        svc = _service()
        created = svc.create({"id": "", "name": "x"})
        assert created["id"] != ""

    def test_update_replaces_in_place(self):
        svc = _service([build_ticket(id="01"), build_ticket(id="02", name="VIP")])
        svc.update("01", {"id": "01", "name": "Renamed"})
        items = svc.list()
        assert [t["id"] for t in items] == ["01", "02"]
        assert items[0] == {"id": "01", "name": "Renamed"}

    def test_update_unknown_id(self):
        with pytest.raises(EntityListError) as exc:
            _service().update("missing", {"name": "x"})
        assert exc.value.status_code == 404
        assert exc.value.detail == "Ticket not found"

    def test_save_routes_on_id(self):
        svc = _service([build_ticket(id="01")])
        svc.save({"id": "01", "name": "Updated"})
        svc.save({"name": "Brand new"})
        items = svc.list()
        assert len(items) == 2
        assert items[0]["name"] == "Updated"
        assert items[1]["name"] == "Brand new"

    def test_delete(self):
        svc = _service([build_ticket(id="01")])
        svc.delete("01")
        assert svc.list() == []
        with pytest.raises(EntityListError):
            svc.delete("01")

    def test_get_missing(self):
        with pytest.raises(EntityListError, match="not found"):
            EntityListService(DiscountCodeRepository(), kind="discount_code").get("x")

    def test_list_filters(self):
        svc = EntityListService(
            DiscountCodeRepository([
                build_discount_code(id="1", ticketType="all"),
                build_discount_code(id="2", ticketType="t1"),
            ]),
            kind="discount_code",
        )
        assert [d["id"] for d in svc.list(filters={"ticketType": "all"})] == ["1"]
        assert svc.list(filters={"ticketType": "t1", "id": "1"}) == []
        assert [d["id"] for d in svc.list(filters={"ticketType": "t1", "id": "2"})] == ["2"]


# ── Display helpers ─────────────────────────────────────────────────


class TestDisplayHelpers:
    def test_ticket_options_start_with_all(self):
        options = ticket_options([{"id": "01", "name": "Early Bird"}, {"id": 2, "name": "VIP"}])
        assert options == [
            {"id": "all", "name": "All Tickets"},
            {"id": "01", "name": "Early Bird"},
            {"id": "2", "name": "VIP"},
        ]

    @pytest.mark.parametrize(
        ("code", "label"),
        [
            ({"discountPercentage": 10, "maxDiscountAmount": 50}, "10%"),
            ({"discountPercentage": "12.5", "maxDiscountAmount": "0"}, "12.5%"),
            ({"discountPercentage": 0, "maxDiscountAmount": 5}, "$5.00"),
            ({"discountPercentage": "", "maxDiscountAmount": ""}, "$0.00"),
        ],
    )
    def test_discount_label(self, code, label):
        assert discount_label(code) == label


# ── Workspace wiring ────────────────────────────────────────────────


class TestWorkspace:
    def test_editor_commit_lands_in_list(self):
        ws = EventWorkspace()
        ws.ticket_editor.open()
        ws.ticket_editor.update_field("name", "Early Bird")
        ws.ticket_editor.submit()
        assert [t["name"] for t in ws.tickets.list()] == ["Early Bird"]

    def test_editing_existing_updates_in_place(self, workspace: EventWorkspace):
        before = [d["id"] for d in workspace.discount_codes.list()]
        workspace.discount_code_editor.open(workspace.discount_codes.get("02"))
        workspace.discount_code_editor.update_field("quantity", "250")
        assert workspace.discount_code_editor.submit() == {}
        after = workspace.discount_codes.list()
        assert [d["id"] for d in after] == before
        assert after[1]["quantity"] == "250"
        assert after[1]["ticketType"] == "all"

    def test_sample_data_isolated_between_workspaces(self):
        first = EventWorkspace.with_sample_data()
        first.tickets.delete("01")
        second = EventWorkspace.with_sample_data()
        assert second.tickets.get("01")["name"] == "Early Bird"

    def test_ticket_options_follow_ticket_list(self, workspace: EventWorkspace):
        names = [o["name"] for o in workspace.ticket_options()]
        assert names[0] == "All Tickets"
        assert "VIP" in names
