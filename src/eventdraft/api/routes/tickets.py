"""Ticket list and ticket editor routes — /api/v1/tickets."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from eventdraft.api.deps import get_workspace
from eventdraft.api.schemas.editor import (
    FieldUpdate,
    PanelUpdate,
    QuantityModeUpdate,
    SaleWindowModeUpdate,
)
from eventdraft.api.schemas.tickets import TicketEditorOpen
from eventdraft.services.editor import EditorError
from eventdraft.services.entity_list import EntityListError
from eventdraft.services.workspace import EventWorkspace

router = APIRouter(prefix="/api/v1/tickets", tags=["tickets"])


@router.get("")
def list_tickets(ws: EventWorkspace = Depends(get_workspace)) -> dict[str, Any]:
    """List tickets in display order."""
    items = ws.tickets.list()
    return {"items": items, "total_items": len(items)}


@router.delete("/{ticket_id}", status_code=204)
def delete_ticket(ticket_id: str, ws: EventWorkspace = Depends(get_workspace)) -> None:
    try:
        ws.tickets.delete(ticket_id)
    except EntityListError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail) from e


# ── Editor ──────────────────────────────────────────────────────────


@router.get("/editor")
def get_editor(ws: EventWorkspace = Depends(get_workspace)) -> dict[str, Any]:
    return ws.ticket_editor.snapshot()


@router.post("/editor/open")
def open_editor(
    body: TicketEditorOpen,
    ws: EventWorkspace = Depends(get_workspace),
) -> dict[str, Any]:
    """Open the editor on an existing ticket, or blank for a new one."""
    entity = None
    if body.ticket_id is not None:
        try:
            entity = ws.tickets.get(body.ticket_id)
        except EntityListError as e:
            raise HTTPException(status_code=e.status_code, detail=e.detail) from e
    ws.ticket_editor.open(entity)
    return ws.ticket_editor.snapshot()


@router.patch("/editor/fields")
def update_field(
    body: FieldUpdate,
    ws: EventWorkspace = Depends(get_workspace),
) -> dict[str, Any]:
    try:
        ws.ticket_editor.update_field(body.name, body.value, body.input_kind)
    except EditorError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail) from e
    return ws.ticket_editor.snapshot()


@router.put("/editor/quantity-mode")
def set_quantity_mode(
    body: QuantityModeUpdate,
    ws: EventWorkspace = Depends(get_workspace),
) -> dict[str, Any]:
    try:
        ws.ticket_editor.set_quantity_mode(body.mode)
    except EditorError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail) from e
    return ws.ticket_editor.snapshot()


@router.put("/editor/sale-window-mode")
def set_sale_window_mode(
    body: SaleWindowModeUpdate,
    ws: EventWorkspace = Depends(get_workspace),
) -> dict[str, Any]:
    try:
        ws.ticket_editor.set_sale_window_mode(body.mode)
    except EditorError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail) from e
    return ws.ticket_editor.snapshot()


@router.put("/editor/panel")
def set_panel(
    body: PanelUpdate,
    ws: EventWorkspace = Depends(get_workspace),
) -> dict[str, Any]:
    try:
        ws.ticket_editor.set_panel(body.panel)
    except EditorError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail) from e
    return ws.ticket_editor.snapshot()


@router.post("/editor/submit")
def submit_editor(ws: EventWorkspace = Depends(get_workspace)) -> dict[str, Any]:
    """Commit the ticket draft. Tickets are not validated."""
    try:
        ws.ticket_editor.submit()
    except (EditorError, EntityListError) as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail) from e
    return ws.ticket_editor.snapshot()


@router.post("/editor/close")
def close_editor(ws: EventWorkspace = Depends(get_workspace)) -> dict[str, Any]:
    ws.ticket_editor.close()
    return ws.ticket_editor.snapshot()
