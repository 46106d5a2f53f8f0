"""Discount code list and editor routes — /api/v1/discount-codes."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from eventdraft.api.deps import get_workspace
from eventdraft.api.schemas.common import ValidationFailedResponse
from eventdraft.api.schemas.discount_codes import DiscountCodeEditorOpen, TicketOption
from eventdraft.api.schemas.editor import FieldUpdate
from eventdraft.services.editor import EditorError
from eventdraft.services.entity_list import EntityListError, discount_label
from eventdraft.services.workspace import EventWorkspace

router = APIRouter(prefix="/api/v1/discount-codes", tags=["discount-codes"])


@router.get("")
def list_discount_codes(
    ticket_type: str | None = None,
    ws: EventWorkspace = Depends(get_workspace),
) -> dict[str, Any]:
    """List discount codes with their display label."""
    filters: dict[str, Any] = {}
    if ticket_type:
        filters["ticketType"] = ticket_type
    items = [
        {**code, "discount": discount_label(code)}
        for code in ws.discount_codes.list(filters=filters)
    ]
    return {"items": items, "total_items": len(items)}


@router.get("/ticket-options", response_model=list[TicketOption])
def list_ticket_options(ws: EventWorkspace = Depends(get_workspace)) -> list[dict[str, str]]:
    return ws.ticket_options()


@router.delete("/{discount_code_id}", status_code=204)
def delete_discount_code(
    discount_code_id: str,
    ws: EventWorkspace = Depends(get_workspace),
) -> None:
    try:
        ws.discount_codes.delete(discount_code_id)
    except EntityListError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail) from e


# ── Editor ──────────────────────────────────────────────────────────


@router.get("/editor")
def get_editor(ws: EventWorkspace = Depends(get_workspace)) -> dict[str, Any]:
    return ws.discount_code_editor.snapshot()


@router.post("/editor/open")
def open_editor(
    body: DiscountCodeEditorOpen,
    ws: EventWorkspace = Depends(get_workspace),
) -> dict[str, Any]:
    """Open the editor on an existing code, or blank for a new one."""
    entity = None
    if body.discount_code_id is not None:
        try:
            entity = ws.discount_codes.get(body.discount_code_id)
        except EntityListError as e:
            raise HTTPException(status_code=e.status_code, detail=e.detail) from e
    ws.discount_code_editor.open(entity)
    return ws.discount_code_editor.snapshot()


@router.patch("/editor/fields")
def update_field(
    body: FieldUpdate,
    ws: EventWorkspace = Depends(get_workspace),
) -> dict[str, Any]:
    try:
        ws.discount_code_editor.update_field(body.name, body.value, body.input_kind)
    except EditorError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail) from e
    return ws.discount_code_editor.snapshot()


@router.post(
    "/editor/submit",
    responses={422: {"model": ValidationFailedResponse}},
)
def submit_editor(ws: EventWorkspace = Depends(get_workspace)) -> Any:
    """Validate and commit the discount code draft.

    A draft with field errors is not committed; the editor stays open and
    the errors come back with a 422.
    """
    try:
        errors = ws.discount_code_editor.submit()
    except (EditorError, EntityListError) as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail) from e
    if errors:
        body = ValidationFailedResponse(errors=errors)
        return JSONResponse(status_code=422, content=body.model_dump())
    return ws.discount_code_editor.snapshot()


@router.post("/editor/close")
def close_editor(ws: EventWorkspace = Depends(get_workspace)) -> dict[str, Any]:
    ws.discount_code_editor.close()
    return ws.discount_code_editor.snapshot()
