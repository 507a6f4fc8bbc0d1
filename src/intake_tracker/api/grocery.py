"""Grocery list and purchase checklist endpoints."""

from __future__ import annotations

import logging
from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, HTTPException, Request, status

from intake_tracker.api.auth import require_api_token
from intake_tracker.api.models import IntakeChange  # noqa: TC001

if TYPE_CHECKING:
    from intake_tracker.containers import AppContainer

_logger = logging.getLogger(__name__)

router = APIRouter(tags=["grocery"], dependencies=[Depends(require_api_token)])


@router.get("/grocery/{user_id}/{start}/{end}")
async def grocery_list(
    user_id: int, start: date, end: date, request: Request
) -> dict[str, object]:
    """Return aggregated ingredients with purchase flags."""
    container: AppContainer = request.app.state.container
    try:
        result = container.grocery_service.get_grocery_list(user_id, start, end)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return result.to_dict()


@router.post("/grocery/{user_id}/{start}/{end}/items/{item_id}/toggle")
async def toggle_purchased(
    user_id: int, start: date, end: date, item_id: int, request: Request
) -> dict[str, object]:
    """Flip an item's purchase flag and return the updated list."""
    container: AppContainer = request.app.state.container
    try:
        result = container.grocery_service.toggle_purchased(
            user_id, start, end, item_id
        )
    except LookupError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return result.to_dict()


@router.post("/intake/{user_id}/changes", status_code=status.HTTP_204_NO_CONTENT)
async def intake_changed(
    user_id: int, request: Request, payload: IntakeChange | None = None
) -> None:
    """Record that a user's intake entries changed."""
    container: AppContainer = request.app.state.container
    changed_at = payload.changed_at if payload else None
    _logger.info(
        "Intake changed for user %s (%s entries)",
        user_id,
        len(payload.entry_ids) if payload else 0,
    )
    container.grocery_service.record_intake_change(user_id, at=changed_at)
