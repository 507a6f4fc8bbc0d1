"""Nutrition totals and targets endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, HTTPException, Request, status

from intake_tracker.api.auth import require_api_token

if TYPE_CHECKING:
    from intake_tracker.containers import AppContainer
    from intake_tracker.domain.intake import IntakeEntry
    from intake_tracker.services.nutrition import DailySummary, PeriodSummary

router = APIRouter(
    prefix="/nutrition",
    tags=["nutrition"],
    dependencies=[Depends(require_api_token)],
)


@router.get("/{user_id}/recommendations")
async def recommendations(user_id: int, request: Request) -> dict[str, object]:
    """Return the user's daily targets."""
    container: AppContainer = request.app.state.container
    return {"recommendations": container.nutrition_service.get_recommendations(user_id)}


@router.get("/{user_id}/daily/{day}")
async def daily(user_id: int, day: date, request: Request) -> dict[str, object]:
    """Return totals, targets and adherence for a day."""
    container: AppContainer = request.app.state.container
    summary = container.nutrition_service.get_daily_summary(user_id, day)
    return _serialize_daily(summary)


@router.get("/{user_id}/weekly/{start}")
async def weekly(user_id: int, start: date, request: Request) -> dict[str, object]:
    """Return seven daily totals and their averages."""
    container: AppContainer = request.app.state.container
    summary = container.nutrition_service.get_weekly_summary(user_id, start)
    return _serialize_period(summary)


@router.get("/{user_id}/range/{start}/{end}")
async def period(
    user_id: int, start: date, end: date, request: Request
) -> dict[str, object]:
    """Return daily totals and averages over an inclusive range."""
    container: AppContainer = request.app.state.container
    try:
        summary = container.nutrition_service.get_period_summary(user_id, start, end)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return _serialize_period(summary)


def _serialize_daily(summary: DailySummary) -> dict[str, object]:
    return {
        "date": summary.day.isoformat(),
        "entries": [_serialize_entry(entry) for entry in summary.entries],
        "totalNutrition": summary.total_nutrition,
        "recommendations": summary.recommendations,
        "percentages": summary.percentages,
        "statuses": {key: str(value) for key, value in summary.statuses.items()},
        "hydration": str(summary.hydration),
        "skipped_entries": summary.report.skipped,
    }


def _serialize_period(summary: PeriodSummary) -> dict[str, object]:
    return {
        "daily": [
            {"date": day.day.isoformat(), "nutrition": day.nutrition}
            for day in summary.daily
        ],
        "averages": summary.averages,
    }


def _serialize_entry(entry: IntakeEntry) -> dict[str, object]:
    return {
        "id": entry.id,
        "entry_date": entry.entry_date.isoformat(),
        "entry_time": entry.entry_time.isoformat() if entry.entry_time else None,
        "type": str(entry.type),
        "item_id": entry.item_id,
        "item_name": entry.item_name,
        "quantity": entry.quantity,
        "unit": entry.unit,
        "notes": entry.notes,
    }
