"""Nutrition summaries combining intake totals with personal targets."""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Protocol

from intake_tracker.domain.catalog import DensityRecord, Ingredient, Supplement
from intake_tracker.domain.intake import EntryType, IntakeEntry
from intake_tracker.domain.nutrients import NutrientVector, average_vectors
from intake_tracker.domain.profile import UserProfile
from intake_tracker.services.aggregation import (
    AggregationReport,
    DensityLookup,
    aggregate_with_report,
    memoized_lookup,
)
from intake_tracker.services.comparison import (
    HydrationStatus,
    NutrientStatus,
    hydration_status,
    percentages,
    statuses,
)
from intake_tracker.services.recommendations import (
    get_default_recommendations,
    recommend,
)

WEEK_DAYS = 7


class IntakeRepository(Protocol):
    """Source of a user's intake entries."""

    def list_entries(self, user_id: int, start: date, end: date) -> list[IntakeEntry]:
        """Return entries dated within an inclusive range."""


class CatalogRepository(Protocol):
    """Source of nutrient density records."""

    def get_ingredient(self, ingredient_id: int) -> Ingredient | None:
        """Return an ingredient, or None when it is unknown or deleted."""

    def get_supplement(self, supplement_id: int) -> Supplement | None:
        """Return a supplement, or None when it is unknown or deleted."""


class ProfileRepository(Protocol):
    """Source of user body and activity profiles."""

    def get_profile(self, user_id: int) -> UserProfile | None:
        """Return the user's profile, if one exists."""


@dataclass
class DailySummary:
    """Totals, targets and adherence for one day."""

    day: date
    entries: list[IntakeEntry]
    total_nutrition: NutrientVector
    recommendations: NutrientVector
    percentages: dict[str, int]
    statuses: dict[str, NutrientStatus]
    hydration: HydrationStatus
    report: AggregationReport


@dataclass
class DayTotals:
    """Aggregated nutrition for one day of a period."""

    day: date
    nutrition: NutrientVector


@dataclass
class PeriodSummary:
    """Daily totals and per-day averages over a period."""

    start: date
    end: date
    daily: list[DayTotals]
    averages: NutrientVector


@dataclass
class NutritionService:
    """Application service for nutrition totals and targets."""

    intake_repository: IntakeRepository
    catalog_repository: CatalogRepository
    profile_repository: ProfileRepository

    def get_recommendations(self, user_id: int) -> NutrientVector:
        """Return the user's targets, or the defaults without a profile."""
        profile = self.profile_repository.get_profile(user_id)
        if profile is None:
            return get_default_recommendations()
        return recommend(profile)

    def total_for_range(self, user_id: int, start: date, end: date) -> NutrientVector:
        """Aggregate every entry dated within an inclusive range."""
        _check_range(start, end)
        entries = self.intake_repository.list_entries(user_id, start, end)
        return aggregate_with_report(entries, self._lookup()).nutrition

    def get_daily_summary(self, user_id: int, day: date) -> DailySummary:
        """Return totals, targets and adherence for a single day."""
        entries = self.intake_repository.list_entries(user_id, day, day)
        result = aggregate_with_report(entries, self._lookup())
        targets = self.get_recommendations(user_id)
        adherence = percentages(result.nutrition, targets)
        return DailySummary(
            day=day,
            entries=entries,
            total_nutrition=result.nutrition,
            recommendations=targets,
            percentages=adherence,
            statuses=statuses(adherence),
            hydration=hydration_status(
                result.nutrition["water"], targets.get("water", 0.0)
            ),
            report=result.report,
        )

    def get_weekly_summary(self, user_id: int, start: date) -> PeriodSummary:
        """Return seven daily totals starting at a date, with averages."""
        return self.get_period_summary(
            user_id, start, start + timedelta(days=WEEK_DAYS - 1)
        )

    def get_period_summary(self, user_id: int, start: date, end: date) -> PeriodSummary:
        """Return daily totals over an inclusive range, with averages."""
        _check_range(start, end)
        entries = self.intake_repository.list_entries(user_id, start, end)
        lookup = self._lookup()
        by_day: dict[date, list[IntakeEntry]] = {}
        for entry in entries:
            by_day.setdefault(entry.entry_date, []).append(entry)

        daily = []
        day = start
        while day <= end:
            result = aggregate_with_report(by_day.get(day, []), lookup)
            daily.append(DayTotals(day=day, nutrition=result.nutrition))
            day += timedelta(days=1)

        return PeriodSummary(
            start=start,
            end=end,
            daily=daily,
            averages=average_vectors((d.nutrition for d in daily), len(daily)),
        )

    def _lookup(self) -> DensityLookup:
        def lookup(entry_type: EntryType, item_id: int) -> DensityRecord | None:
            if entry_type == EntryType.INGREDIENT:
                return self.catalog_repository.get_ingredient(item_id)
            if entry_type == EntryType.SUPPLEMENT:
                return self.catalog_repository.get_supplement(item_id)
            return None

        return memoized_lookup(lookup)


def _check_range(start: date, end: date) -> None:
    if start > end:
        raise ValueError("start date must not be after end date")
