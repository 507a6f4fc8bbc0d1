"""Nutrient aggregation over intake entries."""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from intake_tracker.domain.catalog import DensityRecord, Ingredient, Supplement
from intake_tracker.domain.intake import EntryType, IntakeEntry
from intake_tracker.domain.nutrients import NUTRIENT_KEYS, NutrientVector, zero_vector
from intake_tracker.services.units import normalize_water

DensityLookup = Callable[[EntryType, int], DensityRecord | None]

_logger = logging.getLogger(__name__)


@dataclass
class AggregationReport:
    """Counts of entries that did not contribute nutrients, and why."""

    contributed: int = 0
    orphaned: int = 0
    degenerate: int = 0
    recipes_ignored: int = 0

    @property
    def skipped(self) -> int:
        """Entries whose nutrients were left out of the total."""
        return self.orphaned + self.degenerate


@dataclass(frozen=True)
class AggregationResult:
    """Aggregated vector with its diagnostic report."""

    nutrition: NutrientVector
    report: AggregationReport


def aggregate(entries: Iterable[IntakeEntry], lookup: DensityLookup) -> NutrientVector:
    """Sum the nutrient contribution of every entry into one vector."""
    return aggregate_with_report(entries, lookup).nutrition


def aggregate_with_report(
    entries: Iterable[IntakeEntry], lookup: DensityLookup
) -> AggregationResult:
    """Aggregate entries and count the ones that were skipped."""
    nutrition = zero_vector()
    report = AggregationReport()
    for entry in entries:
        if entry.type == EntryType.WATER:
            nutrition["water"] += normalize_water(entry.quantity, entry.unit)
            report.contributed += 1
        elif entry.type == EntryType.INGREDIENT:
            ingredient = lookup(entry.type, entry.item_id)
            if not isinstance(ingredient, Ingredient):
                _logger.debug(
                    "Skipping entry %s: ingredient %s not found",
                    entry.id,
                    entry.item_id,
                )
                report.orphaned += 1
                continue
            _accumulate(nutrition, ingredient.nutrients, entry.quantity / 100)
            report.contributed += 1
        elif entry.type == EntryType.SUPPLEMENT:
            supplement = lookup(entry.type, entry.item_id)
            if not isinstance(supplement, Supplement):
                _logger.debug(
                    "Skipping entry %s: supplement %s not found",
                    entry.id,
                    entry.item_id,
                )
                report.orphaned += 1
                continue
            if not supplement.serving_size:
                _logger.debug(
                    "Skipping entry %s: supplement %s has no serving size",
                    entry.id,
                    entry.item_id,
                )
                report.degenerate += 1
                continue
            multiplier = entry.quantity / supplement.serving_size
            _accumulate(nutrition, supplement.nutrients, multiplier)
            report.contributed += 1
        else:
            # Recipes are expanded into ingredient entries when they are logged.
            report.recipes_ignored += 1
    return AggregationResult(nutrition=nutrition, report=report)


def memoized_lookup(lookup: DensityLookup) -> DensityLookup:
    """Wrap a lookup so each (type, item_id) pair is fetched once."""
    cache: dict[tuple[EntryType, int], DensityRecord | None] = {}

    def cached(entry_type: EntryType, item_id: int) -> DensityRecord | None:
        key = (entry_type, item_id)
        if key not in cache:
            cache[key] = lookup(entry_type, item_id)
        return cache[key]

    return cached


def _accumulate(
    nutrition: NutrientVector, density: dict[str, float], multiplier: float
) -> None:
    for key in NUTRIENT_KEYS:
        value = density.get(key)
        if value:
            nutrition[key] += value * multiplier
