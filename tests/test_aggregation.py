"""Tests for nutrient aggregation."""

from datetime import date

import pytest

from intake_tracker.domain.catalog import Ingredient, Supplement
from intake_tracker.domain.intake import EntryType, IntakeEntry
from intake_tracker.domain.nutrients import NUTRIENT_KEYS, add_vectors
from intake_tracker.services.aggregation import (
    aggregate,
    aggregate_with_report,
    memoized_lookup,
)
from tests.conftest import chicken_breast, multivitamin

CATALOG = {
    (EntryType.INGREDIENT, 1): chicken_breast(),
    (EntryType.INGREDIENT, 2): Ingredient(
        id=2,
        name="Oats",
        unit="g",
        nutrients={"calories": 389, "carbs": 66, "fiber": 10.6, "iron": 4.7},
    ),
    (EntryType.SUPPLEMENT, 7): multivitamin(),
    (EntryType.SUPPLEMENT, 8): Supplement(
        id=8,
        name="Broken powder",
        serving_size=0,
        serving_unit="g",
        nutrients={"protein": 20},
    ),
}


def lookup(entry_type: EntryType, item_id: int):  # type: ignore[no-untyped-def]
    return CATALOG.get((entry_type, item_id))


def entry(
    entry_type: EntryType, item_id: int, quantity: float, unit: str = "g"
) -> IntakeEntry:
    return IntakeEntry(
        id=item_id,
        user_id=1,
        entry_date=date(2024, 3, 4),
        entry_time=None,
        type=entry_type,
        item_id=item_id,
        quantity=quantity,
        unit=unit,
    )


def test_ingredient_scales_per_100_units() -> None:
    totals = aggregate([entry(EntryType.INGREDIENT, 1, 150)], lookup)

    assert totals["calories"] == 247.5
    assert totals["protein"] == 46.5
    assert totals["fat"] == pytest.approx(5.4)
    others = set(NUTRIENT_KEYS) - {"calories", "protein", "fat"}
    assert all(totals[key] == 0 for key in others)


def test_every_key_present_for_empty_input() -> None:
    totals = aggregate([], lookup)

    assert set(totals) == set(NUTRIENT_KEYS)
    assert all(value == 0 for value in totals.values())


def test_water_glasses_convert_to_ml() -> None:
    totals = aggregate([entry(EntryType.WATER, 0, 2, unit="glass")], lookup)

    assert totals["water"] == 500
    assert sum(totals.values()) == 500


def test_supplement_scales_per_serving() -> None:
    totals = aggregate([entry(EntryType.SUPPLEMENT, 7, 1, unit="tablet")], lookup)

    assert totals["vitamin_c"] == 40
    assert totals["vitamin_d"] == 5
    assert totals["iron"] == 7


def test_zero_serving_size_is_skipped() -> None:
    result = aggregate_with_report([entry(EntryType.SUPPLEMENT, 8, 30)], lookup)

    assert result.nutrition["protein"] == 0
    assert result.report.degenerate == 1
    assert result.report.skipped == 1


def test_orphan_entry_matches_absent_entry() -> None:
    known = [entry(EntryType.INGREDIENT, 1, 100), entry(EntryType.WATER, 0, 1, "l")]
    with_orphan = [*known, entry(EntryType.INGREDIENT, 404, 250)]

    result = aggregate_with_report(with_orphan, lookup)

    assert result.nutrition == aggregate(known, lookup)
    assert result.report.orphaned == 1


def test_recipe_entries_contribute_nothing() -> None:
    result = aggregate_with_report([entry(EntryType.RECIPE, 1, 300)], lookup)

    assert all(value == 0 for value in result.nutrition.values())
    assert result.report.recipes_ignored == 1
    assert result.report.skipped == 0


def test_wrong_record_kind_counts_as_orphan() -> None:
    def mismatched(entry_type, item_id):  # type: ignore[no-untyped-def]
        return multivitamin()

    result = aggregate_with_report([entry(EntryType.INGREDIENT, 1, 100)], mismatched)

    assert result.report.orphaned == 1
    assert result.nutrition["vitamin_c"] == 0


def test_aggregation_is_additive() -> None:
    first = [entry(EntryType.INGREDIENT, 1, 120), entry(EntryType.WATER, 0, 1, "cup")]
    second = [
        entry(EntryType.INGREDIENT, 2, 80),
        entry(EntryType.SUPPLEMENT, 7, 3, "tablet"),
    ]

    combined = aggregate(first + second, lookup)
    summed = add_vectors(aggregate(first, lookup), aggregate(second, lookup))

    assert combined == pytest.approx(summed)


def test_aggregation_ignores_entry_order() -> None:
    entries = [
        entry(EntryType.INGREDIENT, 1, 120),
        entry(EntryType.INGREDIENT, 2, 80),
        entry(EntryType.WATER, 0, 330, "ml"),
    ]

    assert aggregate(entries, lookup) == pytest.approx(
        aggregate(list(reversed(entries)), lookup)
    )


def test_memoized_lookup_fetches_each_item_once() -> None:
    calls: list[tuple[EntryType, int]] = []

    def counting(entry_type, item_id):  # type: ignore[no-untyped-def]
        calls.append((entry_type, item_id))
        return lookup(entry_type, item_id)

    entries = [entry(EntryType.INGREDIENT, 1, 100) for _ in range(3)]
    totals = aggregate(entries, memoized_lookup(counting))

    assert totals["calories"] == pytest.approx(495)
    assert calls == [(EntryType.INGREDIENT, 1)]
