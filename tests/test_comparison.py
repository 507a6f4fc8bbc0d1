"""Tests for adherence percentages and status classification."""

import pytest

from intake_tracker.domain.nutrients import zero_vector
from intake_tracker.services.comparison import (
    HydrationStatus,
    NutrientStatus,
    classify,
    hydration_status,
    percentages,
    statuses,
)
from intake_tracker.services.recommendations import get_default_recommendations


def test_percentages_round_ratio() -> None:
    actual = {"calories": 1000.0, "protein": 56.3}
    target = {"calories": 2000.0, "protein": 112.0}

    assert percentages(actual, target) == {"calories": 50, "protein": 50}


def test_percentages_omit_non_positive_targets() -> None:
    target = get_default_recommendations()
    target["sodium"] = 0

    result = percentages(zero_vector(), target)

    assert "sodium" not in result
    assert result["calories"] == 0


def test_percentages_treat_missing_actual_as_zero() -> None:
    assert percentages({}, {"iron": 10}) == {"iron": 0}


@pytest.mark.parametrize(
    ("percentage", "expected"),
    [
        (90, NutrientStatus.OPTIMAL),
        (100, NutrientStatus.OPTIMAL),
        (110, NutrientStatus.OPTIMAL),
        (89, NutrientStatus.MODERATE),
        (70, NutrientStatus.MODERATE),
        (111, NutrientStatus.MODERATE),
        (130, NutrientStatus.MODERATE),
        (69, NutrientStatus.ATTENTION),
        (131, NutrientStatus.ATTENTION),
        (0, NutrientStatus.ATTENTION),
    ],
)
def test_classify_boundaries(percentage: int, expected: NutrientStatus) -> None:
    assert classify(percentage) == expected


def test_statuses_classify_each_key() -> None:
    assert statuses({"fiber": 95, "sugar": 140}) == {
        "fiber": NutrientStatus.OPTIMAL,
        "sugar": NutrientStatus.ATTENTION,
    }


@pytest.mark.parametrize(
    ("actual", "expected"),
    [
        (2250, HydrationStatus.WELL_HYDRATED),
        (1500, HydrationStatus.MODERATE),
        (1000, HydrationStatus.NEEDS_MORE_WATER),
    ],
)
def test_hydration_status(actual: float, expected: HydrationStatus) -> None:
    assert hydration_status(actual, 2500) == expected
