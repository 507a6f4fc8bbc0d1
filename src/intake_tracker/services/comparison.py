"""Adherence percentages of actual intake against targets."""

import math
from enum import StrEnum

from intake_tracker.domain.nutrients import NutrientVector


class NutrientStatus(StrEnum):
    """Three-tier adherence classification."""

    OPTIMAL = "optimal"
    MODERATE = "moderate"
    ATTENTION = "attention"


class HydrationStatus(StrEnum):
    """Hydration classification for the water target."""

    WELL_HYDRATED = "well_hydrated"
    MODERATE = "moderate"
    NEEDS_MORE_WATER = "needs_more_water"


def percentages(actual: NutrientVector, target: NutrientVector) -> dict[str, int]:
    """Return rounded actual/target percentages for every positive target."""
    result: dict[str, int] = {}
    for key, target_value in target.items():
        if target_value > 0:
            ratio = actual.get(key, 0.0) / target_value * 100
            result[key] = math.floor(ratio + 0.5)
    return result


def classify(percentage: float) -> NutrientStatus:
    """Classify a percentage: [90, 110] optimal, [70, 130] moderate."""
    if 90 <= percentage <= 110:  # noqa: PLR2004
        return NutrientStatus.OPTIMAL
    if 70 <= percentage <= 130:  # noqa: PLR2004
        return NutrientStatus.MODERATE
    return NutrientStatus.ATTENTION


def statuses(values: dict[str, int]) -> dict[str, NutrientStatus]:
    """Classify every percentage in a comparison."""
    return {key: classify(percentage) for key, percentage in values.items()}


def hydration_status(actual_ml: float, target_ml: float) -> HydrationStatus:
    """Classify water intake against its target."""
    if target_ml <= 0:
        return HydrationStatus.WELL_HYDRATED
    percentage = actual_ml / target_ml * 100
    if percentage >= 90:  # noqa: PLR2004
        return HydrationStatus.WELL_HYDRATED
    if percentage >= 60:  # noqa: PLR2004
        return HydrationStatus.MODERATE
    return HydrationStatus.NEEDS_MORE_WATER
