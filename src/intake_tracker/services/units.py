"""Unit normalization for water intake."""

_WATER_TO_ML = {
    "ml": 1.0,
    "l": 1000.0,
    "cup": 240.0,
    "glass": 250.0,
}


def normalize_water(quantity: float, unit: str) -> float:
    """Convert a water quantity to milliliters.

    Unknown units are treated as milliliters so malformed entries still count.
    """
    return quantity * _WATER_TO_ML.get(unit, 1.0)
