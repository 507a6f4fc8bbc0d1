"""Nutrient vector shape shared by intake totals and targets."""

from collections.abc import Iterable

NUTRIENT_KEYS: tuple[str, ...] = (
    "calories",
    "protein",
    "carbs",
    "fat",
    "saturated_fat",
    "unsaturated_fat",
    "polyunsaturated_fat",
    "fiber",
    "sugar",
    "sodium",
    "vitamin_a",
    "vitamin_c",
    "vitamin_d",
    "vitamin_e",
    "vitamin_k",
    "thiamine",
    "riboflavin",
    "niacin",
    "vitamin_b6",
    "folate",
    "vitamin_b12",
    "calcium",
    "iron",
    "magnesium",
    "phosphorus",
    "potassium",
    "zinc",
    "chloride",
    "sulfur",
    "iodine",
    "copper",
    "chromium",
    "manganese",
    "selenium",
    "fluoride",
    "molybdenum",
    "cobalt",
    "water",
)

NutrientVector = dict[str, float]


def zero_vector() -> NutrientVector:
    """Return a vector with every nutrient set to zero."""
    return dict.fromkeys(NUTRIENT_KEYS, 0.0)


def add_vectors(left: NutrientVector, right: NutrientVector) -> NutrientVector:
    """Return the elementwise sum of two vectors."""
    return {key: left.get(key, 0.0) + right.get(key, 0.0) for key in NUTRIENT_KEYS}


def average_vectors(vectors: Iterable[NutrientVector], days: int) -> NutrientVector:
    """Sum vectors and divide by the number of days in the period."""
    total = zero_vector()
    for vector in vectors:
        total = add_vectors(total, vector)
    divisor = max(days, 1)
    return {key: value / divisor for key, value in total.items()}
