"""Personalized daily nutrient targets.

Energy uses the Mifflin-St Jeor BMR scaled by the physical activity level
(PAL) and the user's goal. Macronutrients follow the residual-calorie method
and micronutrients follow EU reference values with age, gender and activity
tiers. Values are rounded once, after every target has been computed.
"""

import math

from intake_tracker.domain.nutrients import NutrientVector
from intake_tracker.domain.profile import DEFAULT_PROFILE, UserProfile

MIN_WATER_ML = 1500
MAX_WATER_ML = 4000

_GOAL_FACTORS = {"lose": 0.85, "gain": 1.15}

# Fixed EU reference intakes that do not depend on the profile.
_FIXED_TARGETS: dict[str, float] = {
    "vitamin_c": 80,
    "vitamin_e": 12,
    "folate": 200,
    "phosphorus": 700,
    "sodium": 2300,
    "chloride": 3400,
    "sulfur": 850,
    "iodine": 150,
    "copper": 1,
    "chromium": 40,
    "manganese": 2,
    "selenium": 55,
    "fluoride": 3.5,
    "molybdenum": 50,
    "cobalt": 5,
}

# (upper age bound exclusive, male ml, female ml)
_WATER_BY_AGE: tuple[tuple[float, int, int], ...] = (
    (1, 800, 800),
    (3, 1300, 1300),
    (9, 1600, 1600),
    (14, 2100, 1900),
    (19, 2600, 1900),
    (51, 2500, 2000),
    (71, 2500, 2000),
    (math.inf, 2300, 1900),
)

# (minimum PAL, multiplier), checked highest first
_WATER_ACTIVITY: tuple[tuple[float, float], ...] = (
    (2.0, 1.4),
    (1.8, 1.3),
    (1.6, 1.2),
    (1.4, 1.1),
)

_ACTIVE_PAL = 1.6
_OLDER_ADULT_AGE = 50
_ELDERLY_AGE = 70
_ADULT_AGE = 18
_REFERENCE_WEIGHT_KG = 70
_WATER_PER_EXTRA_KG_ML = 35


def recommend(profile: UserProfile) -> NutrientVector:
    """Return the daily target vector for a profile."""
    resolved = profile.resolved()
    weight = float(resolved.weight_kg)
    height = float(resolved.height_cm)
    age = resolved.age
    gender = resolved.gender
    activity_level = float(resolved.activity_level)
    is_male = gender == "male"

    tdee = basal_metabolic_rate(weight, height, age, gender) * activity_level
    tdee *= _GOAL_FACTORS.get(resolved.goal, 1.0)

    protein = weight * 1.6
    fat = tdee * 0.30 / 9
    # May go negative for extreme profiles; callers sanity-check those.
    carbs = (tdee - protein * 4 - fat * 9) / 4

    vitamin_d, calcium, vitamin_b12 = 15, 800, 2.5
    if age > _OLDER_ADULT_AGE:
        vitamin_d, calcium, vitamin_b12 = 20, 1000, 4.0
    if age > _ELDERLY_AGE:
        vitamin_d, calcium = 25, 1200

    magnesium, potassium, zinc = 375, 3500, 10
    if activity_level > _ACTIVE_PAL:
        magnesium, potassium, zinc = 400, 4000, 12

    targets: NutrientVector = {
        "calories": _round_half_up(tdee),
        "protein": _round_half_up(protein),
        "carbs": _round_half_up(carbs),
        "fat": _round_tenth(fat),
        "saturated_fat": _round_tenth(fat * 0.33),
        "unsaturated_fat": _round_tenth(fat * 0.50),
        "polyunsaturated_fat": _round_tenth(fat * 0.17),
        "fiber": 30 if age > _OLDER_ADULT_AGE else 25,
        "sugar": _round_half_up(tdee * 0.05 / 4),
        "vitamin_a": 900 if is_male else 700,
        "vitamin_d": vitamin_d,
        "vitamin_k": 75 if is_male else 60,
        "thiamine": max(1.1, tdee * 0.0004),
        "riboflavin": max(1.4, tdee * 0.0006),
        "niacin": max(16, tdee * 0.0066),
        "vitamin_b6": max(1.4, protein * 0.015),
        "vitamin_b12": vitamin_b12,
        "calcium": calcium,
        "iron": 10 if is_male else 18,
        "magnesium": magnesium,
        "potassium": potassium,
        "zinc": zinc,
        "water": water_needs(age, gender, activity_level, weight),
        **_FIXED_TARGETS,
    }
    return targets


def get_default_recommendations() -> NutrientVector:
    """Return targets for the fallback profile used when none is stored."""
    return recommend(DEFAULT_PROFILE)


def basal_metabolic_rate(weight: float, height: float, age: int, gender: str) -> float:
    """Mifflin-St Jeor BMR in kcal; non-male profiles use the female constant."""
    base = 10 * weight + 6.25 * height - 5 * age
    return base + 5 if gender == "male" else base - 161


def water_needs(age: float, gender: str, activity_level: float, weight: float) -> int:
    """Daily water target in ml, clamped to [1500, 4000]."""
    base_water = _WATER_BY_AGE[-1][1 if gender == "male" else 2]
    for upper_age, male_ml, female_ml in _WATER_BY_AGE:
        if age < upper_age:
            base_water = male_ml if gender == "male" else female_ml
            break

    multiplier = 1.0
    for threshold, factor in _WATER_ACTIVITY:
        if activity_level >= threshold:
            multiplier = factor
            break

    weight_adjustment = 0.0
    if age >= _ADULT_AGE and weight > _REFERENCE_WEIGHT_KG:
        weight_adjustment = (weight - _REFERENCE_WEIGHT_KG) * _WATER_PER_EXTRA_KG_ML

    total = _round_half_up(base_water * multiplier + weight_adjustment)
    return max(MIN_WATER_ML, min(MAX_WATER_ML, total))


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _round_tenth(value: float) -> float:
    return math.floor(value * 10 + 0.5) / 10
