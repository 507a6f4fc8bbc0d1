"""Domain models for logged intake."""

from dataclasses import dataclass
from datetime import date, time
from enum import StrEnum


class EntryType(StrEnum):
    """Kind of item an intake entry refers to."""

    INGREDIENT = "ingredient"
    RECIPE = "recipe"
    SUPPLEMENT = "supplement"
    WATER = "water"


@dataclass(frozen=True)
class IntakeEntry:
    """Single logged intake of an ingredient, recipe, supplement or water."""

    id: int
    user_id: int
    entry_date: date
    entry_time: time | None
    type: EntryType
    item_id: int
    quantity: float
    unit: str
    notes: str | None = None
    item_name: str | None = None
