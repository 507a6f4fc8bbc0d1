"""Nutrient density records for ingredients and supplements."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Ingredient:
    """Ingredient with nutrient values per 100 units of its base unit."""

    id: int
    name: str
    unit: str
    nutrients: dict[str, float] = field(default_factory=dict)
    brand: str | None = None
    category: str | None = None


@dataclass(frozen=True)
class Supplement:
    """Supplement with nutrient values per declared serving."""

    id: int
    name: str
    serving_size: float | None
    serving_unit: str
    nutrients: dict[str, float] = field(default_factory=dict)
    brand: str | None = None
    form: str | None = None


DensityRecord = Ingredient | Supplement
