"""Supabase repository for ingredient and supplement density records."""

from dataclasses import dataclass

from supabase import Client

from intake_tracker.domain.catalog import Ingredient, Supplement
from intake_tracker.domain.nutrients import NUTRIENT_KEYS
from intake_tracker.services.nutrition import CatalogRepository


@dataclass
class SupabaseCatalogRepository(CatalogRepository):
    """Supabase implementation for density lookups."""

    client: Client

    def get_ingredient(self, ingredient_id: int) -> Ingredient | None:
        """Return an ingredient by id, if present."""
        row = self._get_row("ingredients", ingredient_id)
        if row is None:
            return None
        return Ingredient(
            id=int(row["id"]),
            name=str(row.get("name", "")),
            unit=str(row.get("unit") or "g"),
            nutrients=_parse_nutrients(row, "_per_100g"),
            brand=row.get("brand"),
            category=row.get("category"),
        )

    def get_supplement(self, supplement_id: int) -> Supplement | None:
        """Return a supplement by id, if present."""
        row = self._get_row("supplements", supplement_id)
        if row is None:
            return None
        serving_size = row.get("serving_size")
        return Supplement(
            id=int(row["id"]),
            name=str(row.get("name", "")),
            serving_size=float(serving_size) if serving_size is not None else None,
            serving_unit=str(row.get("serving_unit") or ""),
            nutrients=_parse_nutrients(row, "_per_serving"),
            brand=row.get("brand"),
            form=row.get("form"),
        )

    def _get_row(self, table: str, row_id: int) -> dict[str, object] | None:
        response = (
            self.client.table(table).select("*").eq("id", row_id).limit(1).execute()
        )
        if not response.data:
            return None
        return response.data[0]


def _parse_nutrients(row: dict[str, object], suffix: str) -> dict[str, float]:
    nutrients: dict[str, float] = {}
    for key in NUTRIENT_KEYS:
        value = row.get(f"{key}{suffix}")
        if value is not None:
            nutrients[key] = float(value)
    return nutrients
