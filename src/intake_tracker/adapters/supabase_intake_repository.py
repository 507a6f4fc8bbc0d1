"""Supabase repository for intake entries."""

from dataclasses import dataclass
from datetime import date, time

from supabase import Client

from intake_tracker.domain.intake import EntryType, IntakeEntry
from intake_tracker.services.nutrition import IntakeRepository

WATER_NAME = "Water"

# Tables holding display names for each kind of logged item.
_NAME_TABLES = {
    EntryType.INGREDIENT: "ingredients",
    EntryType.RECIPE: "recipes",
    EntryType.SUPPLEMENT: "supplements",
}

ItemNames = dict[tuple[EntryType, int], str]


@dataclass
class SupabaseIntakeRepository(IntakeRepository):
    """Supabase implementation for reading intake entries."""

    client: Client

    def list_entries(self, user_id: int, start: date, end: date) -> list[IntakeEntry]:
        """Return entries dated within an inclusive range, with item names."""
        response = (
            self.client.table("intake_entries")
            .select("*")
            .eq("user_id", user_id)
            .gte("entry_date", start.isoformat())
            .lte("entry_date", end.isoformat())
            .order("entry_date", desc=False)
            .order("entry_time", desc=False)
            .execute()
        )
        rows = response.data or []
        names = self._item_names(rows)
        return [_parse_entry(row, names) for row in rows]

    def _item_names(self, rows: list[dict[str, object]]) -> ItemNames:
        """Look up names for the referenced items, one query per table."""
        names: ItemNames = {}
        for entry_type, table in _NAME_TABLES.items():
            ids = sorted(
                {int(row["item_id"]) for row in rows if row.get("type") == entry_type}
            )
            if not ids:
                continue
            response = (
                self.client.table(table).select("id, name").in_("id", ids).execute()
            )
            for row in response.data or []:
                if row.get("name"):
                    names[(entry_type, int(row["id"]))] = str(row["name"])
        return names


def _parse_entry(row: dict[str, object], names: ItemNames) -> IntakeEntry:
    entry_type = EntryType(str(row["type"]))
    item_id = int(row["item_id"])
    if entry_type == EntryType.WATER:
        item_name = WATER_NAME
    else:
        item_name = names.get((entry_type, item_id))
    return IntakeEntry(
        id=int(row["id"]),
        user_id=int(row["user_id"]),
        entry_date=date.fromisoformat(str(row["entry_date"])[:10]),
        entry_time=_parse_time(row.get("entry_time")),
        type=entry_type,
        item_id=item_id,
        quantity=float(row.get("quantity") or 0.0),
        unit=str(row.get("unit") or ""),
        notes=row.get("notes"),
        item_name=item_name,
    )


def _parse_time(raw: object) -> time | None:
    if isinstance(raw, str) and raw:
        return time.fromisoformat(raw)
    return None
