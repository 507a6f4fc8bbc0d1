"""Grocery list aggregation and purchase checklist service."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC, date, datetime

from intake_tracker.domain.grocery import AggregatedIngredient
from intake_tracker.domain.intake import EntryType, IntakeEntry
from intake_tracker.services.nutrition import IntakeRepository
from intake_tracker.services.purchase_cache import (
    PurchaseStateCache,
    invalidation_epoch,
    storage_key,
    storage_prefix,
)

CHANGE_KEY_PREFIX = "grocery-intake-changed"
UNKNOWN_INGREDIENT = "Unknown Ingredient"

_logger = logging.getLogger(__name__)


def aggregate_grocery(entries: Iterable[IntakeEntry]) -> list[AggregatedIngredient]:
    """Consolidate ingredient entries into per-item totals.

    Quantities are summed only when the unit matches the first unit seen for
    the item; other units still count as an occurrence.
    """
    aggregated: dict[int, AggregatedIngredient] = {}
    for entry in entries:
        if entry.type != EntryType.INGREDIENT:
            continue
        existing = aggregated.get(entry.item_id)
        if existing is None:
            aggregated[entry.item_id] = AggregatedIngredient(
                item_id=entry.item_id,
                item_name=entry.item_name or UNKNOWN_INGREDIENT,
                totalQuantity=entry.quantity,
                unit=entry.unit,
                occurrences=1,
            )
            continue
        if existing.unit == entry.unit:
            existing.totalQuantity += entry.quantity
        existing.occurrences += 1
    return sorted(aggregated.values(), key=lambda item: item.totalQuantity, reverse=True)


def count_unmerged(entries: Iterable[IntakeEntry]) -> int:
    """Count ingredient entries whose unit differs from the item's first unit."""
    first_units: dict[int, str] = {}
    unmerged = 0
    for entry in entries:
        if entry.type != EntryType.INGREDIENT:
            continue
        unit = first_units.setdefault(entry.item_id, entry.unit)
        if unit != entry.unit:
            unmerged += 1
    return unmerged


@dataclass
class GroceryList:
    """Grocery list for a date range with purchase flags applied."""

    start: date
    end: date
    items: list[AggregatedIngredient] = field(default_factory=list)
    unmerged_entries: int = 0

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-serializable representation."""
        return {
            "start_date": self.start.isoformat(),
            "end_date": self.end.isoformat(),
            "items": [item.to_dict() for item in self.items],
            "unmerged_entries": self.unmerged_entries,
        }


@dataclass
class GroceryService:
    """Builds grocery lists and keeps their purchase checklists current."""

    intake_repository: IntakeRepository
    purchase_cache: PurchaseStateCache

    def record_intake_change(self, user_id: int, at: datetime | None = None) -> None:
        """Start a new invalidation epoch for a user's grocery checklists."""
        changed_at = _as_utc(at or datetime.now(tz=UTC))
        self.purchase_cache.store.set(_change_key(user_id), changed_at.isoformat())

    def get_grocery_list(self, user_id: int, start: date, end: date) -> GroceryList:
        """Aggregate the range and apply still-valid purchase flags."""
        entries = self._load_entries(user_id, start, end)
        items = aggregate_grocery(entries)
        key = self._current_key(user_id, start, end)
        self.purchase_cache.invalidate_stale(
            storage_prefix(start, end, str(user_id)), key
        )
        purchased = self.purchase_cache.load(key, items)
        for item in items:
            item.purchased = purchased.get(item.item_id, False)
        return GroceryList(
            start=start,
            end=end,
            items=items,
            unmerged_entries=count_unmerged(entries),
        )

    def toggle_purchased(
        self, user_id: int, start: date, end: date, item_id: int
    ) -> GroceryList:
        """Flip one item's purchase flag and persist the checklist."""
        grocery_list = self.get_grocery_list(user_id, start, end)
        item = next((i for i in grocery_list.items if i.item_id == item_id), None)
        if item is None:
            raise LookupError(f"Item {item_id} is not on the grocery list")
        item.purchased = not item.purchased
        key = self._current_key(user_id, start, end)
        self.purchase_cache.save(
            key,
            {item.item_id: True for item in grocery_list.items if item.purchased},
            {item.item_id: item.totalQuantity for item in grocery_list.items},
        )
        self.purchase_cache.invalidate_stale(
            storage_prefix(start, end, str(user_id)), key
        )
        return grocery_list

    def _load_entries(self, user_id: int, start: date, end: date) -> list[IntakeEntry]:
        if start > end:
            raise ValueError("start date must not be after end date")
        return self.intake_repository.list_entries(user_id, start, end)

    def _current_key(self, user_id: int, start: date, end: date) -> str:
        epoch = invalidation_epoch(self._last_change(user_id))
        return storage_key(start, end, epoch, str(user_id))

    def _last_change(self, user_id: int) -> datetime:
        raw = self.purchase_cache.store.get(_change_key(user_id))
        if raw:
            try:
                return _as_utc(datetime.fromisoformat(raw))
            except ValueError:
                _logger.warning("Ignoring unreadable change marker for %s", user_id)
        return datetime.fromtimestamp(0, tz=UTC)


def _change_key(user_id: int) -> str:
    return f"{CHANGE_KEY_PREFIX}-{user_id}"


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps are UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
