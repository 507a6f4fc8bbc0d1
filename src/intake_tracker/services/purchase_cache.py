"""Purchase checklist persistence with quantity-based invalidation."""

import logging
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol

from intake_tracker.domain.grocery import AggregatedIngredient, PurchaseStateSnapshot

KEY_PREFIX = "grocery-list-purchased"
EPOCH_MS = 60_000

_logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """String key-value storage for client state."""

    def get(self, key: str) -> str | None:
        """Return the stored value, if present."""

    def set(self, key: str, value: str) -> None:
        """Store a value under a key."""

    def delete(self, key: str) -> None:
        """Remove a key if present."""

    def keys(self, prefix: str) -> list[str]:
        """Return every stored key starting with a prefix."""


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """Dict-backed key-value store."""

    _entries: dict[str, str]

    def __init__(self) -> None:
        self._entries = {}

    def get(self, key: str) -> str | None:
        """Return the stored value, if present."""
        return self._entries.get(key)

    def set(self, key: str, value: str) -> None:
        """Store a value under a key."""
        self._entries[key] = value

    def delete(self, key: str) -> None:
        """Remove a key if present."""
        self._entries.pop(key, None)

    def keys(self, prefix: str) -> list[str]:
        """Return every stored key starting with a prefix."""
        return [key for key in self._entries if key.startswith(prefix)]


def invalidation_epoch(changed_at: datetime) -> int:
    """Floor a change timestamp to the minute, in epoch milliseconds."""
    millis = int(changed_at.timestamp() * 1000)
    return millis // EPOCH_MS * EPOCH_MS


def storage_prefix(start: date, end: date, scope: str | None = None) -> str:
    """Key prefix shared by every snapshot of a date range."""
    parts = [KEY_PREFIX]
    if scope:
        parts.append(scope)
    parts.extend([start.isoformat(), end.isoformat()])
    return "-".join(parts)


def storage_key(start: date, end: date, epoch: int, scope: str | None = None) -> str:
    """Snapshot key for a date range within one invalidation epoch."""
    return f"{storage_prefix(start, end, scope)}-v{epoch}"


@dataclass
class PurchaseStateCache:
    """Loads, validates and stores purchase checklists."""

    store: KeyValueStore

    def load(self, key: str, current: list[AggregatedIngredient]) -> dict[int, bool]:
        """Return purchase flags still valid for the current quantities.

        A flag survives only when the quantity snapshot saved with it equals
        the item's current total exactly. Corrupt snapshots load as empty.
        """
        raw = self.store.get(key)
        if not raw:
            return {}
        try:
            snapshot = PurchaseStateSnapshot.from_json(raw)
        except (ValueError, TypeError):
            _logger.warning("Discarding unreadable purchase snapshot %s", key)
            return {}

        validated: dict[int, bool] = {}
        for item in current:
            if not snapshot.purchased.get(item.item_id):
                continue
            stored_quantity = snapshot.quantities.get(item.item_id)
            if stored_quantity is not None and stored_quantity == item.totalQuantity:
                validated[item.item_id] = True
            else:
                _logger.debug(
                    "Reset purchase of %s: %s -> %s%s",
                    item.item_name,
                    stored_quantity,
                    item.totalQuantity,
                    item.unit,
                )
        return validated

    def save(
        self, key: str, purchased: dict[int, bool], quantities: dict[int, float]
    ) -> None:
        """Persist purchase flags with the quantities they apply to."""
        snapshot = PurchaseStateSnapshot(
            purchased={item_id: True for item_id, flag in purchased.items() if flag},
            quantities=dict(quantities),
            lastUpdated=datetime.now(tz=UTC).isoformat(),
        )
        self.store.set(key, snapshot.to_json())

    def invalidate_stale(self, prefix: str, current_key: str) -> int:
        """Delete snapshots of the same range from older epochs."""
        stale = [key for key in self.store.keys(prefix) if key != current_key]
        for key in stale:
            self.store.delete(key)
        if stale:
            _logger.debug("Removed %s stale purchase snapshots for %s", len(stale), prefix)
        return len(stale)
