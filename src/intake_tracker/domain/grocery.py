"""Domain models for grocery lists and purchase checklists."""

import json
from dataclasses import dataclass, field


@dataclass
class AggregatedIngredient:
    """Ingredient demand consolidated over a date range."""

    item_id: int
    item_name: str
    totalQuantity: float  # noqa: N815
    unit: str
    occurrences: int
    purchased: bool = False

    def to_dict(self) -> dict[str, object]:
        """Return the JSON shape used by clients and persisted snapshots."""
        return {
            "item_id": self.item_id,
            "item_name": self.item_name,
            "totalQuantity": self.totalQuantity,
            "unit": self.unit,
            "occurrences": self.occurrences,
            "purchased": self.purchased,
        }


@dataclass(frozen=True)
class PurchaseStateSnapshot:
    """Persisted purchase flags with the quantities they were marked at."""

    purchased: dict[int, bool] = field(default_factory=dict)
    quantities: dict[int, float] = field(default_factory=dict)
    lastUpdated: str | None = None  # noqa: N815

    def to_json(self) -> str:
        """Serialize with the field names existing snapshots use."""
        return json.dumps(
            {
                "purchased": {str(k): v for k, v in self.purchased.items()},
                "quantities": {str(k): v for k, v in self.quantities.items()},
                "lastUpdated": self.lastUpdated,
            }
        )

    @classmethod
    def from_json(cls, raw: str) -> "PurchaseStateSnapshot":
        """Parse a stored snapshot.

        Raises ValueError for malformed JSON and for payloads that are not in
        the ``{purchased, quantities, lastUpdated}`` shape, including the
        legacy flat ``{item_id: bool}`` format.
        """
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise ValueError("Snapshot payload is not an object")
        if data and isinstance(next(iter(data.values())), bool):
            raise ValueError("Legacy purchase snapshot format")
        purchased = data.get("purchased") or {}
        quantities = data.get("quantities") or {}
        if not isinstance(purchased, dict) or not isinstance(quantities, dict):
            raise ValueError("Snapshot maps are not objects")
        last_updated = data.get("lastUpdated")
        return cls(
            purchased={int(k): True for k, v in purchased.items() if v is True},
            quantities={
                int(k): float(v)
                for k, v in quantities.items()
                if isinstance(v, int | float) and not isinstance(v, bool)
            },
            lastUpdated=last_updated if isinstance(last_updated, str) else None,
        )
