"""Supabase-backed key-value store for purchase checklists."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from intake_tracker.services.purchase_cache import KeyValueStore


@dataclass
class SupabaseKeyValueStore(KeyValueStore):
    """Stores string values in a ``purchase_state`` table keyed by ``key``."""

    client: Client
    table_name: str = "purchase_state"

    def get(self, key: str) -> str | None:
        """Return the stored value, if present."""
        response = (
            self.client.table(self.table_name)
            .select("value")
            .eq("key", key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0].get("value")

    def set(self, key: str, value: str) -> None:
        """Insert or replace the value for a key."""
        response = (
            self.client.table(self.table_name)
            .upsert(
                {
                    "key": key,
                    "value": value,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to store purchase state")

    def delete(self, key: str) -> None:
        """Remove a key if present."""
        self.client.table(self.table_name).delete().eq("key", key).execute()

    def keys(self, prefix: str) -> list[str]:
        """Return every stored key starting with a prefix."""
        response = (
            self.client.table(self.table_name)
            .select("key")
            .like("key", f"{prefix}%")
            .execute()
        )
        return [
            str(row["key"])
            for row in response.data or []
            if str(row["key"]).startswith(prefix)
        ]
