"""Supabase repository for user nutrition profiles."""

from dataclasses import dataclass

from supabase import Client

from intake_tracker.domain.profile import UserProfile
from intake_tracker.services.nutrition import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profile lookups."""

    client: Client

    def get_profile(self, user_id: int) -> UserProfile | None:
        """Return the stored profile for a user."""
        response = (
            self.client.table("users")
            .select("weight, height, age, gender, activity_level, goal")
            .eq("id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return UserProfile(
            weight_kg=_optional_float(row.get("weight")),
            height_cm=_optional_float(row.get("height")),
            age=int(row["age"]) if row.get("age") is not None else None,
            gender=row.get("gender"),
            activity_level=_optional_float(row.get("activity_level")),
            goal=row.get("goal"),
        )


def _optional_float(value: object) -> float | None:
    if value is None:
        return None
    return float(value)
