"""User body and activity profile."""

from dataclasses import dataclass
from typing import Literal

Gender = Literal["male", "female", "other"]
Goal = Literal["maintain", "lose", "gain"]


@dataclass(frozen=True)
class UserProfile:
    """Body metrics used for target calculation; unset fields use defaults."""

    weight_kg: float | None = None
    height_cm: float | None = None
    age: int | None = None
    gender: Gender | None = None
    activity_level: float | None = None
    goal: Goal | None = None

    def resolved(self) -> "UserProfile":
        """Return a copy with every missing field replaced by its fallback."""
        return UserProfile(
            weight_kg=_fallback(self.weight_kg, DEFAULT_PROFILE.weight_kg),
            height_cm=_fallback(self.height_cm, DEFAULT_PROFILE.height_cm),
            age=_fallback(self.age, DEFAULT_PROFILE.age),
            gender=self.gender or DEFAULT_PROFILE.gender,
            activity_level=_fallback(
                self.activity_level, DEFAULT_PROFILE.activity_level
            ),
            goal=self.goal or DEFAULT_PROFILE.goal,
        )


def _fallback(value, default):  # type: ignore[no-untyped-def]
    return default if value is None else value


DEFAULT_PROFILE = UserProfile(
    weight_kg=70,
    height_cm=170,
    age=30,
    gender="male",
    activity_level=1.5,
    goal="maintain",
)
