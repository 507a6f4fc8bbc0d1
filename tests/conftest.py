"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date

import pytest

from intake_tracker.config import Settings
from intake_tracker.containers import AppContainer
from intake_tracker.domain.catalog import Ingredient, Supplement
from intake_tracker.domain.intake import EntryType, IntakeEntry
from intake_tracker.domain.profile import UserProfile
from intake_tracker.services.grocery import GroceryService
from intake_tracker.services.nutrition import (
    CatalogRepository,
    IntakeRepository,
    NutritionService,
    ProfileRepository,
)
from intake_tracker.services.purchase_cache import (
    InMemoryKeyValueStore,
    PurchaseStateCache,
)

USER_ID = 1


@dataclass
class InMemoryIntakeRepository(IntakeRepository):
    """In-memory intake repository for tests."""

    entries: list[IntakeEntry] = field(default_factory=list)
    calls: int = 0

    def list_entries(self, user_id: int, start: date, end: date) -> list[IntakeEntry]:
        self.calls += 1
        return [
            entry
            for entry in self.entries
            if entry.user_id == user_id and start <= entry.entry_date <= end
        ]

    def add(  # noqa: PLR0913
        self,
        entry_type: EntryType,
        item_id: int,
        quantity: float,
        unit: str = "g",
        entry_date: date = date(2024, 3, 4),
        item_name: str | None = None,
        user_id: int = USER_ID,
    ) -> IntakeEntry:
        entry = IntakeEntry(
            id=len(self.entries) + 1,
            user_id=user_id,
            entry_date=entry_date,
            entry_time=None,
            type=entry_type,
            item_id=item_id,
            quantity=quantity,
            unit=unit,
            item_name=item_name,
        )
        self.entries.append(entry)
        return entry


@dataclass
class InMemoryCatalogRepository(CatalogRepository):
    """In-memory density catalog for tests."""

    ingredients: dict[int, Ingredient] = field(default_factory=dict)
    supplements: dict[int, Supplement] = field(default_factory=dict)
    lookups: list[tuple[str, int]] = field(default_factory=list)

    def get_ingredient(self, ingredient_id: int) -> Ingredient | None:
        self.lookups.append(("ingredient", ingredient_id))
        return self.ingredients.get(ingredient_id)

    def get_supplement(self, supplement_id: int) -> Supplement | None:
        self.lookups.append(("supplement", supplement_id))
        return self.supplements.get(supplement_id)


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[int, UserProfile] = field(default_factory=dict)

    def get_profile(self, user_id: int) -> UserProfile | None:
        return self.profiles.get(user_id)


def chicken_breast() -> Ingredient:
    return Ingredient(
        id=1,
        name="Chicken breast",
        unit="g",
        nutrients={"calories": 165, "protein": 31, "fat": 3.6},
    )


def multivitamin() -> Supplement:
    return Supplement(
        id=7,
        name="Multivitamin",
        serving_size=2,
        serving_unit="tablet",
        nutrients={"vitamin_c": 80, "vitamin_d": 10, "iron": 14},
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
        api_token="api-token",
    )


@pytest.fixture
def intake_repository() -> InMemoryIntakeRepository:
    return InMemoryIntakeRepository()


@pytest.fixture
def catalog_repository() -> InMemoryCatalogRepository:
    return InMemoryCatalogRepository(
        ingredients={1: chicken_breast()},
        supplements={7: multivitamin()},
    )


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def key_value_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def nutrition_service(
    intake_repository: InMemoryIntakeRepository,
    catalog_repository: InMemoryCatalogRepository,
    profile_repository: InMemoryProfileRepository,
) -> NutritionService:
    return NutritionService(
        intake_repository=intake_repository,
        catalog_repository=catalog_repository,
        profile_repository=profile_repository,
    )


@pytest.fixture
def grocery_service(
    intake_repository: InMemoryIntakeRepository,
    key_value_store: InMemoryKeyValueStore,
) -> GroceryService:
    return GroceryService(
        intake_repository=intake_repository,
        purchase_cache=PurchaseStateCache(key_value_store),
    )


@pytest.fixture
def container(
    settings: Settings,
    nutrition_service: NutritionService,
    grocery_service: GroceryService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        nutrition_service=nutrition_service,
        grocery_service=grocery_service,
    )
