"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from intake_tracker.adapters.supabase_catalog_repository import (
    SupabaseCatalogRepository,
)
from intake_tracker.adapters.supabase_intake_repository import (
    SupabaseIntakeRepository,
)
from intake_tracker.adapters.supabase_key_value_store import SupabaseKeyValueStore
from intake_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from intake_tracker.config import Settings
from intake_tracker.services.grocery import GroceryService
from intake_tracker.services.nutrition import NutritionService
from intake_tracker.services.purchase_cache import PurchaseStateCache


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    nutrition_service: NutritionService
    grocery_service: GroceryService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    intake_repository = SupabaseIntakeRepository(supabase_client)
    nutrition_service = NutritionService(
        intake_repository=intake_repository,
        catalog_repository=SupabaseCatalogRepository(supabase_client),
        profile_repository=SupabaseProfileRepository(supabase_client),
    )
    grocery_service = GroceryService(
        intake_repository=intake_repository,
        purchase_cache=PurchaseStateCache(SupabaseKeyValueStore(supabase_client)),
    )
    return AppContainer(
        settings=resolved_settings,
        nutrition_service=nutrition_service,
        grocery_service=grocery_service,
    )
