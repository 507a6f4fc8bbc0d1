"""Tests for container wiring."""

from intake_tracker.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.settings is settings
    assert container.nutrition_service is not None
    assert (
        container.grocery_service.intake_repository
        is container.nutrition_service.intake_repository
    )
