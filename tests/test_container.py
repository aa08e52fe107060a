"""Tests for container wiring."""

from fitsync.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.balance_service is not None
    assert container.diary_service.balance_service is container.balance_service
    assert container.energy_service.balance_service is container.balance_service
    assert container.user_settings_service.default_calorie_goal == 2000
