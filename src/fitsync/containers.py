"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from fitsync.adapters.supabase_diary_repository import SupabaseDiaryRepository
from fitsync.adapters.supabase_profile_repository import SupabaseProfileRepository
from fitsync.adapters.supabase_user_settings_repository import (
    SupabaseUserSettingsRepository,
)
from fitsync.adapters.supabase_weight_repository import SupabaseWeightRepository
from fitsync.config import Settings
from fitsync.services.balance import BalanceService
from fitsync.services.diary import DiaryService
from fitsync.services.energy import EnergyService
from fitsync.services.user_settings import UserSettingsService
from fitsync.services.weight import WeightService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_settings_service: UserSettingsService
    balance_service: BalanceService
    energy_service: EnergyService
    diary_service: DiaryService
    weight_service: WeightService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    diary_repository = SupabaseDiaryRepository(supabase_client)
    user_settings_service = UserSettingsService(
        SupabaseUserSettingsRepository(supabase_client),
        default_timezone=resolved_settings.default_timezone,
        default_calorie_goal=resolved_settings.default_calorie_goal,
    )
    balance_service = BalanceService(
        repository=diary_repository,
        user_settings_service=user_settings_service,
    )
    energy_service = EnergyService(
        profiles=SupabaseProfileRepository(supabase_client),
        balance_service=balance_service,
    )
    diary_service = DiaryService(
        repository=diary_repository,
        balance_service=balance_service,
    )
    weight_service = WeightService(
        repository=SupabaseWeightRepository(supabase_client),
        balance_service=balance_service,
    )

    return AppContainer(
        settings=resolved_settings,
        user_settings_service=user_settings_service,
        balance_service=balance_service,
        energy_service=energy_service,
        diary_service=diary_service,
        weight_service=weight_service,
    )
