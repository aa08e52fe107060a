"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from uuid import UUID, uuid4

import pytest

from fitsync.config import Settings
from fitsync.containers import AppContainer
from fitsync.domain.diary import FoodEntry, Intensity, WorkoutEntry
from fitsync.domain.profile import ProfileSnapshot
from fitsync.domain.weight import WeightEntry
from fitsync.services.balance import BalanceService, DailyTotalsRepository
from fitsync.services.diary import DiaryRepository, DiaryService
from fitsync.services.energy import EnergyService, ProfileRepository
from fitsync.services.user_settings import (
    UserSettingsRepository,
    UserSettingsService,
)
from fitsync.services.weight import WeightRepository, WeightService


@dataclass
class InMemoryUserSettingsRepository(UserSettingsRepository):
    """In-memory user settings repository for tests."""

    timezones: dict[UUID, str] = field(default_factory=dict)
    goals: dict[UUID, int] = field(default_factory=dict)

    def get_timezone(self, user_id: UUID) -> str | None:
        return self.timezones.get(user_id)

    def set_timezone(self, user_id: UUID, timezone: str) -> None:
        self.timezones[user_id] = timezone

    def get_calorie_goal(self, user_id: UUID) -> int | None:
        return self.goals.get(user_id)

    def set_calorie_goal(self, user_id: UUID, goal_calories: int) -> None:
        self.goals[user_id] = goal_calories


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[UUID, ProfileSnapshot] = field(default_factory=dict)

    def get_profile(self, user_id: UUID) -> ProfileSnapshot | None:
        return self.profiles.get(user_id)


@dataclass
class InMemoryDiaryRepository(DiaryRepository, DailyTotalsRepository):
    """In-memory diary repository for tests."""

    foods: dict[UUID, FoodEntry] = field(default_factory=dict)
    workouts: dict[UUID, WorkoutEntry] = field(default_factory=dict)

    def add_food_entry(  # noqa: PLR0913
        self,
        user_id: UUID,
        day: date,
        name: str,
        calories: float,
        quantity: float,
        meal_type: str | None,
        protein: float | None = None,
        carbs: float | None = None,
        fat: float | None = None,
    ) -> FoodEntry:
        entry = FoodEntry(
            id=uuid4(),
            user_id=user_id,
            day=day,
            name=name,
            calories=calories,
            quantity=quantity,
            meal_type=meal_type,
            protein=protein,
            carbs=carbs,
            fat=fat,
        )
        self.foods[entry.id] = entry
        return entry

    def get_food_entry(self, entry_id: UUID) -> FoodEntry | None:
        return self.foods.get(entry_id)

    def list_food_entries(self, user_id: UUID, day: date) -> list[FoodEntry]:
        return [
            entry
            for entry in self.foods.values()
            if entry.user_id == user_id and entry.day == day
        ]

    def delete_food_entry(self, entry_id: UUID) -> None:
        self.foods.pop(entry_id, None)

    def add_workout_entry(  # noqa: PLR0913
        self,
        user_id: UUID,
        day: date,
        exercise_type: str,
        duration_minutes: int,
        intensity: Intensity,
        calories_burned: float,
    ) -> WorkoutEntry:
        entry = WorkoutEntry(
            id=uuid4(),
            user_id=user_id,
            day=day,
            exercise_type=exercise_type,
            duration_minutes=duration_minutes,
            intensity=intensity,
            calories_burned=calories_burned,
        )
        self.workouts[entry.id] = entry
        return entry

    def get_workout_entry(self, entry_id: UUID) -> WorkoutEntry | None:
        return self.workouts.get(entry_id)

    def delete_workout_entry(self, entry_id: UUID) -> None:
        self.workouts.pop(entry_id, None)

    def sum_consumed_calories(self, user_id: UUID, day: date) -> float:
        return sum(
            entry.total_calories
            for entry in self.foods.values()
            if entry.user_id == user_id and entry.day == day
        )

    def sum_burned_calories(self, user_id: UUID, day: date) -> float:
        return sum(
            entry.calories_burned
            for entry in self.workouts.values()
            if entry.user_id == user_id and entry.day == day
        )


@dataclass
class InMemoryWeightRepository(WeightRepository):
    """In-memory weight repository for tests."""

    weights: dict[UUID, tuple[float | None, float | None]] = field(
        default_factory=dict
    )
    entries: list[WeightEntry] = field(default_factory=list)

    def get_weights(self, user_id: UUID) -> tuple[float | None, float | None]:
        return self.weights.get(user_id, (None, None))

    def update_weights(
        self, user_id: UUID, current_weight: float, goal_weight: float
    ) -> None:
        self.weights[user_id] = (current_weight, goal_weight)

    def add_weight_entry(self, user_id: UUID, day: date, weight: float) -> WeightEntry:
        entry = WeightEntry(id=uuid4(), user_id=user_id, day=day, weight=weight)
        self.entries.append(entry)
        return entry

    def get_latest_entry(self, user_id: UUID) -> WeightEntry | None:
        entries = self.list_entries(user_id, limit=1)
        return entries[0] if entries else None

    def list_entries(self, user_id: UUID, limit: int) -> list[WeightEntry]:
        own = [entry for entry in self.entries if entry.user_id == user_id]
        return sorted(own, key=lambda entry: entry.day, reverse=True)[:limit]


@dataclass
class FakeClock:
    """Settable UTC clock."""

    current: datetime = field(
        default_factory=lambda: datetime(2024, 6, 10, 12, 0, tzinfo=UTC)
    )

    def __call__(self) -> datetime:
        return self.current


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="test.service.key",
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def user_settings_repository() -> InMemoryUserSettingsRepository:
    return InMemoryUserSettingsRepository()


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def diary_repository() -> InMemoryDiaryRepository:
    return InMemoryDiaryRepository()


@pytest.fixture
def weight_repository() -> InMemoryWeightRepository:
    return InMemoryWeightRepository()


@pytest.fixture
def user_settings_service(
    user_settings_repository: InMemoryUserSettingsRepository,
) -> UserSettingsService:
    return UserSettingsService(user_settings_repository)


@pytest.fixture
def balance_service(
    diary_repository: InMemoryDiaryRepository,
    user_settings_service: UserSettingsService,
    clock: FakeClock,
) -> BalanceService:
    return BalanceService(
        repository=diary_repository,
        user_settings_service=user_settings_service,
        now=clock,
    )


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    user_settings_service: UserSettingsService,
    balance_service: BalanceService,
    profile_repository: InMemoryProfileRepository,
    diary_repository: InMemoryDiaryRepository,
    weight_repository: InMemoryWeightRepository,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        user_settings_service=user_settings_service,
        balance_service=balance_service,
        energy_service=EnergyService(
            profiles=profile_repository, balance_service=balance_service
        ),
        diary_service=DiaryService(
            repository=diary_repository, balance_service=balance_service
        ),
        weight_service=WeightService(
            repository=weight_repository, balance_service=balance_service
        ),
    )
