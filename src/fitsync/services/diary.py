"""Food and workout logging that keeps the daily balance current."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from fitsync.domain.balance import DailyEnergyBalance
from fitsync.domain.diary import FoodEntry, Intensity, MacroTotals, WorkoutEntry
from fitsync.services.balance import BalanceService, validate_amount
from fitsync.units import round_half_up


class DiaryRepository(Protocol):
    """Persistence interface for diary entries."""

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
        """Create and return a food entry."""

    def get_food_entry(self, entry_id: UUID) -> FoodEntry | None:
        """Return a food entry by id."""

    def list_food_entries(self, user_id: UUID, day: date) -> list[FoodEntry]:
        """Return a user's food entries for one day."""

    def delete_food_entry(self, entry_id: UUID) -> None:
        """Delete a food entry."""

    def add_workout_entry(  # noqa: PLR0913
        self,
        user_id: UUID,
        day: date,
        exercise_type: str,
        duration_minutes: int,
        intensity: Intensity,
        calories_burned: float,
    ) -> WorkoutEntry:
        """Create and return a workout entry."""

    def get_workout_entry(self, entry_id: UUID) -> WorkoutEntry | None:
        """Return a workout entry by id."""

    def delete_workout_entry(self, entry_id: UUID) -> None:
        """Delete a workout entry."""


@dataclass
class DiaryService:
    """Service for logging food and workouts against today's balance."""

    repository: DiaryRepository
    balance_service: BalanceService

    def log_food(  # noqa: PLR0913
        self,
        user_id: UUID,
        name: str,
        calories: float,
        quantity: float = 1.0,
        meal_type: str | None = None,
        protein: float | None = None,
        carbs: float | None = None,
        fat: float | None = None,
    ) -> tuple[FoodEntry, DailyEnergyBalance]:
        """Store a food entry for today and count it as consumed."""
        calories = validate_amount(calories, "calories")
        quantity = validate_amount(quantity, "quantity")
        protein = _optional_amount(protein, "protein")
        carbs = _optional_amount(carbs, "carbs")
        fat = _optional_amount(fat, "fat")
        # Load before writing so the new entry is not counted twice.
        tracker = self.balance_service.tracker(user_id)
        entry = self.repository.add_food_entry(
            user_id=user_id,
            day=self.balance_service.today(user_id),
            name=name,
            calories=calories,
            quantity=quantity,
            meal_type=meal_type,
            protein=protein,
            carbs=carbs,
            fat=fat,
        )
        return entry, tracker.record_consumed(entry.total_calories)

    def delete_food(self, user_id: UUID, entry_id: UUID) -> DailyEnergyBalance | None:
        """Delete a food entry; returns None when the user has no such entry."""
        entry = self.repository.get_food_entry(entry_id)
        if entry is None or entry.user_id != user_id:
            return None
        tracker = self.balance_service.tracker(user_id)
        self.repository.delete_food_entry(entry_id)
        if entry.day != self.balance_service.today(user_id):
            return tracker.snapshot()
        return tracker.remove_consumed(entry.total_calories)

    def get_macros(self, user_id: UUID) -> MacroTotals:
        """Return today's protein, carbs and fat, each rounded to whole grams."""
        day = self.balance_service.today(user_id)
        entries = self.repository.list_food_entries(user_id, day)
        return MacroTotals(
            date=day.isoformat(),
            protein=round_half_up(_macro_total(entries, "protein")),
            carbs=round_half_up(_macro_total(entries, "carbs")),
            fat=round_half_up(_macro_total(entries, "fat")),
        )

    def log_workout(  # noqa: PLR0913
        self,
        user_id: UUID,
        exercise_type: str,
        duration_minutes: int,
        intensity: Intensity,
        calories_burned: float,
    ) -> tuple[WorkoutEntry, DailyEnergyBalance]:
        """Store a workout for today and count it as burned."""
        calories_burned = validate_amount(calories_burned, "calories_burned")
        validate_amount(duration_minutes, "duration_minutes")
        tracker = self.balance_service.tracker(user_id)
        entry = self.repository.add_workout_entry(
            user_id=user_id,
            day=self.balance_service.today(user_id),
            exercise_type=exercise_type,
            duration_minutes=duration_minutes,
            intensity=intensity,
            calories_burned=calories_burned,
        )
        return entry, tracker.record_burned(entry.calories_burned)

    def delete_workout(
        self, user_id: UUID, entry_id: UUID
    ) -> DailyEnergyBalance | None:
        """Delete a workout; returns None when the user has no such entry."""
        entry = self.repository.get_workout_entry(entry_id)
        if entry is None or entry.user_id != user_id:
            return None
        tracker = self.balance_service.tracker(user_id)
        self.repository.delete_workout_entry(entry_id)
        if entry.day != self.balance_service.today(user_id):
            return tracker.snapshot()
        return tracker.remove_burned(entry.calories_burned)


def _optional_amount(amount: float | None, field_name: str) -> float | None:
    if amount is None:
        return None
    return validate_amount(amount, field_name)


def _macro_total(entries: list[FoodEntry], macro: str) -> float:
    # Entries without a value for the macro add nothing.
    return sum((getattr(entry, macro) or 0.0) * entry.quantity for entry in entries)
