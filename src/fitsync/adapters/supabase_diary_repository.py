"""Supabase repository for food and workout entries."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from fitsync.domain.diary import FoodEntry, Intensity, WorkoutEntry
from fitsync.services.balance import DailyTotalsRepository
from fitsync.services.diary import DiaryRepository

_FOOD_COLUMNS = (
    "id, user_id, date, food_name, calories, quantity, meal_type, protein, carbs, fat"
)
_WORKOUT_COLUMNS = (
    "id, user_id, date, exercise_type, duration, intensity, calories_burned"
)


@dataclass
class SupabaseDiaryRepository(DiaryRepository, DailyTotalsRepository):
    """Supabase implementation for diary entries and daily totals."""

    client: Client

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
        """Insert a food entry row and return it."""
        response = (
            self.client.table("food_entries")
            .insert(
                {
                    "user_id": str(user_id),
                    "date": day.isoformat(),
                    "food_name": name,
                    "calories": calories,
                    "quantity": quantity,
                    "meal_type": meal_type,
                    "protein": protein,
                    "carbs": carbs,
                    "fat": fat,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food entry in Supabase")
        return _parse_food(response.data[0])

    def get_food_entry(self, entry_id: UUID) -> FoodEntry | None:
        """Return a food entry by id."""
        response = (
            self.client.table("food_entries")
            .select(_FOOD_COLUMNS)
            .eq("id", str(entry_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_food(response.data[0])

    def list_food_entries(self, user_id: UUID, day: date) -> list[FoodEntry]:
        """Return a user's food entries for one day."""
        response = (
            self.client.table("food_entries")
            .select(_FOOD_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("date", day.isoformat())
            .execute()
        )
        return [_parse_food(row) for row in response.data or []]

    def delete_food_entry(self, entry_id: UUID) -> None:
        """Delete a food entry row."""
        self.client.table("food_entries").delete().eq("id", str(entry_id)).execute()

    def add_workout_entry(  # noqa: PLR0913
        self,
        user_id: UUID,
        day: date,
        exercise_type: str,
        duration_minutes: int,
        intensity: Intensity,
        calories_burned: float,
    ) -> WorkoutEntry:
        """Insert a workout entry row and return it."""
        response = (
            self.client.table("workout_entries")
            .insert(
                {
                    "user_id": str(user_id),
                    "date": day.isoformat(),
                    "exercise_type": exercise_type,
                    "duration": duration_minutes,
                    "intensity": intensity.value,
                    "calories_burned": calories_burned,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create workout entry in Supabase")
        return _parse_workout(response.data[0])

    def get_workout_entry(self, entry_id: UUID) -> WorkoutEntry | None:
        """Return a workout entry by id."""
        response = (
            self.client.table("workout_entries")
            .select(_WORKOUT_COLUMNS)
            .eq("id", str(entry_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_workout(response.data[0])

    def delete_workout_entry(self, entry_id: UUID) -> None:
        """Delete a workout entry row."""
        self.client.table("workout_entries").delete().eq(
            "id", str(entry_id)
        ).execute()

    def sum_consumed_calories(self, user_id: UUID, day: date) -> float:
        """Return calories times quantity summed over the day's food entries."""
        response = (
            self.client.table("food_entries")
            .select("calories, quantity")
            .eq("user_id", str(user_id))
            .eq("date", day.isoformat())
            .execute()
        )
        return sum(
            float(row.get("calories") or 0.0) * float(row.get("quantity") or 0.0)
            for row in response.data or []
        )

    def sum_burned_calories(self, user_id: UUID, day: date) -> float:
        """Return calories burned summed over the day's workouts."""
        response = (
            self.client.table("workout_entries")
            .select("calories_burned")
            .eq("user_id", str(user_id))
            .eq("date", day.isoformat())
            .execute()
        )
        return sum(
            float(row.get("calories_burned") or 0.0) for row in response.data or []
        )


def _parse_food(row: dict[str, object]) -> FoodEntry:
    return FoodEntry(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        day=date.fromisoformat(str(row["date"])),
        name=str(row.get("food_name") or ""),
        calories=float(row.get("calories") or 0.0),
        quantity=float(row.get("quantity") or 0.0),
        meal_type=row.get("meal_type"),
        protein=_optional_float(row.get("protein")),
        carbs=_optional_float(row.get("carbs")),
        fat=_optional_float(row.get("fat")),
    )


def _parse_workout(row: dict[str, object]) -> WorkoutEntry:
    return WorkoutEntry(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        day=date.fromisoformat(str(row["date"])),
        exercise_type=str(row.get("exercise_type") or ""),
        duration_minutes=int(row.get("duration") or 0),
        intensity=Intensity(str(row.get("intensity") or "moderate").lower()),
        calories_burned=float(row.get("calories_burned") or 0.0),
    )


def _optional_float(value: object) -> float | None:
    if value is None:
        return None
    return float(value)
