"""Domain models for food and workout diary entries."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from uuid import UUID


class Intensity(Enum):
    """Workout intensity."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class DistanceUnit(Enum):
    """Unit of a distance-based workout log."""

    MILES = "miles"
    KM = "km"


@dataclass(frozen=True)
class FoodEntry:
    """Logged food portion."""

    id: UUID
    user_id: UUID
    day: date
    name: str
    calories: float
    quantity: float
    meal_type: str | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None

    @property
    def total_calories(self) -> float:
        return self.calories * self.quantity


@dataclass(frozen=True)
class WorkoutEntry:
    """Logged workout."""

    id: UUID
    user_id: UUID
    day: date
    exercise_type: str
    duration_minutes: int
    intensity: Intensity
    calories_burned: float


@dataclass(frozen=True)
class WorkoutEstimate:
    """Estimated burn for a workout form."""

    calories_burned: int
    duration_minutes: int


@dataclass(frozen=True)
class MacroTotals:
    """Rounded grams of protein, carbs and fat eaten on one day."""

    date: str
    protein: int
    carbs: int
    fat: int
