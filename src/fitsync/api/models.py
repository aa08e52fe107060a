"""Pydantic models for API request payloads."""

from pydantic import BaseModel, Field

from fitsync.domain.diary import DistanceUnit, Intensity
from fitsync.domain.profile import (
    ActivityLevel,
    Gender,
    GoalType,
    ProfileSnapshot,
    UnitSystem,
)


class ProfilePayload(BaseModel):
    """Profile form values; any field may still be blank."""

    height_value: float | None = None
    weight_value: float | None = None
    age_years: float | None = None
    gender: Gender | None = None
    unit_system: UnitSystem = UnitSystem.METRIC
    activity_level: ActivityLevel | None = None
    goal_type: GoalType | None = None
    goal_weight_value: float | None = None

    def to_snapshot(self) -> ProfileSnapshot:
        return ProfileSnapshot(
            height_value=self.height_value,
            weight_value=self.weight_value,
            age_years=self.age_years,
            gender=self.gender,
            unit_system=self.unit_system,
            activity_level=self.activity_level,
            goal_type=self.goal_type,
            goal_weight_value=self.goal_weight_value,
        )


class GoalUpdate(BaseModel):
    """Manually entered calorie goal."""

    goal_calories: int


class FoodLog(BaseModel):
    """Food diary entry."""

    name: str = Field(min_length=1)
    calories: float
    quantity: float = 1.0
    meal_type: str | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None


class WorkoutLog(BaseModel):
    """Workout diary entry; calories are estimated from duration when absent."""

    exercise_type: str = Field(min_length=1)
    duration_minutes: int
    intensity: Intensity = Intensity.MODERATE
    calories_burned: float | None = None


class WorkoutEstimateRequest(BaseModel):
    """Workout form values for a burn estimate."""

    exercise_type: str = Field(min_length=1)
    intensity: Intensity = Intensity.MODERATE
    duration_minutes: float | None = None
    distance: float | None = None
    distance_unit: DistanceUnit = DistanceUnit.MILES


class TimezoneUpdate(BaseModel):
    """IANA timezone name such as "America/New_York"."""

    timezone: str = Field(min_length=1)


class WeightUpdate(BaseModel):
    """Current and target body weight."""

    current_weight: float
    target_weight: float
