"""Domain models for body profiles and derived energy plans."""

from dataclasses import dataclass
from enum import Enum


class Gender(Enum):
    """Gender used by the Mifflin-St Jeor equation."""

    MALE = "male"
    FEMALE = "female"


class UnitSystem(Enum):
    """Unit system the profile values were entered in."""

    METRIC = "metric"
    IMPERIAL = "imperial"


class ActivityLevel(Enum):
    """Daily activity level."""

    SEDENTARY = "sedentary"  # Little or no exercise
    LIGHT = "light"  # Light exercise 1-3 days/week
    MODERATE = "moderate"  # Moderate exercise 3-5 days/week
    ACTIVE = "active"  # Hard exercise 6-7 days/week
    VERY = "very"  # Very hard exercise and physical job


class GoalType(Enum):
    """Weight-change objective."""

    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"


@dataclass(frozen=True)
class ProfileSnapshot:
    """Body profile at the time of a calculation.

    Fields left as None have not been entered yet. Heights and weights are
    in centimetres and kilograms for metric profiles, inches and pounds for
    imperial ones.
    """

    height_value: float | None = None
    weight_value: float | None = None
    age_years: float | None = None
    gender: Gender | None = None
    unit_system: UnitSystem = UnitSystem.METRIC
    activity_level: ActivityLevel | None = None
    goal_type: GoalType | None = None
    goal_weight_value: float | None = None


@dataclass(frozen=True)
class EnergyResult:
    """Energy plan derived from a complete profile."""

    bmr: float
    tdee: int
    calorie_goal: int
    protein_goal_grams: int
    floor_applied: bool = False


# Lowest daily goal the calculator will ever derive
CALORIE_FLOOR = 1200
