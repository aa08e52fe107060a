"""BMR, TDEE, calorie goal and protein target derivations.

BMR uses the Mifflin-St Jeor equation on metric values. Imperial profiles are
normalized through ``fitsync.units`` before any arithmetic, and every later
step works on the output of the previous one, so a missing field surfaces as
``IncompleteProfileError`` instead of a zero that looks like a real result.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, TypeVar
from uuid import UUID

from fitsync.domain.errors import IncompleteProfileError
from fitsync.domain.profile import (
    CALORIE_FLOOR,
    ActivityLevel,
    EnergyResult,
    Gender,
    GoalType,
    ProfileSnapshot,
    UnitSystem,
)
from fitsync.services.balance import BalanceService
from fitsync.units import in_to_cm, kg_to_lb, lb_to_kg, round_half_up

ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY: 1.9,
}

# About 1 lb per week either way
GOAL_ADJUSTMENTS = {
    GoalType.LOSE: -500,
    GoalType.MAINTAIN: 0,
    GoalType.GAIN: 500,
}

_GENDER_OFFSETS = {
    Gender.MALE: 5,
    Gender.FEMALE: -161,
}

_logger = logging.getLogger(__name__)

_E = TypeVar("_E", bound=Enum)


class ProfileRepository(Protocol):
    """Persistence interface for body profiles."""

    def get_profile(self, user_id: UUID) -> ProfileSnapshot | None:
        """Return the stored profile for a user, if any."""


def missing_profile_fields(profile: ProfileSnapshot) -> tuple[str, ...]:
    """Return the names of required fields that are missing or unusable."""
    missing = []
    for name in ("height_value", "weight_value", "age_years"):
        if _positive_number(getattr(profile, name)) is None:
            missing.append(name)
    if _coerce_enum(Gender, profile.gender) is None:
        missing.append("gender")
    if _coerce_enum(UnitSystem, profile.unit_system) is None:
        missing.append("unit_system")
    if _coerce_enum(ActivityLevel, profile.activity_level) is None:
        missing.append("activity_level")
    if _coerce_enum(GoalType, profile.goal_type) is None:
        missing.append("goal_type")
    if _positive_number(profile.goal_weight_value) is None:
        missing.append("goal_weight_value")
    return tuple(missing)


def calculate_bmr(profile: ProfileSnapshot) -> float:
    """Calculate basal metabolic rate with the Mifflin-St Jeor equation."""
    weight = _positive_number(profile.weight_value)
    height = _positive_number(profile.height_value)
    age = _positive_number(profile.age_years)
    gender = _coerce_enum(Gender, profile.gender)
    unit_system = _coerce_enum(UnitSystem, profile.unit_system)

    missing = [
        name
        for name, value in (
            ("height_value", height),
            ("weight_value", weight),
            ("age_years", age),
            ("gender", gender),
            ("unit_system", unit_system),
        )
        if value is None
    ]
    if missing:
        raise IncompleteProfileError(tuple(missing))

    if unit_system is UnitSystem.IMPERIAL:
        weight_kg = lb_to_kg(weight)
        height_cm = in_to_cm(height)
    else:
        weight_kg = weight
        height_cm = height

    return 10 * weight_kg + 6.25 * height_cm - 5 * age + _GENDER_OFFSETS[gender]


def calculate_tdee(
    bmr: float | None, activity_level: ActivityLevel | str | None
) -> int:
    """Scale BMR by the activity multiplier and round to whole calories."""
    if _finite_number(bmr) is None:
        raise IncompleteProfileError(("bmr",))
    level = _coerce_enum(ActivityLevel, activity_level)
    if level is None:
        raise IncompleteProfileError(("activity_level",))
    return round_half_up(bmr * ACTIVITY_MULTIPLIERS[level])


def calculate_calorie_goal(
    tdee: float | None, goal_type: GoalType | str | None
) -> int:
    """Adjust TDEE for the weight goal, never going below the calorie floor."""
    if _finite_number(tdee) is None:
        raise IncompleteProfileError(("tdee",))
    goal = _coerce_enum(GoalType, goal_type)
    if goal is None:
        raise IncompleteProfileError(("goal_type",))
    return max(CALORIE_FLOOR, round_half_up(tdee + GOAL_ADJUSTMENTS[goal]))


def calculate_protein_target(
    goal_weight_value: float | None, unit_system: UnitSystem | str | None
) -> int:
    """Return about 1 g of protein per pound of goal body weight."""
    goal_weight = _positive_number(goal_weight_value)
    if goal_weight is None:
        raise IncompleteProfileError(("goal_weight_value",))
    system = _coerce_enum(UnitSystem, unit_system)
    if system is None:
        raise IncompleteProfileError(("unit_system",))
    if system is UnitSystem.METRIC:
        goal_weight = kg_to_lb(goal_weight)
    return round_half_up(goal_weight)


def calculate_energy_plan(profile: ProfileSnapshot) -> EnergyResult:
    """Run the full BMR -> TDEE -> goal -> protein derivation."""
    missing = missing_profile_fields(profile)
    if missing:
        raise IncompleteProfileError(missing)

    bmr = calculate_bmr(profile)
    tdee = calculate_tdee(bmr, profile.activity_level)
    calorie_goal = calculate_calorie_goal(tdee, profile.goal_type)
    protein = calculate_protein_target(profile.goal_weight_value, profile.unit_system)
    adjusted = tdee + GOAL_ADJUSTMENTS[_coerce_enum(GoalType, profile.goal_type)]
    return EnergyResult(
        bmr=bmr,
        tdee=tdee,
        calorie_goal=calorie_goal,
        protein_goal_grams=protein,
        floor_applied=adjusted < CALORIE_FLOOR,
    )


@dataclass
class EnergyService:
    """Service for computing and applying energy plans."""

    profiles: ProfileRepository
    balance_service: BalanceService

    def preview(self, profile: ProfileSnapshot) -> EnergyResult:
        """Compute a plan without storing anything."""
        return calculate_energy_plan(profile)

    def get_plan(self, user_id: UUID) -> EnergyResult:
        """Compute the plan for a user's stored profile."""
        profile = self.profiles.get_profile(user_id)
        if profile is None:
            raise IncompleteProfileError(missing_profile_fields(ProfileSnapshot()))
        return calculate_energy_plan(profile)

    def apply_plan(self, user_id: UUID) -> EnergyResult:
        """Compute the plan and make its calorie goal the user's goal."""
        result = self.get_plan(user_id)
        if result.floor_applied:
            _logger.info(
                "Calorie goal raised to floor: user_id=%s tdee=%s", user_id, result.tdee
            )
        self.balance_service.set_goal(user_id, result.calorie_goal)
        return result


def _finite_number(value: object) -> float | None:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    return float(value)


def _positive_number(value: object) -> float | None:
    number = _finite_number(value)
    if number is None or number <= 0:
        return None
    return number


def _coerce_enum(enum_cls: type[_E], value: object) -> _E | None:
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value.strip().lower())
        except ValueError:
            return None
    return None
