"""Supabase repository for body profiles."""

from dataclasses import dataclass
from enum import Enum
from typing import TypeVar
from uuid import UUID

from supabase import Client

from fitsync.domain.profile import (
    ActivityLevel,
    Gender,
    GoalType,
    ProfileSnapshot,
    UnitSystem,
)
from fitsync.services.energy import ProfileRepository

_PROFILE_COLUMNS = (
    "height, current_weight, goal_weight, age, gender, "
    "activity_level, unit_system, goal_type"
)

_E = TypeVar("_E", bound=Enum)


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profile reads."""

    client: Client

    def get_profile(self, user_id: UUID) -> ProfileSnapshot | None:
        """Return the profile stored on the user row."""
        response = (
            self.client.table("users")
            .select(_PROFILE_COLUMNS)
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])


def _parse_row(row: dict[str, object]) -> ProfileSnapshot:
    return ProfileSnapshot(
        height_value=_parse_number(row.get("height")),
        weight_value=_parse_number(row.get("current_weight")),
        age_years=_parse_number(row.get("age")),
        gender=_parse_enum(Gender, row.get("gender")),
        unit_system=_parse_enum(UnitSystem, row.get("unit_system"))
        or UnitSystem.METRIC,
        activity_level=_parse_enum(ActivityLevel, row.get("activity_level")),
        goal_type=_parse_enum(GoalType, row.get("goal_type")),
        goal_weight_value=_parse_number(row.get("goal_weight")),
    )


def _parse_number(value: object) -> float | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _parse_enum(enum_cls: type[_E], value: object) -> _E | None:
    if not isinstance(value, str):
        return None
    try:
        return enum_cls(value.lower())
    except ValueError:
        return None
