"""Domain models for the daily energy balance."""

from dataclasses import dataclass
from enum import Enum


class TrackerState(Enum):
    """Lifecycle state of a daily balance tracker."""

    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"
    STALE = "stale"


@dataclass(frozen=True)
class DailyEnergyBalance:
    """Food minus exercise against the daily goal."""

    date: str
    consumed_calories: float
    burned_calories: float
    goal_calories: int
    remaining_calories: float
