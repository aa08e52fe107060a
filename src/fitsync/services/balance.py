"""Live daily energy balance with local-date rollover."""

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from fitsync.domain.balance import DailyEnergyBalance, TrackerState
from fitsync.domain.errors import InvalidAmountError
from fitsync.domain.profile import CALORIE_FLOOR
from fitsync.services.user_settings import UserSettingsService

_logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


class EnergyBalanceTracker:
    """Running "Food - Exercise = Remaining" figure for one user and day.

    The tracker starts uninitialized and becomes active for a date on the
    first load, read or write. Every read and write first compares the
    tracked date with ``today()``; once the date has moved on the tracker is
    stale, and the next access resets consumed and burned to zero for the
    new date while carrying the goal over.
    """

    def __init__(
        self, goal_calories: int, today: Callable[[], date] = date.today
    ) -> None:
        self._today = today
        self._day: date | None = None
        self._goal_calories = goal_calories
        self._consumed = 0.0
        self._burned = 0.0
        self._remaining = float(goal_calories)

    @property
    def state(self) -> TrackerState:
        if self._day is None:
            return TrackerState.UNINITIALIZED
        if self._day != self._today():
            return TrackerState.STALE
        return TrackerState.ACTIVE

    @property
    def day(self) -> date | None:
        return self._day

    @property
    def goal_calories(self) -> int:
        return self._goal_calories

    @property
    def consumed_calories(self) -> float:
        return self._consumed

    @property
    def burned_calories(self) -> float:
        return self._burned

    @property
    def remaining_calories(self) -> float:
        return self._remaining

    def load(
        self,
        consumed: float,
        burned: float,
        goal_calories: int | None = None,
        day: date | None = None,
    ) -> DailyEnergyBalance:
        """Replace the day's totals with values fetched from storage."""
        consumed = validate_amount(consumed, "consumed")
        burned = validate_amount(burned, "burned")
        self._day = day or self._today()
        self._consumed = consumed
        self._burned = burned
        if goal_calories is not None:
            self._goal_calories = goal_calories
        self.recompute()
        return self._snapshot()

    def check_date(self, today: date | None = None) -> bool:
        """Activate or roll over the tracker for today's date.

        Returns True when a previous day's totals were reset.
        """
        current = today or self._today()
        if self._day is None:
            self._day = current
            self.recompute()
            return False
        if self._day == current:
            return False
        _logger.info(
            "Rolling over daily balance: %s -> %s (consumed=%s burned=%s)",
            self._day,
            current,
            self._consumed,
            self._burned,
        )
        self._day = current
        self._consumed = 0.0
        self._burned = 0.0
        self.recompute()
        return True

    def record_consumed(self, amount: float) -> DailyEnergyBalance:
        """Add food calories to today's total."""
        amount = validate_amount(amount)
        self.check_date()
        self._consumed += amount
        self.recompute()
        return self._snapshot()

    def record_burned(self, amount: float) -> DailyEnergyBalance:
        """Add exercise calories to today's total."""
        amount = validate_amount(amount)
        self.check_date()
        self._burned += amount
        self.recompute()
        return self._snapshot()

    def remove_consumed(self, amount: float) -> DailyEnergyBalance:
        """Take back food calories, stopping at zero."""
        amount = validate_amount(amount)
        self.check_date()
        self._consumed = max(0.0, self._consumed - amount)
        self.recompute()
        return self._snapshot()

    def remove_burned(self, amount: float) -> DailyEnergyBalance:
        """Take back exercise calories, stopping at zero."""
        amount = validate_amount(amount)
        self.check_date()
        self._burned = max(0.0, self._burned - amount)
        self.recompute()
        return self._snapshot()

    def set_goal(self, goal_calories: int) -> DailyEnergyBalance:
        """Replace the daily goal as given, including values under the floor."""
        goal_calories = validate_goal(goal_calories)
        self.check_date()
        if goal_calories < CALORIE_FLOOR:
            _logger.info("Manual calorie goal below floor: %s", goal_calories)
        self._goal_calories = goal_calories
        self.recompute()
        return self._snapshot()

    def recompute(self) -> float:
        """Derive remaining calories from goal, consumed and burned."""
        self._remaining = self._goal_calories - self._consumed + self._burned
        return self._remaining

    def snapshot(self) -> DailyEnergyBalance:
        """Return today's balance, rolling over first if the date changed."""
        self.check_date()
        return self._snapshot()

    def _snapshot(self) -> DailyEnergyBalance:
        return DailyEnergyBalance(
            date=self._day.isoformat() if self._day else "",
            consumed_calories=self._consumed,
            burned_calories=self._burned,
            goal_calories=self._goal_calories,
            remaining_calories=self._remaining,
        )


class DailyTotalsRepository(Protocol):
    """Persistence interface for per-day diary totals."""

    def sum_consumed_calories(self, user_id: UUID, day: date) -> float:
        """Return food calories logged for a day."""

    def sum_burned_calories(self, user_id: UUID, day: date) -> float:
        """Return workout calories logged for a day."""


@dataclass
class BalanceService:
    """Builds a user's balance tracker from stored totals, in the user's timezone.

    Storage is the source of truth: every call reloads the day's totals and
    the stored goal, so writes made by other processes are always counted.
    """

    repository: DailyTotalsRepository
    user_settings_service: UserSettingsService
    now: Callable[[], datetime] = field(default=_utc_now)

    def today(self, user_id: UUID) -> date:
        """Return the current date in the user's timezone."""
        tz = ZoneInfo(self.user_settings_service.get_timezone(user_id))
        return self.now().astimezone(tz).date()

    def tracker(self, user_id: UUID) -> EnergyBalanceTracker:
        """Return a tracker loaded with today's stored totals and goal."""
        day = self.today(user_id)
        tracker = EnergyBalanceTracker(
            goal_calories=self.user_settings_service.get_calorie_goal(user_id),
            today=lambda: self.today(user_id),
        )
        tracker.load(
            consumed=self.repository.sum_consumed_calories(user_id, day),
            burned=self.repository.sum_burned_calories(user_id, day),
            day=day,
        )
        return tracker

    def get_today(self, user_id: UUID) -> DailyEnergyBalance:
        """Return the live balance for the user's current date."""
        return self.tracker(user_id).snapshot()

    def set_goal(self, user_id: UUID, goal_calories: int) -> DailyEnergyBalance:
        """Store a new calorie goal and apply it to the live balance."""
        goal_calories = validate_goal(goal_calories)
        self.user_settings_service.set_calorie_goal(user_id, goal_calories)
        return self.tracker(user_id).set_goal(goal_calories)


def validate_amount(amount: object, field_name: str = "amount") -> float:
    """Return the amount as a float, rejecting negative or non-finite values."""
    if isinstance(amount, bool) or not isinstance(amount, int | float):
        raise InvalidAmountError(amount, field_name)
    if math.isnan(amount) or math.isinf(amount) or amount < 0:
        raise InvalidAmountError(amount, field_name)
    return float(amount)


def validate_goal(goal_calories: object) -> int:
    """Return the goal as an int, rejecting negative or fractional values."""
    goal = validate_amount(goal_calories, "goal_calories")
    if not goal.is_integer():
        raise InvalidAmountError(goal_calories, "goal_calories")
    return int(goal)
