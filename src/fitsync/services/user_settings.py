"""User settings service."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

_logger = logging.getLogger(__name__)


class UserSettingsRepository(Protocol):
    """Persistence interface for user settings."""

    def get_timezone(self, user_id: UUID) -> str | None:
        """Return the user's timezone if set."""

    def set_timezone(self, user_id: UUID, timezone: str) -> None:
        """Update the user's timezone."""

    def get_calorie_goal(self, user_id: UUID) -> int | None:
        """Return the user's daily calorie goal if set."""

    def set_calorie_goal(self, user_id: UUID, goal_calories: int) -> None:
        """Update the user's daily calorie goal."""


@dataclass
class UserSettingsService:
    """Service for per-user settings with configured fallbacks."""

    repository: UserSettingsRepository
    default_timezone: str = "UTC"
    default_calorie_goal: int = 2000

    def get_timezone(self, user_id: UUID) -> str:
        """Return the user timezone, or the default if unset or unknown."""
        timezone = self.repository.get_timezone(user_id)
        if not timezone:
            return self.default_timezone
        if not is_valid_timezone(timezone):
            _logger.warning(
                "Unknown stored timezone, using default: user_id=%s timezone=%s",
                user_id,
                timezone,
            )
            return self.default_timezone
        return timezone

    def set_timezone(self, user_id: UUID, timezone: str) -> None:
        """Persist a user's timezone after checking it exists."""
        if not is_valid_timezone(timezone):
            raise ValueError(f"Unknown timezone: {timezone}")
        self.repository.set_timezone(user_id, timezone)

    def get_calorie_goal(self, user_id: UUID) -> int:
        """Return the stored calorie goal or the default if unset."""
        goal = self.repository.get_calorie_goal(user_id)
        return self.default_calorie_goal if goal is None else goal

    def set_calorie_goal(self, user_id: UUID, goal_calories: int) -> None:
        """Persist a calorie goal exactly as given."""
        self.repository.set_calorie_goal(user_id, goal_calories)


def is_valid_timezone(value: str) -> bool:
    try:
        ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError):
        return False
    return True
