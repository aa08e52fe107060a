"""Weight tracking service."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from fitsync.domain.weight import WeightEntry, WeightProgress
from fitsync.services.balance import BalanceService, validate_amount


class WeightRepository(Protocol):
    """Persistence interface for body weights."""

    def get_weights(self, user_id: UUID) -> tuple[float | None, float | None]:
        """Return the stored (current, goal) weights."""

    def update_weights(
        self, user_id: UUID, current_weight: float, goal_weight: float
    ) -> None:
        """Store current and goal weights on the profile."""

    def add_weight_entry(self, user_id: UUID, day: date, weight: float) -> WeightEntry:
        """Append a weight history entry."""

    def get_latest_entry(self, user_id: UUID) -> WeightEntry | None:
        """Return the most recent weight entry."""

    def list_entries(self, user_id: UUID, limit: int) -> list[WeightEntry]:
        """Return recent weight entries, newest first."""


@dataclass
class WeightService:
    """Service for current/target weight and weight history."""

    repository: WeightRepository
    balance_service: BalanceService

    def get_progress(self, user_id: UUID) -> WeightProgress | None:
        """Return weight progress, or None until both weights are known."""
        current, target = self.repository.get_weights(user_id)
        latest = self.repository.get_latest_entry(user_id)
        if latest is not None:
            current = latest.weight
        if current is None or target is None:
            return None
        return _progress(current, target)

    def update(
        self, user_id: UUID, current_weight: float, target_weight: float
    ) -> WeightProgress:
        """Store new weights and record today's weigh-in."""
        current_weight = validate_amount(current_weight, "current_weight")
        target_weight = validate_amount(target_weight, "target_weight")
        self.repository.update_weights(user_id, current_weight, target_weight)
        self.repository.add_weight_entry(
            user_id, self.balance_service.today(user_id), current_weight
        )
        return _progress(current_weight, target_weight)

    def get_history(self, user_id: UUID, limit: int = 10) -> list[WeightEntry]:
        """Return recent weigh-ins."""
        return self.repository.list_entries(user_id, limit)


def _progress(current: float, target: float) -> WeightProgress:
    return WeightProgress(
        current_weight=current,
        target_weight=target,
        weight_to_lose=max(0.0, current - target),
    )
