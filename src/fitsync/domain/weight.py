"""Domain models for weight tracking."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID


@dataclass(frozen=True)
class WeightEntry:
    """Recorded body weight for a day."""

    id: UUID
    user_id: UUID
    day: date
    weight: float


@dataclass(frozen=True)
class WeightProgress:
    """Current and target weight with the remaining difference."""

    current_weight: float
    target_weight: float
    weight_to_lose: float
