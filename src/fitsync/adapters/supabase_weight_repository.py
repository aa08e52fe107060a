"""Supabase repository for body weights."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from fitsync.domain.weight import WeightEntry
from fitsync.services.weight import WeightRepository


@dataclass
class SupabaseWeightRepository(WeightRepository):
    """Supabase implementation for weights and weigh-ins."""

    client: Client

    def get_weights(self, user_id: UUID) -> tuple[float | None, float | None]:
        """Return the (current, goal) weights on the user row."""
        response = (
            self.client.table("users")
            .select("current_weight, goal_weight")
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None, None
        row = response.data[0]
        return _optional_float(row.get("current_weight")), _optional_float(
            row.get("goal_weight")
        )

    def update_weights(
        self, user_id: UUID, current_weight: float, goal_weight: float
    ) -> None:
        """Store current and goal weights on the user row."""
        self.client.table("users").update(
            {"current_weight": current_weight, "goal_weight": goal_weight}
        ).eq("id", str(user_id)).execute()

    def add_weight_entry(self, user_id: UUID, day: date, weight: float) -> WeightEntry:
        """Insert a weigh-in row and return it."""
        response = (
            self.client.table("weight_entries")
            .insert(
                {"user_id": str(user_id), "date": day.isoformat(), "weight": weight}
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create weight entry in Supabase")
        return _parse_row(response.data[0])

    def get_latest_entry(self, user_id: UUID) -> WeightEntry | None:
        """Return the newest weigh-in."""
        entries = self.list_entries(user_id, limit=1)
        return entries[0] if entries else None

    def list_entries(self, user_id: UUID, limit: int) -> list[WeightEntry]:
        """Return recent weigh-ins, newest first."""
        response = (
            self.client.table("weight_entries")
            .select("id, user_id, date, weight")
            .eq("user_id", str(user_id))
            .order("date", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]


def _optional_float(value: object) -> float | None:
    if value is None:
        return None
    return float(value)


def _parse_row(row: dict[str, object]) -> WeightEntry:
    return WeightEntry(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        day=date.fromisoformat(str(row["date"])),
        weight=float(row.get("weight") or 0.0),
    )
