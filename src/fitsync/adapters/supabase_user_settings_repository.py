"""Supabase repository for user settings."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from fitsync.services.user_settings import UserSettingsRepository


@dataclass
class SupabaseUserSettingsRepository(UserSettingsRepository):
    """Supabase implementation for settings kept on the user row."""

    client: Client

    def get_timezone(self, user_id: UUID) -> str | None:
        """Return the stored timezone for a user."""
        row = self._select(user_id, "timezone")
        if row is None:
            return None
        return row.get("timezone")

    def set_timezone(self, user_id: UUID, timezone_name: str) -> None:
        """Update the user's timezone."""
        self.client.table("users").update({"timezone": timezone_name}).eq(
            "id", str(user_id)
        ).execute()

    def get_calorie_goal(self, user_id: UUID) -> int | None:
        """Return the stored daily calorie goal."""
        row = self._select(user_id, "goal_calories")
        if row is None or row.get("goal_calories") is None:
            return None
        return int(row["goal_calories"])

    def set_calorie_goal(self, user_id: UUID, goal_calories: int) -> None:
        """Update the user's daily calorie goal."""
        self.client.table("users").update({"goal_calories": goal_calories}).eq(
            "id", str(user_id)
        ).execute()

    def _select(self, user_id: UUID, columns: str) -> dict[str, object] | None:
        response = (
            self.client.table("users")
            .select(columns)
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0]
