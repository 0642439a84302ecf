"""Supabase repository for recommendation preferences."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from photo_triage.config import parse_recommend_mode
from photo_triage.domain.preferences import DEFAULT_BATCH_SIZE, Preferences
from photo_triage.services.preferences import PreferencesRepository

_SINGLETON_ROW_ID = 1


@dataclass
class SupabasePreferencesRepository(PreferencesRepository):
    """Supabase implementation for preferences, stored in a single row."""

    client: Client

    def get_preferences(self) -> Preferences | None:
        """Return the stored preferences row, if present."""
        response = (
            self.client.table("app_preferences")
            .select("recommend_mode, batch_size")
            .eq("id", _SINGLETON_ROW_ID)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        batch_size = row.get("batch_size")
        if batch_size is None:
            batch_size = DEFAULT_BATCH_SIZE
        return Preferences(
            recommend_mode=parse_recommend_mode(row.get("recommend_mode")),
            batch_size=int(batch_size),
        )

    def save_preferences(self, preferences: Preferences) -> None:
        """Upsert the preferences row."""
        response = (
            self.client.table("app_preferences")
            .upsert(
                {
                    "id": _SINGLETON_ROW_ID,
                    "recommend_mode": preferences.recommend_mode.value,
                    "batch_size": preferences.batch_size,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save preferences")
