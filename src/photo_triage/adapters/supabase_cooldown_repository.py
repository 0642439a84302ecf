"""Supabase-backed cooldown repository."""

from dataclasses import dataclass

from supabase import Client

from photo_triage.domain.cooldowns import CooldownRecord
from photo_triage.services.cooldowns import CooldownRepository


@dataclass
class SupabaseCooldownRepository(CooldownRepository):
    """Supabase implementation for cooldown records."""

    client: Client
    table_name: str = "photo_cooldowns"

    def list_picked_since(self, cutoff: int) -> list[CooldownRecord]:
        """Return records picked after the cutoff, oldest first."""
        response = (
            self.client.table(self.table_name)
            .select("photo_id, picked_at")
            .gt("picked_at", cutoff)
            .order("picked_at", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def get_picked_at(self, photo_id: str) -> int | None:
        """Return the stored pick time for a photo."""
        response = (
            self.client.table(self.table_name)
            .select("picked_at")
            .eq("photo_id", photo_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return int(response.data[0]["picked_at"])

    def upsert_picks(self, photo_ids: list[str], picked_at: int) -> None:
        """Write all picks in one upsert request."""
        self.client.table(self.table_name).upsert(
            [{"photo_id": photo_id, "picked_at": picked_at} for photo_id in photo_ids],
            on_conflict="photo_id",
        ).execute()

    def delete_picked_before(self, cutoff: int) -> None:
        """Delete records picked at or before the cutoff."""
        self.client.table(self.table_name).delete().lte("picked_at", cutoff).execute()


def _parse_row(row: dict[str, object]) -> CooldownRecord:
    return CooldownRecord(
        photo_id=str(row["photo_id"]),
        picked_at=int(row["picked_at"]),
    )
