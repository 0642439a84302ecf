"""Supabase repository for review counters."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from photo_triage.domain.preferences import ReviewTotals
from photo_triage.services.review_stats import ReviewStatsRepository

_SINGLETON_ROW_ID = 1


@dataclass
class SupabaseReviewStatsRepository(ReviewStatsRepository):
    """Supabase implementation for review counters."""

    client: Client

    def get_totals(self) -> ReviewTotals | None:
        """Return the stored totals, if present."""
        response = (
            self.client.table("review_stats")
            .select("total_reviewed, total_deleted")
            .eq("id", _SINGLETON_ROW_ID)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return ReviewTotals(
            total_reviewed=int(row.get("total_reviewed") or 0),
            total_deleted=int(row.get("total_deleted") or 0),
        )

    def save_totals(self, totals: ReviewTotals) -> None:
        """Upsert the totals row."""
        response = (
            self.client.table("review_stats")
            .upsert(
                {
                    "id": _SINGLETON_ROW_ID,
                    "total_reviewed": totals.total_reviewed,
                    "total_deleted": totals.total_deleted,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save review totals")
