"""Lifetime review counters."""

from dataclasses import dataclass
from typing import Protocol

from photo_triage.domain.preferences import ReviewTotals


class ReviewStatsRepository(Protocol):
    """Persistence interface for review counters."""

    def get_totals(self) -> ReviewTotals | None:
        """Return stored totals, if any."""

    def save_totals(self, totals: ReviewTotals) -> None:
        """Persist totals."""


@dataclass
class ReviewStatsService:
    """Service for counting reviewed and deleted photos."""

    repository: ReviewStatsRepository

    def get_totals(self) -> ReviewTotals:
        """Return current totals, zero when nothing was recorded."""
        return self.repository.get_totals() or ReviewTotals()

    def record_review(self, reviewed: int, deleted: int = 0) -> ReviewTotals:
        """Add a finished batch to the totals."""
        if reviewed < 0 or deleted < 0:
            raise ValueError("Review counts must be non-negative")
        current = self.get_totals()
        updated = ReviewTotals(
            total_reviewed=current.total_reviewed + reviewed,
            total_deleted=current.total_deleted + deleted,
        )
        self.repository.save_totals(updated)
        return updated
