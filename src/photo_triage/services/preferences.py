"""Recommendation preferences service."""

from dataclasses import dataclass
from typing import Protocol

from photo_triage.domain.photos import RecommendMode
from photo_triage.domain.preferences import (
    MAX_BATCH_SIZE,
    MIN_BATCH_SIZE,
    Preferences,
)


class PreferencesRepository(Protocol):
    """Persistence interface for recommendation preferences."""

    def get_preferences(self) -> Preferences | None:
        """Return stored preferences, if any were saved."""

    def save_preferences(self, preferences: Preferences) -> None:
        """Persist preferences."""


def clamp_batch_size(value: int) -> int:
    """Bound a batch size to the supported range."""
    return max(MIN_BATCH_SIZE, min(MAX_BATCH_SIZE, value))


@dataclass
class PreferencesService:
    """Service for reading and updating preferences."""

    repository: PreferencesRepository
    defaults: Preferences = Preferences()

    def get(self) -> Preferences:
        """Return stored preferences or the defaults."""
        return self.repository.get_preferences() or self.defaults

    def update(
        self,
        recommend_mode: RecommendMode | None = None,
        batch_size: int | None = None,
    ) -> Preferences:
        """Persist the given fields and return the merged preferences."""
        current = self.get()
        updated = Preferences(
            recommend_mode=recommend_mode or current.recommend_mode,
            batch_size=clamp_batch_size(
                batch_size if batch_size is not None else current.batch_size
            ),
        )
        self.repository.save_preferences(updated)
        return updated

    def resolve(
        self, recommend_mode: RecommendMode | None, batch_size: int | None
    ) -> tuple[RecommendMode, int]:
        """Fill request gaps from stored preferences and clamp the batch size."""
        current = self.get()
        size = batch_size if batch_size is not None else current.batch_size
        return recommend_mode or current.recommend_mode, clamp_batch_size(size)
