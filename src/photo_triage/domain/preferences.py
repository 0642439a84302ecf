"""Domain models for stored preferences and review counters."""

from dataclasses import dataclass

from photo_triage.domain.photos import RecommendMode

MIN_BATCH_SIZE = 5
MAX_BATCH_SIZE = 50
DEFAULT_BATCH_SIZE = 15
BATCH_SIZE_OPTIONS = (5, 10, 15, 20, 30, 50)


@dataclass(frozen=True)
class Preferences:
    """Recommendation preferences chosen by the user."""

    recommend_mode: RecommendMode = RecommendMode.RANDOM_WALK
    batch_size: int = DEFAULT_BATCH_SIZE


@dataclass(frozen=True)
class ReviewTotals:
    """Lifetime review counters."""

    total_reviewed: int = 0
    total_deleted: int = 0
