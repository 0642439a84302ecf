"""Recommendation engine that hands out review batches."""

import logging
import threading
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from photo_triage.domain.photos import PhotoRecord, RecommendMode
from photo_triage.services.cooldowns import CooldownStore, now_millis
from photo_triage.services.selection import BatchSelector

logger = logging.getLogger(__name__)


@dataclass
class RecommendationEngine:
    """Chooses the next batch and records it in the cooldown store.

    One instance should own the cooldown store for the whole process. Calls are
    serialised so two concurrent requests never see the same stale cooldown set.
    """

    cooldown_store: CooldownStore
    selectors: dict[RecommendMode, BatchSelector]
    default_mode: RecommendMode = RecommendMode.RANDOM_WALK
    clock: Callable[[], int] = now_millis
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False
    )

    def get_batch(
        self,
        catalog: Sequence[PhotoRecord],
        batch_size: int,
        mode: RecommendMode | None = None,
        anchor: PhotoRecord | None = None,
    ) -> list[PhotoRecord]:
        """Return the next batch for ``mode``; ``batch_size`` must be >= 1."""
        if not catalog:
            return []
        resolved_mode = mode or self.default_mode
        selector = self.selectors[resolved_mode]
        with self._lock:
            now = self.clock()
            self.cooldown_store.cleanup_expired(now)
            batch = selector.select(catalog, batch_size, now, anchor)
            self.cooldown_store.record_picks([photo.id for photo in batch], now)
        logger.info(
            "Served %s batch of %d from %d photos",
            resolved_mode.value,
            len(batch),
            len(catalog),
        )
        return batch
