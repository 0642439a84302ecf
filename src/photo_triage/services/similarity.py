"""Similarity-driven batch selection.

An anchor photo is chosen and its neighbours in capture-time order are ranked
with ``similarity_score``. Only ``window`` photos on either side of the anchor
are scored, which caps the work per batch independent of library size at the
cost of missing look-alikes that sort far away in time.
"""

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass, field

from photo_triage.domain.photos import PhotoRecord
from photo_triage.services.cooldowns import CooldownStore
from photo_triage.services.scoring import similarity_score
from photo_triage.services.selection import (
    BatchSelector,
    CatalogPartition,
    backfill,
    partition_catalog,
)

logger = logging.getLogger(__name__)

SIMILARITY_THRESHOLD = 30.0
CANDIDATE_WINDOW = 500
RECENT_ANCHOR_POOL = 100


@dataclass
class SimilaritySelector(BatchSelector):
    """Groups an anchor photo with its most similar neighbours."""

    cooldown_store: CooldownStore
    rng: random.Random = field(default_factory=random.Random)
    threshold: float = SIMILARITY_THRESHOLD
    window: int = CANDIDATE_WINDOW
    recent_pool: int = RECENT_ANCHOR_POOL

    def select(
        self,
        catalog: Sequence[PhotoRecord],
        batch_size: int,
        now: int,
        anchor: PhotoRecord | None = None,
    ) -> list[PhotoRecord]:
        """Return the anchor followed by its best matches."""
        partition = partition_catalog(
            catalog, self.cooldown_store.active_records(now)
        )
        if not partition.available:
            return partition.cooled[:batch_size]

        reference, include_reference = self._resolve_anchor(partition, anchor)
        by_time = sorted(partition.available, key=lambda photo: photo.date_modified)
        candidates = self._candidates(by_time, reference)
        scored = sorted(
            ((photo, similarity_score(reference, photo)) for photo in candidates),
            key=lambda item: item[1],
            reverse=True,
        )

        result = [reference] if include_reference else []
        similar = [photo for photo, score in scored if score >= self.threshold]
        result.extend(similar[: max(batch_size - len(result), 0)])
        if len(result) < batch_size:
            chosen = {photo.id for photo in result}
            remaining = [photo for photo, _ in scored if photo.id not in chosen]
            result.extend(remaining[: batch_size - len(result)])
        if len(result) < batch_size:
            backfill(result, partition.cooled, batch_size)

        logger.debug(
            "Similar batch around %s: %d candidates, %d above threshold",
            reference.id,
            len(candidates),
            len(similar),
        )
        return result[:batch_size]

    def _resolve_anchor(
        self, partition: CatalogPartition, anchor: PhotoRecord | None
    ) -> tuple[PhotoRecord, bool]:
        """Return the anchor to score against and whether it joins the batch.

        An anchor that is not part of the catalog still steers scoring but is
        never emitted, so every batch entry comes from the catalog.
        """
        if anchor is not None and anchor.id not in partition.cooled_ids:
            for photo in partition.available:
                if photo.id == anchor.id:
                    return photo, True
            return anchor, False

        recent = sorted(
            partition.available, key=lambda photo: photo.date_modified, reverse=True
        )[: self.recent_pool]
        pool = recent or partition.available
        return self.rng.choice(pool), True

    def _candidates(
        self, by_time: list[PhotoRecord], reference: PhotoRecord
    ) -> list[PhotoRecord]:
        index = next(
            (i for i, photo in enumerate(by_time) if photo.id == reference.id), None
        )
        if index is None:
            return list(by_time)
        start = max(0, index - self.window)
        end = min(len(by_time), index + self.window + 1)
        return by_time[start:index] + by_time[index + 1 : end]
