"""Random walk batch selection."""

import random
from collections.abc import Sequence
from dataclasses import dataclass, field

from photo_triage.domain.photos import PhotoRecord
from photo_triage.services.cooldowns import CooldownStore
from photo_triage.services.selection import (
    BatchSelector,
    backfill,
    partition_catalog,
)


@dataclass
class RandomWalkSelector(BatchSelector):
    """Unweighted random sampling that skips photos still in cooldown."""

    cooldown_store: CooldownStore
    rng: random.Random = field(default_factory=random.Random)

    def select(
        self,
        catalog: Sequence[PhotoRecord],
        batch_size: int,
        now: int,
        anchor: PhotoRecord | None = None,
    ) -> list[PhotoRecord]:
        """Return a shuffled sample, topped up from the oldest cooled picks."""
        partition = partition_catalog(
            catalog, self.cooldown_store.active_records(now)
        )
        shuffled = list(partition.available)
        self.rng.shuffle(shuffled)
        result = shuffled[:batch_size]
        if len(result) < batch_size:
            backfill(result, partition.cooled, batch_size)
        return result
