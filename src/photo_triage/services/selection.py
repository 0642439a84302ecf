"""Shared pieces for batch selectors."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from photo_triage.domain.cooldowns import CooldownRecord
from photo_triage.domain.photos import PhotoRecord


class BatchSelector(Protocol):
    """Builds one batch of photos from a catalog."""

    def select(
        self,
        catalog: Sequence[PhotoRecord],
        batch_size: int,
        now: int,
        anchor: PhotoRecord | None = None,
    ) -> list[PhotoRecord]:
        """Return up to ``batch_size`` unique photos from the catalog."""


@dataclass(frozen=True)
class CatalogPartition:
    """Catalog split by cooldown membership.

    ``cooled`` is ordered soonest-to-expire first, which is the backfill order.
    """

    available: list[PhotoRecord]
    cooled: list[PhotoRecord]

    @property
    def cooled_ids(self) -> set[str]:
        return {photo.id for photo in self.cooled}


def partition_catalog(
    catalog: Sequence[PhotoRecord], active: Sequence[CooldownRecord]
) -> CatalogPartition:
    """Split a catalog into available and cooled photos."""
    picked_at = {record.photo_id: record.picked_at for record in active}
    available: list[PhotoRecord] = []
    cooled: list[PhotoRecord] = []
    for photo in catalog:
        if photo.id in picked_at:
            cooled.append(photo)
        else:
            available.append(photo)
    cooled.sort(key=lambda photo: picked_at[photo.id])
    return CatalogPartition(available=available, cooled=cooled)


def backfill(
    result: list[PhotoRecord], cooled: Sequence[PhotoRecord], batch_size: int
) -> None:
    """Top up ``result`` from cooled photos, earliest pick first."""
    seen = {photo.id for photo in result}
    for photo in cooled:
        if len(result) >= batch_size:
            return
        if photo.id in seen:
            continue
        result.append(photo)
        seen.add(photo.id)
