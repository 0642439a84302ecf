"""Cooldown tracking for recently shown photos."""

import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from photo_triage.domain.cooldowns import CooldownRecord

logger = logging.getLogger(__name__)

COOLDOWN_WINDOW_MS = 24 * 60 * 60 * 1000


def now_millis() -> int:
    """Return the current wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


class CooldownRepository(Protocol):
    """Persistence interface for cooldown records."""

    def list_picked_since(self, cutoff: int) -> list[CooldownRecord]:
        """Return records picked strictly after the cutoff."""

    def get_picked_at(self, photo_id: str) -> int | None:
        """Return the last pick time for a photo, if recorded."""

    def upsert_picks(self, photo_ids: list[str], picked_at: int) -> None:
        """Insert or overwrite records for all ids in a single write."""

    def delete_picked_before(self, cutoff: int) -> None:
        """Delete records picked at or before the cutoff."""


@dataclass
class CooldownStore:
    """Cooldown bookkeeping that never blocks recommendations.

    Storage errors are logged and treated as "no active cooldowns", so a broken
    backend only weakens the no-repeat guarantee.
    """

    repository: CooldownRepository
    window_ms: int = COOLDOWN_WINDOW_MS

    def active_ids(self, now: int) -> set[str]:
        """Return ids whose cooldown has not expired at ``now``."""
        return {record.photo_id for record in self.active_records(now)}

    def active_records(self, now: int) -> list[CooldownRecord]:
        """Return unexpired cooldown records, oldest pick first."""
        cutoff = now - self.window_ms
        try:
            records = self.repository.list_picked_since(cutoff)
        except Exception:
            logger.exception("Failed to read active cooldowns")
            return []
        active = [
            record for record in records if now - record.picked_at < self.window_ms
        ]
        return sorted(active, key=lambda record: record.picked_at)

    def picked_at(self, photo_id: str) -> int | None:
        """Return when a photo was last picked, if known."""
        try:
            return self.repository.get_picked_at(photo_id)
        except Exception:
            logger.exception("Failed to read cooldown for photo %s", photo_id)
            return None

    def record_picks(self, photo_ids: Iterable[str], now: int) -> None:
        """Mark all ids as picked at ``now`` in one batch write."""
        ids = list(dict.fromkeys(photo_ids))
        if not ids:
            return
        try:
            self.repository.upsert_picks(ids, now)
        except Exception:
            logger.exception("Failed to record %d cooldown picks", len(ids))

    def cleanup_expired(self, now: int) -> None:
        """Remove records whose cooldown has elapsed."""
        try:
            self.repository.delete_picked_before(now - self.window_ms)
        except Exception:
            logger.exception("Failed to clean up expired cooldowns")
