"""Domain models for photo cooldowns."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CooldownRecord:
    """When a photo was last returned in a batch, in epoch milliseconds."""

    photo_id: str
    picked_at: int
