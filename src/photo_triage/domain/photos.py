"""Domain models for catalog photos."""

from dataclasses import dataclass
from enum import StrEnum


class RecommendMode(StrEnum):
    """How the next batch is chosen."""

    RANDOM_WALK = "RANDOM_WALK"
    SIMILAR = "SIMILAR"


@dataclass(frozen=True)
class PhotoRecord:
    """Read-only photo metadata supplied by the catalog."""

    id: str
    location: str
    date_modified: int
    size: int
    width: int
    height: int
    album_name: str | None = None

    @property
    def aspect_ratio(self) -> float:
        """Return width / height, or 1.0 when the height is unknown."""
        if self.height > 0:
            return self.width / self.height
        return 1.0
