"""Metadata-only similarity scoring between two photos.

The score is the sum of four bucketed factors and lands in ``[0, 100]``:

* capture time proximity (up to 40 points), since bursts are shot seconds apart
* matching dimensions or aspect ratio (up to 25 points)
* file size proximity relative to the anchor (up to 20 points)
* a shared album name (15 points)

Only cheap structural metadata is used; no pixels are read.
"""

from photo_triage.domain.photos import PhotoRecord

MAX_SCORE = 100.0

# (upper bound in seconds, points), checked in order.
TIME_BUCKETS = (
    (5, 40.0),
    (30, 35.0),
    (60, 25.0),
    (300, 15.0),
    (3600, 8.0),
    (86400, 3.0),
)
EXACT_DIMENSIONS_POINTS = 25.0
# (upper bound on aspect ratio difference, points)
ASPECT_BUCKETS = (
    (0.05, 15.0),
    (0.1, 8.0),
)
# (upper bound on relative size difference, points)
SIZE_BUCKETS = (
    (0.05, 20.0),
    (0.1, 15.0),
    (0.2, 10.0),
    (0.3, 5.0),
)
SAME_ALBUM_POINTS = 15.0


def similarity_score(anchor: PhotoRecord, candidate: PhotoRecord) -> float:
    """Return how similar ``candidate`` looks to ``anchor`` on a 0-100 scale."""
    return (
        time_score(anchor, candidate)
        + dimension_score(anchor, candidate)
        + size_score(anchor, candidate)
        + album_score(anchor, candidate)
    )


def time_score(anchor: PhotoRecord, candidate: PhotoRecord) -> float:
    seconds = abs(anchor.date_modified - candidate.date_modified) // 1000
    return _bucket(seconds, TIME_BUCKETS)


def dimension_score(anchor: PhotoRecord, candidate: PhotoRecord) -> float:
    if anchor.width == candidate.width and anchor.height == candidate.height:
        return EXACT_DIMENSIONS_POINTS
    return _bucket(abs(anchor.aspect_ratio - candidate.aspect_ratio), ASPECT_BUCKETS)


def size_score(anchor: PhotoRecord, candidate: PhotoRecord) -> float:
    relative = abs(anchor.size - candidate.size) / max(anchor.size, 1)
    return _bucket(relative, SIZE_BUCKETS)


def album_score(anchor: PhotoRecord, candidate: PhotoRecord) -> float:
    if anchor.album_name is not None and anchor.album_name == candidate.album_name:
        return SAME_ALBUM_POINTS
    return 0.0


def _bucket(value: float, buckets: tuple[tuple[float, float], ...]) -> float:
    for upper, points in buckets:
        if value < upper:
            return points
    return 0.0
