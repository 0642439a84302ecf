"""Shared test fixtures."""

import random
from dataclasses import dataclass, field

import pytest

from photo_triage.config import Settings
from photo_triage.containers import AppContainer, build_engine
from photo_triage.domain.cooldowns import CooldownRecord
from photo_triage.domain.photos import PhotoRecord
from photo_triage.domain.preferences import Preferences, ReviewTotals
from photo_triage.services.cooldowns import CooldownRepository, CooldownStore
from photo_triage.services.preferences import PreferencesRepository, PreferencesService
from photo_triage.services.review_stats import (
    ReviewStatsRepository,
    ReviewStatsService,
)

HOUR_MS = 60 * 60 * 1000
START_MS = 1_700_000_000_000


@dataclass
class InMemoryCooldownRepository(CooldownRepository):
    """In-memory cooldown repository for tests."""

    picks: dict[str, int] = field(default_factory=dict)
    upserts: list[tuple[list[str], int]] = field(default_factory=list)
    fail: bool = False

    def _check(self) -> None:
        if self.fail:
            raise ConnectionError("storage unavailable")

    def list_picked_since(self, cutoff: int) -> list[CooldownRecord]:
        self._check()
        return [
            CooldownRecord(photo_id=photo_id, picked_at=picked_at)
            for photo_id, picked_at in self.picks.items()
            if picked_at > cutoff
        ]

    def get_picked_at(self, photo_id: str) -> int | None:
        self._check()
        return self.picks.get(photo_id)

    def upsert_picks(self, photo_ids: list[str], picked_at: int) -> None:
        self._check()
        self.upserts.append((list(photo_ids), picked_at))
        for photo_id in photo_ids:
            self.picks[photo_id] = picked_at

    def delete_picked_before(self, cutoff: int) -> None:
        self._check()
        self.picks = {
            photo_id: picked_at
            for photo_id, picked_at in self.picks.items()
            if picked_at > cutoff
        }


@dataclass
class InMemoryPreferencesRepository(PreferencesRepository):
    """In-memory preferences repository for tests."""

    preferences: Preferences | None = None

    def get_preferences(self) -> Preferences | None:
        return self.preferences

    def save_preferences(self, preferences: Preferences) -> None:
        self.preferences = preferences


@dataclass
class InMemoryReviewStatsRepository(ReviewStatsRepository):
    """In-memory review stats repository for tests."""

    totals: ReviewTotals | None = None

    def get_totals(self) -> ReviewTotals | None:
        return self.totals

    def save_totals(self, totals: ReviewTotals) -> None:
        self.totals = totals


@dataclass
class FakeClock:
    """Manually advanced clock in epoch milliseconds."""

    now: int = START_MS

    def __call__(self) -> int:
        return self.now

    def advance(self, millis: int) -> None:
        self.now += millis


def make_photo(  # noqa: PLR0913
    photo_id: str,
    date_modified: int = START_MS,
    size: int = 2_000_000,
    width: int = 4000,
    height: int = 3000,
    album_name: str | None = "Camera",
) -> PhotoRecord:
    return PhotoRecord(
        id=photo_id,
        location=f"content://media/external/images/media/{photo_id}",
        date_modified=date_modified,
        size=size,
        width=width,
        height=height,
        album_name=album_name,
    )


def make_catalog(count: int, spacing_ms: int = HOUR_MS * 48) -> list[PhotoRecord]:
    """Photos spread far apart in time so no two look alike."""
    return [
        make_photo(f"p{index}", date_modified=START_MS + index * spacing_ms)
        for index in range(count)
    ]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        admin_token="admin-token",
    )


@pytest.fixture
def cooldown_repository() -> InMemoryCooldownRepository:
    return InMemoryCooldownRepository()


@pytest.fixture
def cooldown_store(cooldown_repository: InMemoryCooldownRepository) -> CooldownStore:
    return CooldownStore(cooldown_repository, window_ms=24 * HOUR_MS)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def container(
    settings: Settings, cooldown_store: CooldownStore, clock: FakeClock
) -> AppContainer:
    engine = build_engine(cooldown_store, rng=random.Random(7))
    engine.clock = clock
    return AppContainer(
        settings=settings,
        cooldown_store=cooldown_store,
        recommendation_engine=engine,
        preferences_service=PreferencesService(InMemoryPreferencesRepository()),
        review_stats_service=ReviewStatsService(InMemoryReviewStatsRepository()),
    )
