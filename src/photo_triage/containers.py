"""Dependency container wiring for the application."""

import random
from dataclasses import dataclass

from supabase import create_client

from photo_triage.adapters.supabase_cooldown_repository import (
    SupabaseCooldownRepository,
)
from photo_triage.adapters.supabase_preferences_repository import (
    SupabasePreferencesRepository,
)
from photo_triage.adapters.supabase_review_stats_repository import (
    SupabaseReviewStatsRepository,
)
from photo_triage.config import Settings, parse_recommend_mode
from photo_triage.domain.photos import RecommendMode
from photo_triage.domain.preferences import Preferences
from photo_triage.services.cooldowns import CooldownStore
from photo_triage.services.preferences import PreferencesService, clamp_batch_size
from photo_triage.services.random_walk import RandomWalkSelector
from photo_triage.services.recommendations import RecommendationEngine
from photo_triage.services.review_stats import ReviewStatsService
from photo_triage.services.similarity import SimilaritySelector


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    cooldown_store: CooldownStore
    recommendation_engine: RecommendationEngine
    preferences_service: PreferencesService
    review_stats_service: ReviewStatsService


def build_engine(
    cooldown_store: CooldownStore,
    default_mode: RecommendMode = RecommendMode.RANDOM_WALK,
    rng: random.Random | None = None,
) -> RecommendationEngine:
    """Create an engine with both selectors sharing one random source."""
    resolved_rng = rng or random.Random()
    return RecommendationEngine(
        cooldown_store=cooldown_store,
        selectors={
            RecommendMode.RANDOM_WALK: RandomWalkSelector(cooldown_store, resolved_rng),
            RecommendMode.SIMILAR: SimilaritySelector(cooldown_store, resolved_rng),
        },
        default_mode=default_mode,
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    default_mode = parse_recommend_mode(resolved_settings.default_recommend_mode)
    cooldown_store = CooldownStore(
        SupabaseCooldownRepository(supabase_client),
        window_ms=resolved_settings.cooldown_window_ms,
    )
    preferences_service = PreferencesService(
        SupabasePreferencesRepository(supabase_client),
        defaults=Preferences(
            recommend_mode=default_mode,
            batch_size=clamp_batch_size(resolved_settings.default_batch_size),
        ),
    )
    review_stats_service = ReviewStatsService(
        SupabaseReviewStatsRepository(supabase_client)
    )
    return AppContainer(
        settings=resolved_settings,
        cooldown_store=cooldown_store,
        recommendation_engine=build_engine(cooldown_store, default_mode),
        preferences_service=preferences_service,
        review_stats_service=review_stats_service,
    )
