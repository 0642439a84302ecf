"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from photo_triage.domain.photos import RecommendMode
from photo_triage.domain.preferences import DEFAULT_BATCH_SIZE

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    admin_token: str
    cooldown_window_hours: float = 24.0
    default_recommend_mode: str = RecommendMode.RANDOM_WALK.value
    default_batch_size: int = DEFAULT_BATCH_SIZE
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def cooldown_window_ms(self) -> int:
        """Return the cooldown window in milliseconds."""
        return int(self.cooldown_window_hours * 60 * 60 * 1000)


def parse_recommend_mode(raw: object) -> RecommendMode:
    """Parse a stored or configured mode, defaulting to random walk."""
    if not isinstance(raw, str):
        return RecommendMode.RANDOM_WALK
    cleaned = raw.strip().upper().replace("-", "_")
    if cleaned in {"SIMILAR", "SIMILARITY"}:
        return RecommendMode.SIMILAR
    return RecommendMode.RANDOM_WALK
