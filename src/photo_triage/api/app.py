"""FastAPI application factory."""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from photo_triage.api.admin import router as admin_router
from photo_triage.api.models import (
    BatchRequest,
    BatchResponse,
    PhotoPayload,
    PreferencesPayload,
    ReviewPayload,
)
from photo_triage.app_logging import configure_logging
from photo_triage.containers import AppContainer
from photo_triage.domain.preferences import (
    BATCH_SIZE_OPTIONS,
    Preferences,
    ReviewTotals,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        engine = app.state.container.recommendation_engine
        await asyncio.to_thread(
            app.state.container.cooldown_store.cleanup_expired, engine.clock()
        )
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(admin_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/recommendations/batch")
    async def next_batch(payload: BatchRequest, request: Request) -> BatchResponse:
        """Return the next batch of photos to review."""
        state_container: AppContainer = request.app.state.container
        mode, batch_size = state_container.preferences_service.resolve(
            payload.mode, payload.batch_size
        )
        catalog = [photo.to_record() for photo in payload.catalog]
        anchor = payload.anchor.to_record() if payload.anchor else None
        # The engine holds a lock for the whole call; keep it off the event loop.
        batch = await asyncio.to_thread(
            state_container.recommendation_engine.get_batch,
            catalog,
            batch_size,
            mode,
            anchor,
        )
        return BatchResponse(
            mode=mode,
            batch=[PhotoPayload.from_record(photo) for photo in batch],
        )

    @app.get("/preferences")
    async def get_preferences(request: Request) -> dict[str, object]:
        """Return the stored recommendation preferences."""
        state_container: AppContainer = request.app.state.container
        return _serialize_preferences(state_container.preferences_service.get())

    @app.put("/preferences")
    async def update_preferences(
        payload: PreferencesPayload, request: Request
    ) -> dict[str, object]:
        """Update recommendation mode and/or batch size."""
        state_container: AppContainer = request.app.state.container
        updated = state_container.preferences_service.update(
            recommend_mode=payload.recommend_mode,
            batch_size=payload.batch_size,
        )
        logger.info(
            "Preferences updated: mode=%s batch_size=%d",
            updated.recommend_mode.value,
            updated.batch_size,
        )
        return _serialize_preferences(updated)

    @app.get("/stats")
    async def get_stats(request: Request) -> dict[str, int]:
        """Return lifetime review counters."""
        state_container: AppContainer = request.app.state.container
        return _serialize_totals(state_container.review_stats_service.get_totals())

    @app.post("/stats/reviews")
    async def record_review(payload: ReviewPayload, request: Request) -> dict[str, int]:
        """Add a finished batch to the review counters."""
        state_container: AppContainer = request.app.state.container
        totals = state_container.review_stats_service.record_review(
            reviewed=payload.reviewed, deleted=payload.deleted
        )
        return _serialize_totals(totals)

    return app


def _serialize_preferences(preferences: Preferences) -> dict[str, object]:
    return {
        "recommend_mode": preferences.recommend_mode.value,
        "batch_size": preferences.batch_size,
        "batch_size_options": list(BATCH_SIZE_OPTIONS),
    }


def _serialize_totals(totals: ReviewTotals) -> dict[str, int]:
    return {
        "total_reviewed": totals.total_reviewed,
        "total_deleted": totals.total_deleted,
    }
