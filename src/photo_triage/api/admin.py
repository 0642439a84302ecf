"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

if TYPE_CHECKING:
    from photo_triage.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/cooldowns", dependencies=[Depends(require_admin)])
async def list_cooldowns(request: Request) -> dict[str, object]:
    """Return photos currently in cooldown, oldest pick first."""
    container: AppContainer = request.app.state.container
    engine = container.recommendation_engine
    now = engine.clock()
    store = container.cooldown_store
    records = store.active_records(now)
    return {
        "window_ms": store.window_ms,
        "cooldowns": [
            {
                "photo_id": record.photo_id,
                "picked_at": record.picked_at,
                "expires_in_ms": store.window_ms - (now - record.picked_at),
            }
            for record in records
        ],
    }


@router.get("/cooldowns/{photo_id}", dependencies=[Depends(require_admin)])
async def cooldown_detail(photo_id: str, request: Request) -> dict[str, object]:
    """Return the last pick time for a single photo."""
    container: AppContainer = request.app.state.container
    picked_at = container.cooldown_store.picked_at(photo_id)
    if picked_at is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    now = container.recommendation_engine.clock()
    return {
        "photo_id": photo_id,
        "picked_at": picked_at,
        "active": now - picked_at < container.cooldown_store.window_ms,
    }


@router.post("/cooldowns/cleanup", dependencies=[Depends(require_admin)])
async def cleanup_cooldowns(request: Request) -> dict[str, str]:
    """Remove expired cooldown records now."""
    container: AppContainer = request.app.state.container
    now = container.recommendation_engine.clock()
    container.cooldown_store.cleanup_expired(now)
    return {"status": "ok"}
