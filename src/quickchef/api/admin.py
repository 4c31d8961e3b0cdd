"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

if TYPE_CHECKING:
    from quickchef.containers import AppContainer

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


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.get("/cache", dependencies=[Depends(require_admin)])
async def cache_stats(request: Request) -> dict[str, int]:
    """Return plan cache and in-flight generation counts."""
    container: AppContainer = request.app.state.container
    coordinator = container.plan_coordinator
    return {
        "entries": len(coordinator.cache),
        "in_flight": coordinator.in_flight_count,
    }


@router.delete("/cache", dependencies=[Depends(require_admin)])
async def clear_cache(request: Request) -> dict[str, str]:
    """Drop every cached plan."""
    container: AppContainer = request.app.state.container
    container.plan_coordinator.clear_cache()
    return {"status": "cleared"}
