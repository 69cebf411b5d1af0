"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...config import settings

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/config", status_code=status.HTTP_200_OK)
def health_config() -> dict:
    """Report the solver defaults this instance was started with."""
    return {
        "default_algorithm": settings.default_algorithm,
        "annealing_steps": settings.annealing_steps,
        "default_direction": settings.default_direction,
        "closed_tour": settings.closed_tour,
        "max_points_per_request": settings.max_points_per_request,
    }
