"""FastAPI application for the route finder service.

Serve with ``uvicorn routefinder.main:app``. Settings come from
``ROUTEFINDER_*`` environment variables or a ``.env`` file.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.routes import health, routes
from .config import settings
from .exceptions import RouteFinderError
from .models.domain import AlgorithmKind

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Apply ``level`` (default ``settings.log_level``) to the ``routefinder`` loggers."""
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger("routefinder").setLevel(getattr(logging, level_name))


async def _route_finder_error_handler(request: Request, exc: RouteFinderError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(
        title=settings.app_name,
        description="Heuristic shortest routes through 2-D points (simulated annealing or nearest neighbour).",
    )
    app.add_exception_handler(RouteFinderError, _route_finder_error_handler)
    if settings.frontend_allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.frontend_allowed_origins),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.get("/")
    def root():
        return {
            "service": settings.app_name,
            "status": "running",
            "algorithms": [kind.value for kind in AlgorithmKind],
            "default_algorithm": settings.default_algorithm,
            "optimize": f"{settings.api_prefix}/routes/optimize",
            "health": f"{settings.api_prefix}/health",
            "docs": "/docs",
        }

    app.include_router(health.router, prefix=settings.api_prefix)
    app.include_router(routes.router, prefix=settings.api_prefix)
    return app


app = create_app()
