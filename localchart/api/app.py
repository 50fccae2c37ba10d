"""FastAPI application factory used by ASGI servers and the CLI."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse

from ..boot.logging import configure_logging
from ..config import APISettings, get_settings
from .errors import install_error_handlers
from .routers import charts as charts_router, health as health_router

_APP_INSTANCE: FastAPI | None = None


def _configure_cors(app: FastAPI, settings: APISettings) -> None:
    if not settings.cors_origins:
        return
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )


def create_app(settings: APISettings | None = None) -> FastAPI:
    """Instantiate and configure the chart API."""

    api_settings = settings or get_settings().api
    app = FastAPI(
        title="localchart API",
        version="1.0",
        default_response_class=ORJSONResponse,
        openapi_tags=[
            {"name": "system", "description": "Service level operations."},
            {"name": "charts", "description": "Chart rendering and persistence."},
        ],
    )
    app.state.api_settings = api_settings
    app.add_middleware(GZipMiddleware, minimum_size=512)
    _configure_cors(app, api_settings)
    install_error_handlers(app)
    app.include_router(health_router.router)
    app.include_router(charts_router.router)
    return app


def get_app() -> FastAPI:
    global _APP_INSTANCE
    if _APP_INSTANCE is None:
        configure_logging()
        _APP_INSTANCE = create_app()
    return _APP_INSTANCE


def run(host: str | None = None, port: int | None = None) -> None:  # pragma: no cover - integration entry point
    """Serve the API with Uvicorn."""

    import uvicorn

    settings = get_settings().api
    uvicorn.run(
        get_app(),
        host=host or settings.host,
        port=port or settings.port,
        log_level=settings.log_level,
    )


__all__ = ["create_app", "get_app", "run"]
