"""
Kakinada CCC — FastAPI Application

Serves the command center UI at /ui and a JSON API under /api/v1.
All state is in memory and owned by one CommandCenter per app.
"""
import os
import time
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from kakinada_ccc.config import Settings, get_settings
from kakinada_ccc.controller import CommandCenter
from kakinada_ccc.detection import get_backend
from kakinada_ccc.log import configure_logging, get_logger
from kakinada_ccc.metrics import build_info, router as metrics_router, track_requests
from kakinada_ccc.routers import catalog, health, state, ui
from kakinada_ccc.shell import APP_SHELL, ensure_mount_target

logger = get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info(
        f"ccc.starting env={settings.APP_ENV} backend={app.state.center.backend.name}"
    )
    yield
    logger.info("ccc.shutdown")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    # No mount container, no app.
    ensure_mount_target(APP_SHELL, settings.MOUNT_ID)

    app = FastAPI(
        title="Kakinada CCC — Smart Policing Command Center",
        description="Prototype command center UI backed by mock data",
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.center = CommandCenter(backend=get_backend(settings.DETECTION_BACKEND))
    app.state.started_at = time.time()

    build_info.info({
        "version": settings.APP_VERSION,
        "service": settings.APP_NAME,
        "detection_backend": settings.DETECTION_BACKEND,
    })

    app.middleware("http")(track_requests)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.MEDIA_DIR:
        if os.path.isdir(settings.MEDIA_DIR):
            app.mount("/mnt/data", StaticFiles(directory=settings.MEDIA_DIR), name="media")
        else:
            logger.warning(f"media.unavailable dir={settings.MEDIA_DIR} — demo feeds will not play")

    app.include_router(ui.router, tags=["UI"])
    app.include_router(health.router, tags=["Health"])
    app.include_router(metrics_router, tags=["Metrics"])
    app.include_router(catalog.router, prefix="/api/v1/catalog", tags=["Catalog"])
    app.include_router(state.router, prefix="/api/v1/state", tags=["State"])

    return app
