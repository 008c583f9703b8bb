"""
Kakinada CCC — Health Check Router
"""
import time
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, Request

from kakinada_ccc.config import Settings
from kakinada_ccc.routers.deps import get_app_settings

router = APIRouter()


@router.get("/health")
async def health_check(request: Request, settings: Settings = Depends(get_app_settings)):
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "env": settings.APP_ENV,
        "uptime_s": round(time.time() - request.app.state.started_at, 1),
        "detection_backend": request.app.state.center.backend.name,
        "mode": "demo",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
