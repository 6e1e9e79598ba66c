# videoforge/routes/meta.py
from __future__ import annotations
import platform as pyplat

import psutil
from fastapi import APIRouter, Request

from videoforge.config import SERVICE_NAME
from videoforge.routes.debug import route_table
from videoforge.services.state import recent_generations, uptime_seconds
from videoforge.utils.logging import log
from videoforge.utils.system import check_system_health, collect_system_stats

router = APIRouter()


@router.get("/health", tags=["meta"])
def health(request: Request):
    state = request.app.state
    return {"ok": True, "build": state.build_tag, "provider": state.provider.name}


@router.get("/version", tags=["meta"])
def version(request: Request):
    state = request.app.state
    provider = state.provider
    return {
        "build_tag": state.build_tag,
        "platform": {
            "python_version": pyplat.python_version(),
            "platform": pyplat.platform(),
        },
        "provider": {
            "name": provider.name,
            "latency_seconds": getattr(provider, "latency_seconds", None),
        },
        "runtime": {
            "uptime_seconds": uptime_seconds(),
            "routes_count": len(route_table(request.app)),
        },
        "recent": recent_generations(),
    }


@router.get("/diagnostic", tags=["meta"])
def diagnostic():
    """System health check endpoint for monitoring and debugging."""
    try:
        stats = collect_system_stats()
    except (psutil.Error, OSError) as e:
        log.error(f"System health check failed: {e}")
        return {
            "status": "unhealthy",
            "message": f"Health check failed: {e}",
            "service": SERVICE_NAME,
            "stats": None,
        }

    healthy, message = check_system_health(stats)
    return {
        "status": "healthy" if healthy else "unhealthy",
        "message": message,
        "service": SERVICE_NAME,
        "stats": stats.to_dict(),
    }
