import logging
import time
from pathlib import Path
from typing import Optional, Union

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from videoforge.config import BUILD_TAG, VIDEO_PROVIDER, resolve_front_dir
from videoforge.providers import VideoGenProvider, get_provider
from videoforge.routes import debug as debug_routes
from videoforge.routes import meta as meta_routes
from videoforge.routes import video as video_routes

LG = logging.getLogger("uvicorn.error")


def create_app(
    provider: Optional[VideoGenProvider] = None,
    front_dir: Optional[Union[str, Path]] = None,
) -> FastAPI:
    app = FastAPI(title="VideoForge.AI", version="1.0")

    app.state.start_time = time.time()
    app.state.build_tag = BUILD_TAG
    app.state.provider = provider or get_provider(VIDEO_PROVIDER)
    app.state.front_dir = Path(front_dir) if front_dir else resolve_front_dir()

    # Meta + debug on both / and /api; generation under /api only
    for prefix in ("", "/api"):
        app.include_router(meta_routes.router, prefix=prefix)
        app.include_router(debug_routes.router, prefix=prefix)
    app.include_router(video_routes.router, prefix="/api")

    # Frontend last so it only sees paths no router claimed
    if (app.state.front_dir / "index.html").exists():
        app.mount("/", StaticFiles(directory=str(app.state.front_dir), html=True), name="frontend")
    else:
        LG.warning("Frontend not found at %s; serving API only", app.state.front_dir)

    LG.info("VideoForge ready: provider=%s build=%s", app.state.provider.name, app.state.build_tag)
    return app
