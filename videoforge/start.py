# videoforge/start.py
from __future__ import annotations
import logging
import platform
from typing import Optional

import uvicorn

from videoforge.config import BUILD_TAG, HOST, LOG_LEVEL, PORT, VIDEO_LATENCY_SECONDS, VIDEO_PROVIDER
from videoforge.utils.logging import configure_logging


def _log(msg: str) -> None:
    logging.getLogger("uvicorn.error").info(msg)


def _diagnostics() -> None:
    _log("=== Startup Diagnostics ===")
    _log(f"Python: {platform.python_version()} on {platform.platform()}")
    _log(f"VIDEO_PROVIDER={VIDEO_PROVIDER} VIDEO_LATENCY_SECONDS={VIDEO_LATENCY_SECONDS}")
    _log(f"Build tag: {BUILD_TAG}")


def serve(host: Optional[str] = None, port: Optional[int] = None) -> None:
    configure_logging()
    _diagnostics()
    uvicorn.run(
        "videoforge.main:app",
        host=host or HOST,
        port=int(port or PORT),
        log_level=LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    serve()
