"""Configuration and constants for the application."""
import os
from pathlib import Path

# Directories
PACKAGE_DIR = Path(__file__).parent
STATIC_DIR = PACKAGE_DIR / "static"

SERVICE_NAME = "VideoForge.AI Backend"

# Canned generation payload
PLACEHOLDER_VIDEO_URL = os.getenv(
    "PLACEHOLDER_VIDEO_URL",
    "https://commondatastorage.googleapis.com/gtv-videos-bucket/sample/BigBuckBunny.mp4",
)
RESOLUTION = "8K"
MODEL_NAME = "Google Veo 3.1"

# Provider selection
VIDEO_PROVIDER = os.getenv("VIDEO_PROVIDER", "mock")
VIDEO_LATENCY_SECONDS = float(os.getenv("VIDEO_LATENCY_SECONDS", "3"))

# Server
BUILD_TAG = os.getenv("BUILD_TAG", "dev")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Client
DEFAULT_BASE_URL = os.getenv("VIDEOFORGE_URL", "http://localhost:8000")
TICK_INTERVAL_SECONDS = 1.0
MAX_PROGRESS_INCREMENT = 15.0
PROGRESS_CAP = 95.0

# Error payloads
PROMPT_REQUIRED = "Prompt is required"
GENERATION_FAILED = "Failed to generate video"


def resolve_front_dir() -> Path:
    env_dir = os.getenv("FRONT_DIR")
    candidates = [Path(env_dir)] if env_dir else []
    candidates.append(STATIC_DIR)
    for p in candidates:
        if (p / "index.html").exists():
            return p
    return STATIC_DIR
