"""Logging utilities and structured logging helpers."""
import logging

from videoforge.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

log = logging.getLogger("videoforge")


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Install the root handler once; later calls only adjust the level."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, datefmt=DATE_FORMAT)
    logging.getLogger().setLevel(level.upper())


def _clip(text: str, limit: int = 50) -> str:
    return f"{text[:limit]}{'...' if len(text) > limit else ''}"


# Structured logging helpers
def log_request(prompt: str, provider: str):
    """Log incoming video generation request."""
    log.info(f"[REQUEST] Prompt: '{_clip(prompt)}' | Provider: {provider}")


def log_success(prompt: str, detail: str = ""):
    """Log successful generation."""
    log.info(f"[SUCCESS] '{_clip(prompt)}'" + (f" | {detail}" if detail else ""))


def log_fail(tag: str, reason: str):
    """Log failed operations."""
    log.error(f"[FAIL] {tag} | Reason: {reason}")


def log_health(ram_mb: float, open_files: int, max_files: int):
    """Log system health status."""
    log.info(f"[HEALTH] RAM: {ram_mb:.0f}MB | Open files: {open_files}/{max_files}")
