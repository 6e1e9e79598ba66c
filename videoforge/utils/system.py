"""Process and host resource readings for the diagnostic route."""
from __future__ import annotations

import os
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Tuple

import psutil

from videoforge.utils.logging import log, log_health

MIN_AVAILABLE_RAM_MB = 256
MAX_OPEN_FILES_RATIO = 0.9
DEFAULT_MAX_FILES = 1024


@dataclass
class SystemStats:
    available_ram_mb: float
    ram_percent: float
    process_rss_mb: float
    open_files: int
    max_files: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _max_open_files() -> int:
    if hasattr(os, "sysconf"):
        try:
            return int(os.sysconf("SC_OPEN_MAX"))
        except (ValueError, OSError):
            pass
    return DEFAULT_MAX_FILES


def collect_system_stats() -> SystemStats:
    memory = psutil.virtual_memory()
    process = psutil.Process()
    try:
        open_files = len(process.open_files())
    except (psutil.Error, OSError):
        open_files = 0

    stats = SystemStats(
        available_ram_mb=round(memory.available / (1024 ** 2), 1),
        ram_percent=float(memory.percent),
        process_rss_mb=round(process.memory_info().rss / (1024 ** 2), 1),
        open_files=open_files,
        max_files=_max_open_files(),
    )
    log_health(stats.available_ram_mb, stats.open_files, stats.max_files)
    return stats


def check_system_health(
    stats: Optional[SystemStats] = None,
    min_available_ram_mb: float = MIN_AVAILABLE_RAM_MB,
) -> Tuple[bool, str]:
    """Judge ``stats`` (read fresh when omitted); returns ``(healthy, message)``."""
    if stats is None:
        stats = collect_system_stats()

    if stats.available_ram_mb < min_available_ram_mb:
        log.warning(f"Low available RAM: {stats.available_ram_mb:.1f} MB")
        return False, f"Insufficient RAM: {stats.available_ram_mb:.1f}MB available, need {min_available_ram_mb:g}MB"

    if stats.open_files > MAX_OPEN_FILES_RATIO * stats.max_files:
        log.warning(f"Too many open files: {stats.open_files} / {stats.max_files}")
        return False, f"Too many open files: {stats.open_files}/{stats.max_files}"

    return True, "System healthy"
