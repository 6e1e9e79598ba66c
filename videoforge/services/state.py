# videoforge/services/state.py
from __future__ import annotations
import time
from collections import deque
from typing import Deque, Dict, Any

START_TIME = time.time()
RECENT: Deque[Dict[str, Any]] = deque(maxlen=10)


def record_generation(prompt: str, provider: str, ms: int, ok: bool) -> None:
    RECENT.appendleft({
        "prompt_hash": hash(prompt) & 0xFFFFFFFF,
        "provider": provider,
        "ms": int(ms),
        "ok": bool(ok),
    })


def recent_generations():
    return list(RECENT)


def uptime_seconds() -> int:
    return int(time.time() - START_TIME)
