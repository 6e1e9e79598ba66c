"""Generation request records and the reducer that moves them through their lifecycle.

Every change to the request list goes through :func:`reduce`, a pure function of
``(requests, event) -> requests``. Events are addressed by request id, so a late
progress tick can never touch a different request, and once a request reaches a
terminal status (``completed`` or ``failed``) no further event changes it.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Tuple, Union

from videoforge.config import PROGRESS_CAP

GENERATING = "generating"
COMPLETED = "completed"
FAILED = "failed"
TERMINAL_STATUSES = frozenset({COMPLETED, FAILED})

# Ticks never push a request to 100; only a successful response does.
MAX_TICK_PROGRESS = 99.0


@dataclass(frozen=True)
class GenerationRequest:
    id: str
    prompt: str
    url: str = ""
    status: str = GENERATING
    progress: float = 0.0

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Submitted:
    request_id: str
    prompt: str


@dataclass(frozen=True)
class ProgressTicked:
    request_id: str
    increment: float
    cap: float = PROGRESS_CAP


@dataclass(frozen=True)
class ResolvedSuccess:
    request_id: str
    url: str


@dataclass(frozen=True)
class ResolvedFailure:
    request_id: str
    reason: str = ""


Event = Union[Submitted, ProgressTicked, ResolvedSuccess, ResolvedFailure]
Requests = Tuple[GenerationRequest, ...]


def reduce(requests: Requests, event: Event) -> Requests:
    """Return the request list that results from applying ``event``.

    New submissions go to the head of the list. Events naming an unknown id
    leave the list unchanged.
    """
    if isinstance(event, Submitted):
        if not event.prompt or not event.prompt.strip():
            return requests
        if any(r.id == event.request_id for r in requests):
            raise ValueError(f"Duplicate request id: {event.request_id}")
        return (GenerationRequest(id=event.request_id, prompt=event.prompt),) + requests

    if not isinstance(event, (ProgressTicked, ResolvedSuccess, ResolvedFailure)):
        raise TypeError(f"Unsupported event: {event!r}")

    return tuple(_apply(r, event) if r.id == event.request_id else r for r in requests)


def _apply(request: GenerationRequest, event: Event) -> GenerationRequest:
    if request.is_terminal:
        return request

    if isinstance(event, ProgressTicked):
        cap = min(event.cap, MAX_TICK_PROGRESS)
        progress = min(request.progress + max(event.increment, 0.0), cap)
        if progress <= request.progress:
            return request
        return replace(request, progress=progress)

    if isinstance(event, ResolvedSuccess):
        return replace(request, status=COMPLETED, url=event.url, progress=100.0)

    return replace(request, status=FAILED)
