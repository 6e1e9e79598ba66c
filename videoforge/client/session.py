"""Client view-model: tracks submitted prompts while the server generates them."""
from __future__ import annotations

import logging
import random
import threading
import time
from typing import Callable, Dict, List, Optional

from videoforge.client.api import GenerationFailed, VideoForgeClient
from videoforge.client.state import (
    Event,
    GenerationRequest,
    ProgressTicked,
    Requests,
    ResolvedFailure,
    ResolvedSuccess,
    Submitted,
    reduce,
)
from videoforge.config import MAX_PROGRESS_INCREMENT, PROGRESS_CAP, TICK_INTERVAL_SECONDS

log = logging.getLogger("videoforge.client")

Listener = Callable[[Requests], None]


class GenerationSession:
    """Ordered list of generation requests, newest first.

    Each accepted submission gets its own progress ticker and its own worker
    thread for the network call; both are keyed by request id, so several
    prompts can be in flight at once. All transitions go through
    :func:`videoforge.client.state.reduce` under one lock.
    """

    def __init__(
        self,
        api: Optional[VideoForgeClient] = None,
        *,
        tick_interval: float = TICK_INTERVAL_SECONDS,
        max_increment: float = MAX_PROGRESS_INCREMENT,
        progress_cap: float = PROGRESS_CAP,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._api = api or VideoForgeClient()
        self.tick_interval = tick_interval
        self.max_increment = max_increment
        self.progress_cap = progress_cap
        self._rng = rng or random.Random()
        self._clock = clock

        self._lock = threading.RLock()
        self._requests: Requests = ()
        self._tickers: Dict[str, threading.Event] = {}
        self._workers: Dict[str, threading.Thread] = {}
        self._listeners: List[Listener] = []
        self._last_id_ms = 0

    @property
    def requests(self) -> Requests:
        with self._lock:
            return self._requests

    def get(self, request_id: str) -> Optional[GenerationRequest]:
        for r in self.requests:
            if r.id == request_id:
                return r
        return None

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` with the new list after every change."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe():
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, event: Event) -> Requests:
        with self._lock:
            updated = reduce(self._requests, event)
            if updated != self._requests:
                self._requests = updated
                for listener in list(self._listeners):
                    listener(updated)
            return updated

    def submit(self, prompt: str) -> Optional[str]:
        """Start generating ``prompt``; returns the new request id.

        Blank prompts are ignored: nothing is recorded and no call is made.
        """
        if not prompt or not prompt.strip():
            log.debug("Ignoring blank prompt")
            return None

        stop = threading.Event()
        with self._lock:
            request_id = self._next_id()
            self.dispatch(Submitted(request_id, prompt))
            self._tickers[request_id] = stop
            # Started under the lock so wait() never sees an unstarted thread.
            worker = threading.Thread(
                target=self._run_request,
                args=(request_id, prompt),
                name=f"generate-{request_id}",
                daemon=True,
            )
            threading.Thread(
                target=self._run_ticker,
                args=(request_id, stop),
                name=f"ticker-{request_id}",
                daemon=True,
            ).start()
            worker.start()
            self._workers[request_id] = worker

        log.info(f"[SUBMIT] {request_id}: '{prompt[:50]}{'...' if len(prompt) > 50 else ''}'")
        return request_id

    def tick(self, request_id: str) -> None:
        increment = self._rng.random() * self.max_increment
        self.dispatch(ProgressTicked(request_id, increment, self.progress_cap))

    def wait(self, request_id: str, timeout: Optional[float] = None) -> Optional[GenerationRequest]:
        """Block until the request settles (or ``timeout`` passes) and return it."""
        with self._lock:
            worker = self._workers.get(request_id)
        if worker is not None:
            worker.join(timeout)
        return self.get(request_id)

    def wait_all(self, timeout: Optional[float] = None) -> Requests:
        with self._lock:
            workers = list(self._workers.values())
        for worker in workers:
            worker.join(timeout)
        return self.requests

    def _next_id(self) -> str:
        now_ms = int(self._clock() * 1000)
        self._last_id_ms = max(now_ms, self._last_id_ms + 1)
        return str(self._last_id_ms)

    def _run_ticker(self, request_id: str, stop: threading.Event) -> None:
        while not stop.wait(self.tick_interval):
            self.tick(request_id)

    def _run_request(self, request_id: str, prompt: str) -> None:
        try:
            data = self._api.generate_video(prompt)
        except GenerationFailed as e:
            log.warning(f"[FAIL] {request_id} | Reason: {e}")
            event: Event = ResolvedFailure(request_id, str(e))
        except Exception as e:
            log.exception(f"[FAIL] {request_id} | Unexpected error")
            event = ResolvedFailure(request_id, str(e))
        else:
            event = ResolvedSuccess(request_id, data["videoUrl"])
        self._settle(request_id, event)

    def _settle(self, request_id: str, event: Event) -> None:
        with self._lock:
            stop = self._tickers.pop(request_id, None)
            if stop is not None:
                stop.set()
            self._workers.pop(request_id, None)
            self.dispatch(event)
