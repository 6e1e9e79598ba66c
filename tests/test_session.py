import random
import threading

from conftest import FakeApi
from videoforge.client import COMPLETED, FAILED, GENERATING, GenerationFailed, GenerationSession
from videoforge.config import PLACEHOLDER_VIDEO_URL

# Large enough that the background ticker never fires during a test.
QUIET = 60.0


def test_successful_submission_completes_one_record(fake_api):
    session = GenerationSession(fake_api, tick_interval=QUIET)

    request_id = session.submit("sunset over mountains")
    record = session.wait(request_id, timeout=5)

    assert len(session.requests) == 1
    assert record.status == COMPLETED
    assert record.url == PLACEHOLDER_VIDEO_URL
    assert record.prompt == "sunset over mountains"
    assert record.progress == 100.0
    assert fake_api.calls == ["sunset over mountains"]


def test_failed_submission_marks_record_failed(failing_api):
    session = GenerationSession(failing_api, tick_interval=QUIET)

    request_id = session.submit("stormy sea")
    record = session.wait(request_id, timeout=5)

    assert len(session.requests) == 1
    assert record.status == FAILED
    assert record.url == ""


def test_unexpected_error_also_fails_the_record():
    session = GenerationSession(FakeApi(error=KeyError("videoUrl")), tick_interval=QUIET)

    record = session.wait(session.submit("glitch"), timeout=5)

    assert record.status == FAILED


def test_blank_prompt_creates_nothing(fake_api):
    session = GenerationSession(fake_api, tick_interval=QUIET)

    assert session.submit("") is None
    assert session.submit("   ") is None
    assert session.requests == ()
    assert fake_api.calls == []


def test_progress_is_monotonic_and_below_hundred_while_in_flight():
    api = FakeApi(block=True)
    session = GenerationSession(api, tick_interval=QUIET, rng=random.Random(7))
    request_id = session.submit("slow render")

    seen = []
    for _ in range(40):
        session.tick(request_id)
        seen.append(session.get(request_id).progress)

    assert seen == sorted(seen)
    assert all(p < 100 for p in seen)
    assert session.get(request_id).status == GENERATING

    api.gate.set()
    assert session.wait(request_id, timeout=5).progress == 100.0


def test_ticker_thread_advances_progress():
    api = FakeApi(block=True)
    session = GenerationSession(api, tick_interval=0.01, rng=random.Random(1))
    advanced = threading.Event()

    def on_change(requests):
        if any(r.status == GENERATING and r.progress > 0 for r in requests):
            advanced.set()

    session.subscribe(on_change)
    request_id = session.submit("moving clouds")

    assert advanced.wait(5)
    api.gate.set()
    assert session.wait(request_id, timeout=5).status == COMPLETED


def test_ticks_after_resolution_are_ignored(fake_api):
    session = GenerationSession(fake_api, tick_interval=QUIET)
    request_id = session.submit("done already")
    session.wait(request_id, timeout=5)

    session.tick(request_id)

    assert session.get(request_id).progress == 100.0


def test_concurrent_submissions_resolve_by_id():
    first_api = FakeApi(block=True)

    class RoutingApi:
        def generate_video(self, prompt):
            if prompt == "first":
                return first_api.generate_video(prompt)
            raise GenerationFailed("Prompt is required", 400)

    session = GenerationSession(RoutingApi(), tick_interval=QUIET, clock=lambda: 1000.0)
    first = session.submit("first")
    second = session.submit("second")

    assert first != second
    assert [r.id for r in session.requests] == [second, first]

    assert session.wait(second, timeout=5).status == FAILED
    assert session.get(first).status == GENERATING

    first_api.gate.set()
    assert session.wait(first, timeout=5).status == COMPLETED
    assert session.get(second).status == FAILED


def test_ids_are_time_derived_and_unique(fake_api):
    session = GenerationSession(fake_api, tick_interval=QUIET, clock=lambda: 1700000000.123)

    ids = [session.submit(f"prompt {i}") for i in range(3)]
    session.wait_all(timeout=5)

    assert ids == ["1700000000123", "1700000000124", "1700000000125"]


def test_listeners_see_each_transition(fake_api):
    session = GenerationSession(fake_api, tick_interval=QUIET)
    statuses = []
    unsubscribe = session.subscribe(lambda requests: statuses.append(requests[0].status))

    session.wait(session.submit("watch me"), timeout=5)
    unsubscribe()
    session.wait(session.submit("unobserved"), timeout=5)

    assert statuses == [GENERATING, COMPLETED]


def test_wait_from_another_thread_right_after_submit(fake_api):
    session = GenerationSession(fake_api, tick_interval=QUIET)
    errors = []
    results = []
    waiters = []

    def wait_in_background(requests):
        newest = requests[0]
        if newest.status != GENERATING:
            return

        def waiter():
            try:
                results.append(session.wait(newest.id, timeout=5))
            except Exception as e:  # noqa: BLE001
                errors.append(e)

        t = threading.Thread(target=waiter)
        waiters.append(t)
        t.start()

    session.subscribe(wait_in_background)
    session.submit("first frame")
    for t in waiters:
        t.join(5)

    assert errors == []
    assert [r.status for r in results] == [COMPLETED]


def test_settled_requests_release_their_threads(fake_api, failing_api):
    for api in (fake_api, failing_api):
        session = GenerationSession(api, tick_interval=QUIET)
        ids = [session.submit(f"clip {i}") for i in range(3)]
        session.wait_all(timeout=5)

        assert session._workers == {}
        assert session._tickers == {}
        assert all(session.wait(request_id, timeout=5).is_terminal for request_id in ids)
