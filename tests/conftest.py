import threading

import pytest
from fastapi.testclient import TestClient

from videoforge.app import create_app
from videoforge.client.api import GenerationFailed
from videoforge.config import PLACEHOLDER_VIDEO_URL
from videoforge.providers import MockVeoProvider


class FakeApi:
    """Stands in for VideoForgeClient; optionally blocks until released."""

    def __init__(self, error=None, block=False):
        self.error = error
        self.calls = []
        self.gate = threading.Event()
        if not block:
            self.gate.set()

    def generate_video(self, prompt):
        self.calls.append(prompt)
        assert self.gate.wait(5), "FakeApi was never released"
        if self.error is not None:
            raise self.error
        return {
            "success": True,
            "videoUrl": PLACEHOLDER_VIDEO_URL,
            "prompt": prompt,
            "resolution": "8K",
            "model": "Google Veo 3.1",
        }

    def health(self):
        if self.error is not None:
            raise self.error
        return {"ok": True, "build": "dev", "provider": "mock"}


@pytest.fixture
def app():
    return create_app(provider=MockVeoProvider(latency_seconds=0))


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def fake_api():
    return FakeApi()


@pytest.fixture
def failing_api():
    return FakeApi(error=GenerationFailed("Failed to generate video", 500))
