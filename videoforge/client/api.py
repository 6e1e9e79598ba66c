"""HTTP client for the ``/api/generate-video`` endpoint."""
from typing import Any, Dict, Optional

import requests

from videoforge.config import DEFAULT_BASE_URL

GENERATE_PATH = "/api/generate-video"


class GenerationFailed(Exception):
    """Raised for transport errors and any non-success response."""

    def __init__(self, message: str, status_code: int = 0, response: Optional[dict] = None):
        super().__init__(message)
        self.status_code = status_code
        self.response = response or {}


class VideoForgeClient:
    """Thin wrapper over the generation endpoint.

    ``timeout`` defaults to ``None``: the request waits for the server however
    long the simulated generation takes.
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: Optional[float] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def generate_video(self, prompt: str) -> Dict[str, Any]:
        try:
            resp = requests.post(
                self._url(GENERATE_PATH),
                json={"prompt": prompt},
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise GenerationFailed(f"Request failed: {e}") from e

        try:
            data = resp.json()
        except ValueError:
            data = {}

        if resp.status_code != 200:
            message = data.get("error") if isinstance(data, dict) else None
            raise GenerationFailed(message or f"HTTP {resp.status_code}", resp.status_code, data)

        if not isinstance(data, dict) or not data.get("videoUrl"):
            raise GenerationFailed("Response missing videoUrl", resp.status_code)

        return data

    def health(self) -> Dict[str, Any]:
        resp = requests.get(self._url("/api/health"), timeout=self.timeout or 10)
        resp.raise_for_status()
        return resp.json()
