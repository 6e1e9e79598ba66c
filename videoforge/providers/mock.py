from __future__ import annotations

import asyncio
from typing import Any

from videoforge.config import MODEL_NAME, PLACEHOLDER_VIDEO_URL, RESOLUTION, VIDEO_LATENCY_SECONDS
from videoforge.providers.base import GeneratedVideo, VideoGenProvider


class MockVeoProvider(VideoGenProvider):
    """Pretends to be Google Veo: sleeps, then hands back a placeholder clip."""

    name = "mock"

    def __init__(
        self,
        latency_seconds: float = VIDEO_LATENCY_SECONDS,
        video_url: str = PLACEHOLDER_VIDEO_URL,
    ) -> None:
        self.latency_seconds = latency_seconds
        self.video_url = video_url

    async def generate(self, prompt: str, **kwargs: Any) -> GeneratedVideo:
        if self.latency_seconds > 0:
            await asyncio.sleep(self.latency_seconds)

        return GeneratedVideo(
            provider=self.name,
            video_url=self.video_url,
            prompt=prompt,
            resolution=RESOLUTION,
            model=MODEL_NAME,
            metadata={"latency_seconds": self.latency_seconds},
        )
