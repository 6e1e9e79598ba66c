from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class GeneratedVideo:
    """Generated video payload returned by providers."""

    provider: str
    video_url: str
    prompt: str
    resolution: str
    model: str
    metadata: Dict[str, Any] = field(default_factory=dict)


class VideoGenProvider(ABC):
    """Base class for all video generation providers."""

    name = "base"

    @abstractmethod
    async def generate(self, prompt: str, **kwargs: Any) -> GeneratedVideo:
        """Generate a video for ``prompt`` and return where it can be played."""
        raise NotImplementedError
