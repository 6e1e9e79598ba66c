"""Provider adapters for video generation services."""

from videoforge.providers.base import GeneratedVideo, VideoGenProvider
from videoforge.providers.mock import MockVeoProvider
from videoforge.providers.registry import available_providers, get_provider, register_provider

__all__ = [
    "GeneratedVideo",
    "MockVeoProvider",
    "VideoGenProvider",
    "available_providers",
    "get_provider",
    "register_provider",
]
