from __future__ import annotations

from typing import Callable, Dict

from videoforge.providers.base import VideoGenProvider
from videoforge.providers.mock import MockVeoProvider

ProviderFactory = Callable[[], VideoGenProvider]

# Allow tests and future integrations to inject alternate providers.
_PROVIDER_FACTORIES: Dict[str, ProviderFactory] = {
    "mock": MockVeoProvider,
}


def available_providers():
    return sorted(_PROVIDER_FACTORIES)


def register_provider(name: str, factory: ProviderFactory) -> None:
    _PROVIDER_FACTORIES[name.strip().lower()] = factory


def get_provider(name: str = "mock") -> VideoGenProvider:
    """Instantiate the provider registered under ``name``."""
    normalized = (name or "mock").strip().lower()
    try:
        factory = _PROVIDER_FACTORIES[normalized]
    except KeyError:
        known = ", ".join(available_providers())
        raise ValueError(f"Unknown video provider '{name}' (known: {known})") from None
    return factory()
