"""VideoForge.AI: prompt-to-video demo service and client."""

__version__ = "1.0.0"
