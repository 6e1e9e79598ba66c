"""Client-side view-model for the generation endpoint."""

from videoforge.client.api import GenerationFailed, VideoForgeClient
from videoforge.client.session import GenerationSession
from videoforge.client.state import (
    COMPLETED,
    FAILED,
    GENERATING,
    GenerationRequest,
    ProgressTicked,
    ResolvedFailure,
    ResolvedSuccess,
    Submitted,
    reduce,
)

__all__ = [
    "COMPLETED",
    "FAILED",
    "GENERATING",
    "GenerationFailed",
    "GenerationRequest",
    "GenerationSession",
    "ProgressTicked",
    "ResolvedFailure",
    "ResolvedSuccess",
    "Submitted",
    "VideoForgeClient",
    "reduce",
]
