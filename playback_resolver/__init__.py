"""Resolve media items on a Jellyfin-compatible server into playable media sources."""

from __future__ import annotations

from .models import (
    CandidateSource,
    Failure,
    ItemMetadata,
    NetworkFailure,
    PlaybackDetails,
    ResolutionError,
    ResolutionFailedError,
    ResolutionRequest,
    ResolutionResult,
    ResolvedMediaSource,
    Success,
    UnsupportedContent,
)
from .resolver import MediaSourceResolver, PlaybackTransport

__all__ = [
    "CandidateSource",
    "Failure",
    "ItemMetadata",
    "MediaSourceResolver",
    "NetworkFailure",
    "PlaybackDetails",
    "PlaybackTransport",
    "ResolutionError",
    "ResolutionFailedError",
    "ResolutionRequest",
    "ResolutionResult",
    "ResolvedMediaSource",
    "Success",
    "UnsupportedContent",
]
