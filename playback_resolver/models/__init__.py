"""Models used by the playback resolver."""

from __future__ import annotations

from .media_source import (
    CandidateSource,
    ItemMetadata,
    MediaProtocol,
    MediaStream,
    MediaStreamType,
    PlaybackInfoResponse,
    ResolvedMediaSource,
)
from .request import PlaybackDetails, ResolutionRequest
from .result import (
    Failure,
    NetworkFailure,
    ResolutionError,
    ResolutionFailedError,
    Result,
    Success,
    UnsupportedContent,
)

ResolutionResult = Success[ResolvedMediaSource] | Failure[ResolutionError]

__all__ = [
    "CandidateSource",
    "Failure",
    "ItemMetadata",
    "MediaProtocol",
    "MediaStream",
    "MediaStreamType",
    "NetworkFailure",
    "PlaybackDetails",
    "PlaybackInfoResponse",
    "ResolutionError",
    "ResolutionFailedError",
    "ResolutionRequest",
    "ResolutionResult",
    "ResolvedMediaSource",
    "Result",
    "Success",
    "UnsupportedContent",
]
