"""Models describing what the caller wants to play."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

# UUID cannot be placed under TYPE_CHECKING because it is used at runtime by DataClassDictMixin
from uuid import UUID

from mashumaro import DataClassDictMixin


@dataclass(frozen=True)
class PlaybackDetails(DataClassDictMixin):
    """Resume position and stream selection, passed through to the player untouched."""

    start_time: timedelta | None = None
    audio_stream_index: int | None = None
    subtitle_stream_index: int | None = None


@dataclass(frozen=True)
class ResolutionRequest(DataClassDictMixin):
    """
    Everything needed to resolve an item into a playable media source.

    item_id: the library item to play.
    media_source_id: play this specific media source of the item (version, live feed),
        the server picks otherwise.
    device_profile: opaque capability description of the playing device,
        forwarded to the server as-is.
    max_streaming_bitrate: bitrate ceiling in bits per second.
    start_time: resume offset.
    audio_stream_index / subtitle_stream_index: server stream indices to select,
        subtitle index -1 disables subtitles.
    auto_open_live_stream: let the server open live streams as part of the request.
    """

    item_id: UUID
    media_source_id: str | None = None
    device_profile: Mapping[str, Any] | None = None
    max_streaming_bitrate: int | None = None
    start_time: timedelta | None = None
    audio_stream_index: int | None = None
    subtitle_stream_index: int | None = None
    auto_open_live_stream: bool = True

    def __post_init__(self) -> None:
        """Reject values no server could honour."""
        if self.max_streaming_bitrate is not None and self.max_streaming_bitrate <= 0:
            raise ValueError(
                f"max_streaming_bitrate must be positive, got {self.max_streaming_bitrate}"
            )
        if self.start_time is not None and self.start_time < timedelta(0):
            raise ValueError(f"start_time must not be negative, got {self.start_time}")

    @property
    def playback_details(self) -> PlaybackDetails:
        """Return the part of the request that is carried through to playback."""
        return PlaybackDetails(
            start_time=self.start_time,
            audio_stream_index=self.audio_stream_index,
            subtitle_stream_index=self.subtitle_stream_index,
        )
