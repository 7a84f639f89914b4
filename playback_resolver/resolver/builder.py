"""Assemble the resolved media source handed to the player."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from playback_resolver.constants import LOGGER_NAME
from playback_resolver.models import (
    Failure,
    ResolutionError,
    ResolvedMediaSource,
    Success,
    UnsupportedContent,
)

if TYPE_CHECKING:
    from uuid import UUID

    from playback_resolver.models import CandidateSource, ItemMetadata, PlaybackDetails

LOGGER = logging.getLogger(f"{LOGGER_NAME}.builder")


def build_media_source(
    item_id: UUID,
    item: ItemMetadata | None,
    source: CandidateSource,
    play_session_id: str,
    max_streaming_bitrate: int | None,
    playback_details: PlaybackDetails,
) -> Success[ResolvedMediaSource] | Failure[ResolutionError]:
    """Create the ResolvedMediaSource, invalid source data yields UnsupportedContent."""
    try:
        resolved = ResolvedMediaSource(
            item_id=item_id,
            item=item,
            source=source,
            play_session_id=play_session_id,
            live_stream_id=source.live_stream_id,
            max_streaming_bitrate=max_streaming_bitrate,
            playback_details=playback_details,
        )
    except ValueError as err:
        LOGGER.error("Cannot create media source for %s: %s", item_id, err)
        return Failure(UnsupportedContent(err, reason=str(err)))
    return Success(resolved)
