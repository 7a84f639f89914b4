"""Request the playable media sources of an item from the server."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import aiohttp
from music_assistant_models.errors import MusicAssistantError

from playback_resolver.constants import (
    DTO_KEY_AUDIO_STREAM_INDEX,
    DTO_KEY_AUTO_OPEN_LIVE_STREAM,
    DTO_KEY_DEVICE_PROFILE,
    DTO_KEY_MAX_STREAMING_BITRATE,
    DTO_KEY_MEDIA_SOURCE_ID,
    DTO_KEY_START_TIME_TICKS,
    DTO_KEY_SUBTITLE_STREAM_INDEX,
    DTO_KEY_USER_ID,
    LOGGER_NAME,
)
from playback_resolver.helpers.identifiers import SourceIdFormatter, strip_separators
from playback_resolver.helpers.util import to_ticks
from playback_resolver.models import (
    CandidateSource,
    Failure,
    NetworkFailure,
    ResolutionError,
    Success,
    UnsupportedContent,
)

if TYPE_CHECKING:
    from playback_resolver.models import ResolutionRequest

    from .transport import PlaybackTransport

LOGGER = logging.getLogger(f"{LOGGER_NAME}.requester")

# failures a transport may raise for a request it could not complete
TRANSPORT_ERRORS = (MusicAssistantError, aiohttp.ClientError, TimeoutError)


@dataclass(frozen=True)
class PlaybackInfo:
    """Session token and candidate sources returned for a playback info request."""

    play_session_id: str
    media_sources: tuple[CandidateSource, ...]


class PlaybackInfoRequester:
    """Sends the playback info request for a ResolutionRequest."""

    def __init__(
        self,
        transport: PlaybackTransport,
        source_id_formatter: SourceIdFormatter = strip_separators,
        user_id: str | None = None,
        logger: logging.Logger = LOGGER,
    ) -> None:
        """Initialize the requester."""
        self.transport = transport
        self.source_id_formatter = source_id_formatter
        self.user_id = user_id
        self.logger = logger

    def build_request_body(self, request: ResolutionRequest) -> dict[str, Any]:
        """Return the PlaybackInfoDto body for the request, leaving out unset values."""
        media_source_id = request.media_source_id
        if media_source_id is None:
            # without a source id the server cannot match the source
            # and drops the requested stream indices
            media_source_id = self.source_id_formatter(request.item_id)
        body: dict[str, Any] = {
            DTO_KEY_USER_ID: self.user_id,
            DTO_KEY_MEDIA_SOURCE_ID: media_source_id,
            DTO_KEY_DEVICE_PROFILE: dict(request.device_profile)
            if request.device_profile is not None
            else None,
            DTO_KEY_MAX_STREAMING_BITRATE: request.max_streaming_bitrate,
            DTO_KEY_START_TIME_TICKS: to_ticks(request.start_time)
            if request.start_time is not None
            else None,
            DTO_KEY_AUDIO_STREAM_INDEX: request.audio_stream_index,
            DTO_KEY_SUBTITLE_STREAM_INDEX: request.subtitle_stream_index,
            DTO_KEY_AUTO_OPEN_LIVE_STREAM: request.auto_open_live_stream,
        }
        return {key: value for key, value in body.items() if value is not None}

    async def request(
        self, request: ResolutionRequest
    ) -> Success[PlaybackInfo] | Failure[ResolutionError]:
        """Request the playback info, never raises for a failed request."""
        item_id = request.item_id
        try:
            response = await self.transport.post_playback_info(
                item_id, self.build_request_body(request)
            )
        except TRANSPORT_ERRORS as err:
            self.logger.error("Failed to load media source %s: %s", item_id, err)
            return Failure(NetworkFailure(err))

        if not response.play_session_id:
            self.logger.warning(
                "No play session returned for %s (error code: %s)", item_id, response.error_code
            )
            return Failure(UnsupportedContent(reason=response.error_code or "No play session"))
        if not response.media_sources:
            self.logger.warning("No media sources returned for %s", item_id)
            return Failure(UnsupportedContent(reason=response.error_code or "No media sources"))
        return Success(PlaybackInfo(response.play_session_id, response.media_sources))
