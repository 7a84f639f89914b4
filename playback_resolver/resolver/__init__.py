"""Resolve library items into media sources that are ready for playback."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from playback_resolver.constants import LOGGER_NAME
from playback_resolver.helpers.identifiers import SourceIdFormatter, strip_separators
from playback_resolver.models import Failure, UnsupportedContent

from .builder import build_media_source
from .enricher import MetadataEnricher
from .requester import PlaybackInfo, PlaybackInfoRequester
from .selector import select_source
from .transport import PlaybackTransport

if TYPE_CHECKING:
    from playback_resolver.models import ResolutionRequest, ResolutionResult

LOGGER = logging.getLogger(f"{LOGGER_NAME}.resolver")

__all__ = [
    "MediaSourceResolver",
    "MetadataEnricher",
    "PlaybackInfo",
    "PlaybackInfoRequester",
    "PlaybackTransport",
    "build_media_source",
    "select_source",
]


class MediaSourceResolver:
    """Turns a ResolutionRequest into a ResolvedMediaSource or a typed failure."""

    def __init__(
        self,
        transport: PlaybackTransport,
        source_id_formatter: SourceIdFormatter = strip_separators,
        user_id: str | None = None,
        logger: logging.Logger = LOGGER,
    ) -> None:
        """Initialize the resolver."""
        self.logger = logger
        self.requester = PlaybackInfoRequester(
            transport, source_id_formatter, user_id, logger.getChild("requester")
        )
        self.enricher = MetadataEnricher(transport, logger.getChild("enricher"))

    async def resolve(self, request: ResolutionRequest) -> ResolutionResult:
        """
        Resolve the request.

        Returns Success with the ResolvedMediaSource, or Failure with either
        UnsupportedContent or NetworkFailure. Cancelling the call cancels the
        in-flight requests and raises CancelledError, no result is produced.
        """
        item_id = request.item_id
        self.logger.debug("Resolving media source for %s", item_id)
        playback_info = await self.requester.request(request)
        if isinstance(playback_info, Failure):
            return playback_info
        info = playback_info.value

        async with asyncio.TaskGroup() as tg:
            # the metadata lookup is independent of the source selection
            item_task = tg.create_task(self.enricher.fetch(item_id))
            source = select_source(info.media_sources, item_id)
        if source is None:
            return Failure(UnsupportedContent(reason="No media sources"))

        result = build_media_source(
            item_id=item_id,
            item=item_task.result(),
            source=source,
            play_session_id=info.play_session_id,
            max_streaming_bitrate=request.max_streaming_bitrate,
            playback_details=request.playback_details,
        )
        if isinstance(result, Failure):
            return result
        self.logger.debug(
            "Resolved %s to media source %s (session %s)",
            item_id,
            result.value.id,
            result.value.play_session_id,
        )
        return result
