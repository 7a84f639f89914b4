"""Models for media sources as reported by the server and as resolved for playback."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import StrEnum

# UUID cannot be placed under TYPE_CHECKING because it is used at runtime by DataClassDictMixin
from uuid import UUID

from mashumaro import DataClassDictMixin
from music_assistant_models.enums import ContentType

from playback_resolver.constants import SUBTITLE_INDEX_DISABLED
from playback_resolver.helpers.util import from_ticks

from .request import PlaybackDetails


class MediaStreamType(StrEnum):
    """Kind of an elementary stream within a media source."""

    AUDIO = "Audio"
    VIDEO = "Video"
    SUBTITLE = "Subtitle"
    EMBEDDED_IMAGE = "EmbeddedImage"
    DATA = "Data"
    LYRIC = "Lyric"
    UNKNOWN = "Unknown"

    @classmethod
    def _missing_(cls, value: object) -> MediaStreamType:
        """Set default enum member if an unknown value is provided."""
        return cls.UNKNOWN


class MediaProtocol(StrEnum):
    """How a media source is reached."""

    FILE = "File"
    HTTP = "Http"
    RTMP = "Rtmp"
    RTSP = "Rtsp"
    UDP = "Udp"
    RTP = "Rtp"
    FTP = "Ftp"
    UNKNOWN = "Unknown"

    @classmethod
    def _missing_(cls, value: object) -> MediaProtocol:
        """Set default enum member if an unknown value is provided."""
        return cls.UNKNOWN


@dataclass(frozen=True)
class MediaStream(DataClassDictMixin):
    """A single audio, video or subtitle stream of a media source."""

    index: int
    type: MediaStreamType
    codec: str | None = None
    language: str | None = None
    display_title: str | None = None
    is_default: bool = False
    is_forced: bool = False
    is_external: bool = False
    channels: int | None = None
    sample_rate: int | None = None
    bit_rate: int | None = None
    width: int | None = None
    height: int | None = None
    delivery_url: str | None = None


@dataclass(frozen=True)
class CandidateSource(DataClassDictMixin):
    """One playable representation of an item (file, stream or live feed)."""

    id: str | None
    live_stream_id: str | None = None
    name: str | None = None
    protocol: MediaProtocol = MediaProtocol.FILE
    container: str | None = None
    path: str | None = None
    run_time_ticks: int | None = None
    bitrate: int | None = None
    is_remote: bool = False
    supports_direct_play: bool = False
    supports_direct_stream: bool = False
    supports_transcoding: bool = False
    transcoding_url: str | None = None
    default_audio_stream_index: int | None = None
    default_subtitle_stream_index: int | None = None
    media_streams: tuple[MediaStream, ...] = ()

    @property
    def content_type(self) -> ContentType:
        """Return the container as ContentType."""
        if not self.container:
            return ContentType.UNKNOWN
        # the server may report a comma separated list of aliases (e.g. "mov,mp4,m4a")
        return ContentType.try_parse(self.container.split(",")[0])

    def get_stream(self, index: int, stream_type: MediaStreamType) -> MediaStream | None:
        """Return the stream of the given type with the given server index."""
        return next(
            (x for x in self.media_streams if x.index == index and x.type == stream_type),
            None,
        )


@dataclass(frozen=True)
class ItemMetadata(DataClassDictMixin):
    """Descriptive information about a library item."""

    id: str | None = None
    name: str | None = None
    type: str | None = None
    overview: str | None = None
    series_name: str | None = None
    season_number: int | None = None
    episode_number: int | None = None
    production_year: int | None = None
    run_time_ticks: int | None = None
    primary_image_tag: str | None = None
    genres: tuple[str, ...] = ()


@dataclass(frozen=True)
class PlaybackInfoResponse(DataClassDictMixin):
    """Answer of the server to a playback info request."""

    play_session_id: str | None
    media_sources: tuple[CandidateSource, ...] = ()
    # server reason for refusing playback, e.g. NotAllowed or NoCompatibleStream
    error_code: str | None = None


@dataclass(frozen=True)
class ResolvedMediaSource(DataClassDictMixin):
    """
    A media source that is ready to be handed to a player.

    All fields are fixed at construction; construction fails with ValueError
    when the selected source cannot honour the request.
    """

    item_id: UUID
    source: CandidateSource
    play_session_id: str
    playback_details: PlaybackDetails
    item: ItemMetadata | None = None
    live_stream_id: str | None = None
    max_streaming_bitrate: int | None = None

    def __post_init__(self) -> None:
        """Validate the descriptor is internally consistent."""
        if not self.source.id:
            raise ValueError("Media source has no id")
        if not isinstance(self.source.id, str):
            raise ValueError(f"Invalid media source id {self.source.id!r}")
        if not self.play_session_id:
            raise ValueError("Missing play session id")
        if self.live_stream_id != self.source.live_stream_id:
            raise ValueError(
                f"Live stream id {self.live_stream_id} does not belong to "
                f"media source {self.source.id}"
            )
        if self.max_streaming_bitrate is not None and self.max_streaming_bitrate <= 0:
            raise ValueError(f"Invalid max streaming bitrate {self.max_streaming_bitrate}")
        if not self.source.media_streams:
            # nothing to validate the stream selection against
            return
        audio_index = self.playback_details.audio_stream_index
        if audio_index is not None and not self.source.get_stream(
            audio_index, MediaStreamType.AUDIO
        ):
            raise ValueError(f"Media source {self.source.id} has no audio stream {audio_index}")
        subtitle_index = self.playback_details.subtitle_stream_index
        if (
            subtitle_index is not None
            and subtitle_index != SUBTITLE_INDEX_DISABLED
            and not self.source.get_stream(subtitle_index, MediaStreamType.SUBTITLE)
        ):
            raise ValueError(
                f"Media source {self.source.id} has no subtitle stream {subtitle_index}"
            )

    @property
    def id(self) -> str:
        """Return the id of the selected media source."""
        return str(self.source.id)

    @property
    def name(self) -> str:
        """Return a display name for the media source."""
        if self.item and self.item.name:
            return self.item.name
        return self.source.name or ""

    @property
    def run_time(self) -> timedelta:
        """Return the duration of the media, zero when unknown."""
        ticks = self.source.run_time_ticks
        if ticks is None and self.item:
            ticks = self.item.run_time_ticks
        return from_ticks(ticks) or timedelta(0)

    @property
    def is_live(self) -> bool:
        """Return if this media source is backed by a live stream."""
        return self.live_stream_id is not None

    @property
    def audio_streams(self) -> list[MediaStream]:
        """Return all audio streams of the media source."""
        return [x for x in self.source.media_streams if x.type == MediaStreamType.AUDIO]

    @property
    def subtitle_streams(self) -> list[MediaStream]:
        """Return all subtitle streams of the media source."""
        return [x for x in self.source.media_streams if x.type == MediaStreamType.SUBTITLE]

    @property
    def video_stream(self) -> MediaStream | None:
        """Return the (first) video stream of the media source."""
        return next(
            (x for x in self.source.media_streams if x.type == MediaStreamType.VIDEO), None
        )

    @property
    def selected_audio_stream(self) -> MediaStream | None:
        """Return the requested audio stream, or the default one of the source."""
        index = self.playback_details.audio_stream_index
        if index is None:
            index = self.source.default_audio_stream_index
        if index is None:
            return None
        return self.source.get_stream(index, MediaStreamType.AUDIO)

    @property
    def selected_subtitle_stream(self) -> MediaStream | None:
        """Return the requested subtitle stream, or the default one of the source."""
        index = self.playback_details.subtitle_stream_index
        if index is None:
            index = self.source.default_subtitle_stream_index
        if index is None or index == SUBTITLE_INDEX_DISABLED:
            return None
        return self.source.get_stream(index, MediaStreamType.SUBTITLE)
