"""Parse Jellyfin API payloads into resolver models."""

from __future__ import annotations

from typing import Any

from music_assistant_models.errors import InvalidDataError

from playback_resolver.models import (
    CandidateSource,
    ItemMetadata,
    MediaProtocol,
    MediaStream,
    MediaStreamType,
    PlaybackInfoResponse,
)

from .const import (
    IMAGE_TYPE_PRIMARY,
    ITEM_KEY_GENRES,
    ITEM_KEY_ID,
    ITEM_KEY_IMAGE_TAGS,
    ITEM_KEY_INDEX_NUMBER,
    ITEM_KEY_NAME,
    ITEM_KEY_OVERVIEW,
    ITEM_KEY_PARENT_INDEX_NUMBER,
    ITEM_KEY_PRODUCTION_YEAR,
    ITEM_KEY_RUN_TIME_TICKS,
    ITEM_KEY_SERIES_NAME,
    ITEM_KEY_TYPE,
    RESPONSE_KEY_ERROR_CODE,
    RESPONSE_KEY_MEDIA_SOURCES,
    RESPONSE_KEY_PLAY_SESSION_ID,
    SOURCE_KEY_BITRATE,
    SOURCE_KEY_CONTAINER,
    SOURCE_KEY_DEFAULT_AUDIO_STREAM_INDEX,
    SOURCE_KEY_DEFAULT_SUBTITLE_STREAM_INDEX,
    SOURCE_KEY_ID,
    SOURCE_KEY_IS_REMOTE,
    SOURCE_KEY_LIVE_STREAM_ID,
    SOURCE_KEY_MEDIA_STREAMS,
    SOURCE_KEY_NAME,
    SOURCE_KEY_PATH,
    SOURCE_KEY_PROTOCOL,
    SOURCE_KEY_RUN_TIME_TICKS,
    SOURCE_KEY_SUPPORTS_DIRECT_PLAY,
    SOURCE_KEY_SUPPORTS_DIRECT_STREAM,
    SOURCE_KEY_SUPPORTS_TRANSCODING,
    SOURCE_KEY_TRANSCODING_URL,
    STREAM_KEY_BIT_RATE,
    STREAM_KEY_CHANNELS,
    STREAM_KEY_CODEC,
    STREAM_KEY_DELIVERY_URL,
    STREAM_KEY_DISPLAY_TITLE,
    STREAM_KEY_HEIGHT,
    STREAM_KEY_INDEX,
    STREAM_KEY_IS_DEFAULT,
    STREAM_KEY_IS_EXTERNAL,
    STREAM_KEY_IS_FORCED,
    STREAM_KEY_LANGUAGE,
    STREAM_KEY_SAMPLE_RATE,
    STREAM_KEY_TYPE,
    STREAM_KEY_WIDTH,
)


def _optional_int(data: dict[str, Any], key: str) -> int | None:
    """Return an integer field, None when it is missing."""
    value = data.get(key)
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError) as err:
        raise InvalidDataError(f"Invalid value for {key}: {value!r}") from err


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    """Return a string field, None when it is missing."""
    value = data.get(key)
    if value is None or isinstance(value, str):
        return value
    raise InvalidDataError(f"Invalid value for {key}: {value!r}")


def _bool(data: dict[str, Any], key: str) -> bool:
    """Return a boolean field, False when it is missing."""
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise InvalidDataError(f"Invalid value for {key}: {value!r}")
    return value


def _require_mapping(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise InvalidDataError(f"Expected an object for {what}, got {type(data).__name__}")
    return data


def parse_media_stream(data: dict[str, Any]) -> MediaStream:
    """Parse a Jellyfin MediaStream object."""
    data = _require_mapping(data, "media stream")
    index = _optional_int(data, STREAM_KEY_INDEX)
    if index is None:
        raise InvalidDataError("Media stream without index")
    return MediaStream(
        index=index,
        type=MediaStreamType(data.get(STREAM_KEY_TYPE) or MediaStreamType.UNKNOWN),
        codec=data.get(STREAM_KEY_CODEC),
        language=data.get(STREAM_KEY_LANGUAGE),
        display_title=data.get(STREAM_KEY_DISPLAY_TITLE),
        is_default=_bool(data, STREAM_KEY_IS_DEFAULT),
        is_forced=_bool(data, STREAM_KEY_IS_FORCED),
        is_external=_bool(data, STREAM_KEY_IS_EXTERNAL),
        channels=_optional_int(data, STREAM_KEY_CHANNELS),
        sample_rate=_optional_int(data, STREAM_KEY_SAMPLE_RATE),
        bit_rate=_optional_int(data, STREAM_KEY_BIT_RATE),
        width=_optional_int(data, STREAM_KEY_WIDTH),
        height=_optional_int(data, STREAM_KEY_HEIGHT),
        delivery_url=data.get(STREAM_KEY_DELIVERY_URL),
    )


def parse_media_source(data: dict[str, Any]) -> CandidateSource:
    """Parse a Jellyfin MediaSourceInfo object."""
    data = _require_mapping(data, "media source")
    streams = data.get(SOURCE_KEY_MEDIA_STREAMS) or []
    if not isinstance(streams, list):
        raise InvalidDataError("MediaStreams is not a list")
    return CandidateSource(
        id=_optional_str(data, SOURCE_KEY_ID),
        live_stream_id=_optional_str(data, SOURCE_KEY_LIVE_STREAM_ID),
        name=data.get(SOURCE_KEY_NAME),
        protocol=MediaProtocol(data.get(SOURCE_KEY_PROTOCOL) or MediaProtocol.FILE),
        container=data.get(SOURCE_KEY_CONTAINER),
        path=data.get(SOURCE_KEY_PATH),
        run_time_ticks=_optional_int(data, SOURCE_KEY_RUN_TIME_TICKS),
        bitrate=_optional_int(data, SOURCE_KEY_BITRATE),
        is_remote=_bool(data, SOURCE_KEY_IS_REMOTE),
        supports_direct_play=_bool(data, SOURCE_KEY_SUPPORTS_DIRECT_PLAY),
        supports_direct_stream=_bool(data, SOURCE_KEY_SUPPORTS_DIRECT_STREAM),
        supports_transcoding=_bool(data, SOURCE_KEY_SUPPORTS_TRANSCODING),
        transcoding_url=data.get(SOURCE_KEY_TRANSCODING_URL),
        default_audio_stream_index=_optional_int(data, SOURCE_KEY_DEFAULT_AUDIO_STREAM_INDEX),
        default_subtitle_stream_index=_optional_int(
            data, SOURCE_KEY_DEFAULT_SUBTITLE_STREAM_INDEX
        ),
        media_streams=tuple(parse_media_stream(x) for x in streams),
    )


def parse_playback_info(data: dict[str, Any]) -> PlaybackInfoResponse:
    """Parse a Jellyfin PlaybackInfoResponse object."""
    data = _require_mapping(data, "playback info")
    sources = data.get(RESPONSE_KEY_MEDIA_SOURCES) or []
    if not isinstance(sources, list):
        raise InvalidDataError("MediaSources is not a list")
    return PlaybackInfoResponse(
        play_session_id=data.get(RESPONSE_KEY_PLAY_SESSION_ID),
        media_sources=tuple(parse_media_source(x) for x in sources),
        error_code=data.get(RESPONSE_KEY_ERROR_CODE),
    )


def parse_item_metadata(data: dict[str, Any]) -> ItemMetadata:
    """Parse the descriptive fields of a Jellyfin BaseItemDto object."""
    data = _require_mapping(data, "item")
    image_tags = data.get(ITEM_KEY_IMAGE_TAGS) or {}
    genres = data.get(ITEM_KEY_GENRES) or []
    if not isinstance(genres, list) or not all(isinstance(x, str) for x in genres):
        raise InvalidDataError(f"Invalid value for {ITEM_KEY_GENRES}: {genres!r}")
    return ItemMetadata(
        id=data.get(ITEM_KEY_ID),
        name=data.get(ITEM_KEY_NAME),
        type=data.get(ITEM_KEY_TYPE),
        overview=data.get(ITEM_KEY_OVERVIEW),
        series_name=data.get(ITEM_KEY_SERIES_NAME),
        season_number=_optional_int(data, ITEM_KEY_PARENT_INDEX_NUMBER),
        episode_number=_optional_int(data, ITEM_KEY_INDEX_NUMBER),
        production_year=_optional_int(data, ITEM_KEY_PRODUCTION_YEAR),
        run_time_ticks=_optional_int(data, ITEM_KEY_RUN_TIME_TICKS),
        primary_image_tag=image_tags.get(IMAGE_TYPE_PRIMARY)
        if isinstance(image_tags, dict)
        else None,
        genres=tuple(genres),
    )
