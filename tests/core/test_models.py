"""Test the resolver models."""

from datetime import timedelta
from uuid import UUID

import pytest
from music_assistant_models.enums import ContentType
from music_assistant_models.errors import MusicAssistantError

from playback_resolver.models import (
    CandidateSource,
    Failure,
    MediaProtocol,
    MediaStream,
    MediaStreamType,
    NetworkFailure,
    PlaybackDetails,
    ResolutionFailedError,
    ResolutionRequest,
    Success,
    UnsupportedContent,
)

ITEM_ID = UUID("7f1c3bd4-2a2e-4c0f-9a51-0bd1e8d1f6c3")


def test_request_defaults() -> None:
    """Test the defaults of a ResolutionRequest."""
    request = ResolutionRequest(item_id=ITEM_ID)

    assert request.media_source_id is None
    assert request.device_profile is None
    assert request.auto_open_live_stream is True
    assert request.playback_details == PlaybackDetails()


def test_request_playback_details() -> None:
    """Test the playback details are taken from the request."""
    request = ResolutionRequest(
        item_id=ITEM_ID,
        start_time=timedelta(seconds=90),
        audio_stream_index=1,
        subtitle_stream_index=-1,
    )

    assert request.playback_details == PlaybackDetails(timedelta(seconds=90), 1, -1)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"max_streaming_bitrate": -1},
        {"max_streaming_bitrate": 0},
        {"start_time": timedelta(seconds=-1)},
    ],
)
def test_request_rejects_invalid_values(kwargs: dict[str, object]) -> None:
    """Test a request with impossible values cannot be created."""
    with pytest.raises(ValueError):
        ResolutionRequest(item_id=ITEM_ID, **kwargs)  # type: ignore[arg-type]


def test_request_to_dict() -> None:
    """Test a request can be serialized."""
    request = ResolutionRequest(item_id=ITEM_ID, media_source_id="abc", start_time=timedelta(0))

    data = request.to_dict()

    assert data["item_id"] == "7f1c3bd4-2a2e-4c0f-9a51-0bd1e8d1f6c3"
    assert data["media_source_id"] == "abc"
    assert ResolutionRequest.from_dict(data) == request


@pytest.mark.parametrize(
    ("container", "content_type"),
    [
        ("flac", ContentType.FLAC),
        ("aac,m4a", ContentType.AAC),
        (None, ContentType.UNKNOWN),
    ],
)
def test_candidate_content_type(container: str | None, content_type: ContentType) -> None:
    """Test the container is translated into a content type."""
    assert CandidateSource(id="x", container=container).content_type == content_type


def test_candidate_get_stream() -> None:
    """Test looking up a stream by index and type."""
    audio = MediaStream(index=1, type=MediaStreamType.AUDIO)
    source = CandidateSource(
        id="x", media_streams=(MediaStream(index=0, type=MediaStreamType.VIDEO), audio)
    )

    assert source.get_stream(1, MediaStreamType.AUDIO) is audio
    assert source.get_stream(0, MediaStreamType.AUDIO) is None
    assert source.get_stream(5, MediaStreamType.AUDIO) is None


def test_unknown_enum_values() -> None:
    """Test unknown server values fall back to UNKNOWN."""
    assert MediaStreamType("Attachment") == MediaStreamType.UNKNOWN
    assert MediaProtocol("Webrtc") == MediaProtocol.UNKNOWN


def test_success_unwrap() -> None:
    """Test unwrapping a success returns its value."""
    assert Success(42).unwrap() == 42


def test_failure_unwrap_network_failure() -> None:
    """Test unwrapping a failure raises with the original cause chained."""
    cause = TimeoutError("timed out")
    failure = Failure(NetworkFailure(cause))

    with pytest.raises(ResolutionFailedError) as exc_info:
        failure.unwrap()

    assert isinstance(exc_info.value, MusicAssistantError)
    assert exc_info.value.__cause__ is cause
    assert "Network failure" in str(exc_info.value)


def test_unsupported_content_message() -> None:
    """Test the failure messages contain the diagnostics."""
    assert UnsupportedContent().message == "Unsupported content"
    assert UnsupportedContent(reason="NotAllowed").message == "Unsupported content: NotAllowed"
    assert (
        UnsupportedContent(ValueError("Media source has no id")).message
        == "Unsupported content (Media source has no id)"
    )
