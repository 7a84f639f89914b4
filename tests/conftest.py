"""Fixtures for testing the playback resolver."""

import logging
import pathlib
from collections.abc import Awaitable, Callable
from typing import Any
from unittest.mock import AsyncMock, Mock
from uuid import UUID

import aiofiles
import pytest

from playback_resolver.helpers.json import json_loads
from playback_resolver.models import (
    CandidateSource,
    ItemMetadata,
    MediaStream,
    MediaStreamType,
    PlaybackInfoResponse,
)

FIXTURES_DIR = pathlib.Path(__file__).parent / "jellyfin" / "fixtures"

ITEM_ID = UUID("7f1c3bd4-2a2e-4c0f-9a51-0bd1e8d1f6c3")
OTHER_ID = UUID("0b5c8e2f-7d9a-4e61-b3c2-a1f0e9d8c7b6")
PLAY_SESSION_ID = "b3a9c0f4e2d14f0a8c6e9d7b5a3f1e2c"


@pytest.fixture(name="caplog")
def caplog_fixture(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Set log level to debug for tests using the caplog fixture."""
    caplog.set_level(logging.DEBUG)
    return caplog


@pytest.fixture
def load_fixture() -> Callable[[str], Awaitable[dict[str, Any]]]:
    """Return a loader for the json fixtures of the Jellyfin API."""

    async def _load(name: str) -> dict[str, Any]:
        async with aiofiles.open(FIXTURES_DIR / name) as fp:
            data: dict[str, Any] = json_loads(await fp.read())
        return data

    return _load


@pytest.fixture
def candidate() -> CandidateSource:
    """Return the media source belonging to ITEM_ID."""
    return CandidateSource(
        id=ITEM_ID.hex,
        name="Big Buck Bunny",
        container="mkv",
        run_time_ticks=5964160000,
        default_audio_stream_index=1,
        media_streams=(
            MediaStream(index=0, type=MediaStreamType.VIDEO, codec="h264"),
            MediaStream(index=1, type=MediaStreamType.AUDIO, codec="aac", language="eng"),
            MediaStream(index=2, type=MediaStreamType.AUDIO, codec="ac3", language="ger"),
            MediaStream(index=3, type=MediaStreamType.SUBTITLE, codec="subrip"),
        ),
    )


@pytest.fixture
def item_metadata() -> ItemMetadata:
    """Return the library metadata belonging to ITEM_ID."""
    return ItemMetadata(id=ITEM_ID.hex, name="Big Buck Bunny", type="Movie", production_year=2008)


@pytest.fixture
def transport_mock(candidate: CandidateSource, item_metadata: ItemMetadata) -> Mock:
    """Return a mock transport answering with a single playable media source."""
    transport = Mock()
    transport.post_playback_info = AsyncMock(
        return_value=PlaybackInfoResponse(
            play_session_id=PLAY_SESSION_ID,
            media_sources=(candidate,),
        )
    )
    transport.get_item_metadata = AsyncMock(return_value=item_metadata)
    return transport
