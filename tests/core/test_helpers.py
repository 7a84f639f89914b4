"""Tests for utility/helper functions."""

import logging
from datetime import timedelta
from uuid import UUID

import pytest
from aiohttp.hdrs import USER_AGENT

from playback_resolver.constants import APPLICATION_NAME, VERBOSE_LOG_LEVEL
from playback_resolver.helpers import identifiers, util
from playback_resolver.helpers.aiohttp_client import (
    ResolverClientResponse,
    create_clientsession,
    get_package_version,
)
from playback_resolver.helpers.json import json_dumps, json_loads

ITEM_ID = UUID("7f1c3bd4-2a2e-4c0f-9a51-0bd1e8d1f6c3")


def test_ticks_conversion() -> None:
    """Test converting between timedelta and 100ns ticks."""
    assert util.to_ticks(timedelta(0)) == 0
    assert util.to_ticks(timedelta(seconds=1)) == 10_000_000
    assert util.to_ticks(timedelta(minutes=5, microseconds=3)) == 3_000_000_030
    assert util.from_ticks(3_000_000_030) == timedelta(minutes=5, microseconds=3)
    assert util.from_ticks(None) is None


def test_parse_uuid() -> None:
    """Test parsing ids in the forms the server uses."""
    assert util.parse_uuid("7f1c3bd42a2e4c0f9a510bd1e8d1f6c3") == ITEM_ID
    assert util.parse_uuid("7f1c3bd4-2a2e-4c0f-9a51-0bd1e8d1f6c3") == ITEM_ID
    assert util.parse_uuid("7F1C3BD4-2A2E-4C0F-9A51-0BD1E8D1F6C3") == ITEM_ID
    assert util.parse_uuid("native_8f3c") is None
    assert util.parse_uuid("") is None
    assert util.parse_uuid(None) is None
    assert util.parse_uuid(123) is None
    assert util.parse_uuid([ITEM_ID.hex]) is None


def test_source_id_formatters() -> None:
    """Test the media source id formatting rules."""
    assert identifiers.strip_separators(ITEM_ID) == "7f1c3bd42a2e4c0f9a510bd1e8d1f6c3"
    assert identifiers.canonical_source_id(ITEM_ID) == "7f1c3bd4-2a2e-4c0f-9a51-0bd1e8d1f6c3"
    assert identifiers.get_source_id_formatter() is identifiers.strip_separators
    assert identifiers.get_source_id_formatter(strip=False) is identifiers.canonical_source_id


def test_log_verbose(caplog: pytest.LogCaptureFixture) -> None:
    """Test verbose messages are only logged when the level is enabled."""
    logger = logging.getLogger("playback_resolver.test")

    util.log_verbose(logger, "hidden %s", "message")
    assert "hidden message" not in caplog.text

    caplog.set_level(VERBOSE_LOG_LEVEL, logger="playback_resolver.test")
    util.log_verbose(logger, "shown %s", "message")
    assert "shown message" in caplog.text


def test_json_helpers() -> None:
    """Test the json helpers."""
    assert json_loads(json_dumps({"Index": 1, 2: "two"})) == {"Index": 1, "2": "two"}


async def test_create_clientsession() -> None:
    """Test the client session uses our user agent and response class."""
    session = create_clientsession()
    try:
        user_agent = session._default_headers[USER_AGENT]
        assert user_agent.startswith(f"{APPLICATION_NAME}/{get_package_version()} aiohttp/")
        assert session._response_class is ResolverClientResponse
    finally:
        await session.close()
