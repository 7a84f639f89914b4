"""Various helpers for the playback resolver."""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING
from uuid import UUID

from playback_resolver.constants import TICKS_PER_MICROSECOND, VERBOSE_LOG_LEVEL

if TYPE_CHECKING:
    import logging


def log_verbose(logger: logging.Logger, message: str, *args: object) -> None:
    """Log a message at VERBOSE level, skipping the formatting when disabled."""
    if logger.isEnabledFor(VERBOSE_LOG_LEVEL):
        logger.log(VERBOSE_LOG_LEVEL, message, *args)


def parse_uuid(value: object) -> UUID | None:
    """Parse a UUID in either dashed or dashless form, None when it is not a UUID."""
    if not value or not isinstance(value, str):
        return None
    try:
        return UUID(value)
    except ValueError:
        return None


def to_ticks(value: timedelta) -> int:
    """Convert a timedelta into whole 100ns ticks."""
    return (value // timedelta(microseconds=1)) * TICKS_PER_MICROSECOND


def from_ticks(ticks: int | None) -> timedelta | None:
    """Convert 100ns ticks into a timedelta."""
    if ticks is None:
        return None
    return timedelta(microseconds=ticks // TICKS_PER_MICROSECOND)
