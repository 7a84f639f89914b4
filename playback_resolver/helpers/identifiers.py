"""Formatting rules for the media source id sent with a playback info request.

Jellyfin matches the requested media source against the hex form of the item
id. When a dashed id (or no id at all) is sent, the server cannot match the
source and silently ignores the requested audio/subtitle stream indices.
Servers that match on the canonical form can use `canonical_source_id`.
"""

from __future__ import annotations

from collections.abc import Callable
from uuid import UUID

SourceIdFormatter = Callable[[UUID], str]


def strip_separators(item_id: UUID) -> str:
    """Return the item id without separator characters."""
    return item_id.hex


def canonical_source_id(item_id: UUID) -> str:
    """Return the item id in its canonical (dashed) string form."""
    return str(item_id)


def get_source_id_formatter(strip: bool = True) -> SourceIdFormatter:
    """Return the formatter to use for the given configuration."""
    return strip_separators if strip else canonical_source_id
