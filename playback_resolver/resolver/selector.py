"""Pick the media source to play from the candidates returned by the server."""

from __future__ import annotations

from typing import TYPE_CHECKING

from playback_resolver.helpers.util import parse_uuid

if TYPE_CHECKING:
    from collections.abc import Sequence
    from uuid import UUID

    from playback_resolver.models import CandidateSource


def select_source(
    candidates: Sequence[CandidateSource], item_id: UUID
) -> CandidateSource | None:
    """
    Return the candidate that represents the item itself, else the first candidate.

    The server order is only used as a deterministic tie-break, not as a ranking.
    """
    for candidate in candidates:
        if parse_uuid(candidate.id) == item_id:
            return candidate
    return candidates[0] if candidates else None
