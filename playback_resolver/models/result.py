"""Result values returned by the resolver instead of raised exceptions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar

from music_assistant_models.errors import MusicAssistantError

_T = TypeVar("_T")
_E = TypeVar("_E")


class ResolutionFailedError(MusicAssistantError):
    """Raised when a failed resolution result is unwrapped."""

    def __init__(self, error: ResolutionError) -> None:
        """Initialize the error from the failure value."""
        super().__init__(error.message)
        self.error = error


@dataclass(frozen=True)
class UnsupportedContent:
    """The server is reachable but cannot provide a playable source for the item."""

    cause: BaseException | None = None
    reason: str | None = None

    @property
    def message(self) -> str:
        """Return a human readable description of the failure."""
        msg = "Unsupported content"
        if self.reason:
            msg += f": {self.reason}"
        if self.cause is not None:
            msg += f" ({self.cause})"
        return msg


@dataclass(frozen=True)
class NetworkFailure:
    """The playback info request could not be completed."""

    cause: BaseException

    @property
    def message(self) -> str:
        """Return a human readable description of the failure."""
        return f"Network failure: {self.cause!r}"


ResolutionError = UnsupportedContent | NetworkFailure


@dataclass(frozen=True)
class Success(Generic[_T]):
    """A successful result."""

    value: _T

    def unwrap(self) -> _T:
        """Return the value."""
        return self.value


@dataclass(frozen=True)
class Failure(Generic[_E]):
    """A failed result, containing the error."""

    error: _E

    def unwrap(self) -> NoReturn:
        """Raise the contained error as exception."""
        if isinstance(self.error, UnsupportedContent | NetworkFailure):
            raise ResolutionFailedError(self.error) from self.error.cause
        raise MusicAssistantError(str(self.error))


Result = Success[_T] | Failure[_E]
