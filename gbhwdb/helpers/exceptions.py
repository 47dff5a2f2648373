"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Keep exceptions simple and focused.
- No I/O, no config loading, no complex logic.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gbhwdb.helpers.dto.page_dto import RunSummary


class GbhwdbError(Exception):
    """Base class for errors that abort a run with a user-facing message."""


class ConfigurationError(GbhwdbError):
    """Raised when the game/layout configuration cannot be loaded or is invalid."""


class DataIntegrityError(GbhwdbError):
    """Raised when the submission corpus is inconsistent.

    The corpus is curated, so these are never masked: the run aborts and the
    offending submission is named in the message.
    """

    def __init__(self, message: str, submission: str | None = None) -> None:
        super().__init__(message)
        self.submission = submission


class MissingGameTypeError(DataIntegrityError):
    """Raised when a raw submission has no (or an empty) `type`."""


class PhotoNotFoundError(DataIntegrityError):
    """Raised when a submission references a photo that does not exist on disk."""

    def __init__(self, message: str, submission: str | None = None, path: str | None = None) -> None:
        super().__init__(message, submission)
        self.path = path


class MissingGameConfigError(DataIntegrityError):
    """Raised when a submission without mapper metadata has no resolvable game layout."""


class PageRenderError(GbhwdbError):
    """Raised after page writing when at least one page failed.

    Carries the run summary so callers can still report what was written.
    """

    def __init__(self, message: str, summary: RunSummary) -> None:
        super().__init__(message)
        self.summary = summary
