"""
Logging helpers: process-wide logging setup and the run warning collector.

Recoverable problems found during a run (e.g. unknown mapper revisions) are
recorded in a WarningCollector that is threaded through the pipeline and
returned with the run summary, so callers and tests can inspect them without
scraping log output. Every recorded warning is also logged.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = "INFO") -> None:
    """Configure logging once for the whole process."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)


class WarningCollector:
    """
    Ordered collection of run warnings.

    Example:
        >>> warnings = WarningCollector()
        >>> warnings.warn("Unsupported mapper type XYZ", logger=logger)
        >>> warnings.messages
        ['Unsupported mapper type XYZ']
    """

    def __init__(self) -> None:
        self._messages: list[str] = []

    def warn(self, message: str, logger: logging.Logger | None = None) -> None:
        self._messages.append(message)
        (logger or logging.getLogger(__name__)).warning(message)

    @property
    def messages(self) -> list[str]:
        return list(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __bool__(self) -> bool:
        return bool(self._messages)
