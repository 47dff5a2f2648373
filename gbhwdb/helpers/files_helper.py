"""Photo file resolution utilities.

Pure utility functions for:
- Resolving a photo path (optionally against a photo root)
- Reading filesystem stats for hydration

These are stateless helpers that only depend on the standard library.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

from gbhwdb.helpers.dto.submission_dto import PhotoStats

PhotoResolver = Callable[[str], PhotoStats | None]


def resolve_photo(path: str, root: str | Path | None = None) -> PhotoStats | None:
    """Stat a photo file.

    Args:
        path: Photo path as referenced by the submission
        root: Directory that relative paths are resolved against (cwd if None)

    Returns:
        PhotoStats, or None if the path does not exist or is not a regular file

    """
    if not path:
        return None
    file_path = Path(path)
    if root is not None and not file_path.is_absolute():
        file_path = Path(root) / file_path
    try:
        stat = file_path.stat()
    except (FileNotFoundError, NotADirectoryError):
        return None
    if not file_path.is_file():
        return None
    if not os.access(file_path, os.R_OK):
        return None
    return PhotoStats(size=stat.st_size, modified_time=stat.st_mtime)


def make_photo_resolver(root: str | Path | None = None) -> PhotoResolver:
    """Return a resolver bound to a photo root directory."""

    def _resolve(path: str) -> PhotoStats | None:
        return resolve_photo(path, root)

    return _resolve
