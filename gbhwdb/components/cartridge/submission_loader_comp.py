"""Submission loader component.

Reads the builder-staged JSON batch, validates each raw record and hydrates
the three photo slots through a photo resolver.

Errors are fatal: a record without a game type or a photo that does not
exist means the curated corpus is broken, so the whole run aborts with the
offending submission named.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from pathlib import Path
from typing import Any

from gbhwdb.helpers.dto.submission_dto import PHOTO_SLOTS, CartridgeSubmission
from gbhwdb.helpers.exceptions import DataIntegrityError, MissingGameTypeError, PhotoNotFoundError
from gbhwdb.helpers.files_helper import PhotoResolver

logger = logging.getLogger(__name__)


def read_raw_submissions(path: str | Path) -> list[dict[str, Any]]:
    """Read the JSON batch file (a list of submission records)."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise DataIntegrityError(f"Submission batch not found: {path}") from e
    except json.JSONDecodeError as e:
        raise DataIntegrityError(f"Submission batch is not valid JSON: {path}: {e}") from e

    if not isinstance(data, list):
        raise DataIntegrityError(f"Submission batch must be a JSON list: {path}")
    return data


def _describe_raw(raw: Any, index: int) -> str:
    if isinstance(raw, dict):
        name = raw.get("slug") or raw.get("title")
        if name:
            return f"#{index} {name}"
    return f"#{index}"


def _check_record_fields(raw: dict[str, Any], description: str) -> None:
    """Reject photo slots and mapper kinds whose JSON type cannot be read."""
    photos = raw.get("photos")
    if isinstance(photos, dict):
        for slot in PHOTO_SLOTS:
            entry = photos.get(slot)
            if not entry or isinstance(entry, str):
                continue
            if not isinstance(entry, dict) or not isinstance(entry.get("path"), str):
                raise DataIntegrityError(
                    f"Submission {description} has a malformed {slot} photo", submission=description
                )

    metadata = raw.get("metadata")
    board = metadata.get("board") if isinstance(metadata, dict) else None
    mapper = board.get("mapper") if isinstance(board, dict) else None
    if isinstance(mapper, dict):
        kind = mapper.get("kind")
        if kind is not None and not isinstance(kind, str):
            raise DataIntegrityError(f"Submission {description} has a malformed mapper kind", submission=description)


def parse_submissions(raw_records: Sequence[Any]) -> list[CartridgeSubmission]:
    """
    Validate and parse raw records, preserving order.

    Raises:
        MissingGameTypeError: If a record has a missing or empty `type`
        DataIntegrityError: If a record is not an object, or a photo slot or
            mapper kind has the wrong JSON type
    """
    submissions: list[CartridgeSubmission] = []
    for index, raw in enumerate(raw_records):
        description = _describe_raw(raw, index)
        if not isinstance(raw, dict):
            raise DataIntegrityError(f"Submission {description} is not an object", submission=description)
        game_type = raw.get("type")
        if not isinstance(game_type, str) or not game_type.strip():
            raise MissingGameTypeError(f"Submission {description} has no game type", submission=description)
        _check_record_fields(raw, description)
        submissions.append(CartridgeSubmission.from_raw(raw, index))
    return submissions


def hydrate_submission(submission: CartridgeSubmission, resolver: PhotoResolver) -> CartridgeSubmission:
    """
    Return a copy of the submission with stats attached to every present photo.

    Photos that already carry stats are kept as they are, so hydrating twice
    stats each file once.

    Raises:
        PhotoNotFoundError: If a referenced photo cannot be resolved
    """
    photos = submission.photos
    for slot, photo in submission.photos.present():
        if photo.is_hydrated():
            continue
        stats = resolver(photo.path)
        if stats is None:
            raise PhotoNotFoundError(
                f"Submission {submission.display_id()} references missing {slot} photo: {photo.path}",
                submission=submission.display_id(),
                path=photo.path,
            )
        photos = photos.replace_slot(slot, replace(photo, stats=stats))
    return replace(submission, photos=photos)


def hydrate_submissions(
    submissions: Sequence[CartridgeSubmission],
    resolver: PhotoResolver,
    max_workers: int = 8,
) -> list[CartridgeSubmission]:
    """
    Hydrate all submissions, output order equal to input order.

    Hydration is I/O bound (file stats), so a bounded thread pool is used when
    max_workers > 1. The first failure propagates and aborts the run.
    """
    if max_workers <= 1 or len(submissions) <= 1:
        return [hydrate_submission(submission, resolver) for submission in submissions]

    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="hydrate") as executor:
        # Executor.map yields results in input order regardless of completion order
        return list(executor.map(lambda s: hydrate_submission(s, resolver), submissions))


def load_submissions(
    path: str | Path,
    resolver: PhotoResolver,
    max_workers: int = 8,
) -> list[CartridgeSubmission]:
    """Read, validate and hydrate the submission batch."""
    raw_records = read_raw_submissions(path)
    submissions = parse_submissions(raw_records)
    logger.info(f"[loader] Parsed {len(submissions)} submissions from {path}")
    hydrated = hydrate_submissions(submissions, resolver, max_workers=max_workers)
    photo_count = sum(len(s.photos.present()) for s in hydrated)
    logger.info(f"[loader] Hydrated {photo_count} photos")
    return hydrated
