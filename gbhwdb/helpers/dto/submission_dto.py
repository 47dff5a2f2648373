"""Submission DTOs - one community contribution about one physical cartridge.

This module defines:
- PhotoStats: filesystem metadata attached to a photo during hydration
- Photo: one photo slot entry (path + slot kind, stats once hydrated)
- MapperMetadata / BoardMetadata / CartridgeMetadata: submitted board details
- CartridgePhotos: the three canonical photo slots
- CartridgeSubmission: the full record

All DTOs are frozen. Hydration never mutates a submission, it returns a copy
with photo stats filled in; identity fields never change.

Usage:
    from gbhwdb.helpers.dto.submission_dto import CartridgeSubmission

    submission = CartridgeSubmission.from_raw(raw_record, index=0)
    submission.mapper_kind()  # "MBC1B" or None
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Literal

PhotoSlot = Literal["front", "pcbFront", "pcbBack"]

# Canonical slot order (matches the builder's JSON keys)
PHOTO_SLOTS: tuple[PhotoSlot, ...] = ("front", "pcbFront", "pcbBack")


@dataclass(frozen=True)
class PhotoStats:
    """Filesystem metadata of a photo file."""

    size: int  # bytes
    modified_time: float  # POSIX timestamp


@dataclass(frozen=True)
class Photo:
    """A photo reference. `stats` is None until hydrated."""

    path: str
    kind: PhotoSlot
    stats: PhotoStats | None = None

    def is_hydrated(self) -> bool:
        return self.stats is not None


@dataclass(frozen=True)
class MapperMetadata:
    """Mapper chip details as submitted (kind is a free-form revision string)."""

    kind: str | None = None  # e.g. "MBC1B1"
    label: str | None = None  # chip label text, e.g. "DMG MBC1B1 Nintendo"
    attributes: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_raw(cls, raw: dict[str, Any]) -> MapperMetadata:
        extra = {k: v for k, v in raw.items() if k not in ("kind", "label")}
        return cls(kind=raw.get("kind") or None, label=raw.get("label") or None, attributes=extra)


@dataclass(frozen=True)
class BoardMetadata:
    """PCB details; `type` is the board label, e.g. "DMG-BEAN-02"."""

    type: str | None = None
    mapper: MapperMetadata | None = None
    attributes: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_raw(cls, raw: dict[str, Any]) -> BoardMetadata:
        mapper_raw = raw.get("mapper")
        extra = {k: v for k, v in raw.items() if k not in ("type", "mapper")}
        return cls(
            type=raw.get("type") or None,
            mapper=MapperMetadata.from_raw(mapper_raw) if isinstance(mapper_raw, dict) else None,
            attributes=extra,
        )


@dataclass(frozen=True)
class CartridgeMetadata:
    board: BoardMetadata = field(default_factory=BoardMetadata)
    attributes: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_raw(cls, raw: dict[str, Any]) -> CartridgeMetadata:
        board_raw = raw.get("board")
        extra = {k: v for k, v in raw.items() if k != "board"}
        return cls(
            board=BoardMetadata.from_raw(board_raw) if isinstance(board_raw, dict) else BoardMetadata(),
            attributes=extra,
        )


@dataclass(frozen=True)
class CartridgePhotos:
    """The three canonical photo slots, each optional."""

    front: Photo | None = None
    pcb_front: Photo | None = None
    pcb_back: Photo | None = None

    def get(self, slot: PhotoSlot) -> Photo | None:
        return getattr(self, _SLOT_FIELDS[slot])

    def present(self) -> list[tuple[PhotoSlot, Photo]]:
        """Present slots in canonical order."""
        result: list[tuple[PhotoSlot, Photo]] = []
        for slot in PHOTO_SLOTS:
            photo = self.get(slot)
            if photo is not None:
                result.append((slot, photo))
        return result

    def replace_slot(self, slot: PhotoSlot, photo: Photo | None) -> CartridgePhotos:
        return replace(self, **{_SLOT_FIELDS[slot]: photo})

    @classmethod
    def from_raw(cls, raw: dict[str, Any]) -> CartridgePhotos:
        photos: dict[str, Photo | None] = {}
        for slot in PHOTO_SLOTS:
            entry = raw.get(slot)
            if isinstance(entry, str):
                entry = {"path": entry}
            photos[_SLOT_FIELDS[slot]] = Photo(path=str(entry.get("path") or ""), kind=slot) if entry else None
        return cls(**photos)


_SLOT_FIELDS: dict[str, str] = {
    "front": "front",
    "pcbFront": "pcb_front",
    "pcbBack": "pcb_back",
}


@dataclass(frozen=True)
class CartridgeSubmission:
    """
    One community contribution about one physical cartridge.

    Attributes:
        type: Game identifier, key into the configuration store (e.g. "tetris")
        index: Position in the input batch (stable identity for ordering/errors)
        title: Submission title, if provided
        slug: Submission slug (used in URLs), if provided
        contributor: Contributor name, if provided
        metadata: Submitted board metadata
        photos: The three photo slots
    """

    type: str
    index: int
    title: str | None = None
    slug: str | None = None
    contributor: str | None = None
    metadata: CartridgeMetadata = field(default_factory=CartridgeMetadata)
    photos: CartridgePhotos = field(default_factory=CartridgePhotos)

    def mapper_kind(self) -> str | None:
        mapper = self.metadata.board.mapper
        return mapper.kind if mapper is not None else None

    def display_id(self) -> str:
        """Human-readable identifier for log and error messages."""
        name = self.slug or self.title or "?"
        return f"#{self.index} {name} (type={self.type or '?'})"

    @classmethod
    def from_raw(cls, raw: dict[str, Any], index: int) -> CartridgeSubmission:
        """Build a submission from one record of the builder's JSON batch.

        The caller is responsible for validating `type` first.
        """
        metadata_raw = raw.get("metadata")
        photos_raw = raw.get("photos")
        return cls(
            type=str(raw.get("type") or ""),
            index=index,
            title=raw.get("title"),
            slug=raw.get("slug"),
            contributor=raw.get("contributor"),
            metadata=(
                CartridgeMetadata.from_raw(metadata_raw) if isinstance(metadata_raw, dict) else CartridgeMetadata()
            ),
            photos=CartridgePhotos.from_raw(photos_raw) if isinstance(photos_raw, dict) else CartridgePhotos(),
        )
