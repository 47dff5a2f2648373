"""
DTOs for the game and board layout configuration.

MapperId, GamePlatform and ChipRole are closed sets; they are never extended
at runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MapperId(str, Enum):
    """Canonical memory bank controller identifiers."""

    MBC1 = "mbc1"
    MBC2 = "mbc2"
    MBC3 = "mbc3"
    MBC30 = "mbc30"
    MBC5 = "mbc5"
    MBC6 = "mbc6"
    MBC7 = "mbc7"
    MMM01 = "mmm01"
    HUC1 = "huc1"
    HUC3 = "huc3"
    TAMA5 = "tama5"
    # Sentinel: the game's hardware has no controller chip at all
    NO_MAPPER = "no-mapper"

    def __str__(self) -> str:
        return self.value


class GamePlatform(str, Enum):
    """Platform a game was released for."""

    GB = "gb"
    GBC = "gbc"
    GBA = "gba"

    @property
    def display_name(self) -> str:
        return self.value.upper()


class ChipRole(str, Enum):
    """Role of a chip position on a cartridge board."""

    UNKNOWN = "unknown"
    ROM = "rom"
    MAPPER = "mapper"
    RAM = "ram"
    RAM_BACKUP = "ram_backup"
    CRYSTAL = "crystal"
    FLASH = "flash"
    EEPROM = "eeprom"
    ACCELEROMETER = "accelerometer"
    LINE_DECODER = "line_decoder"
    TAMA = "tama"
    HEX_INVERTER = "hex_inverter"


@dataclass(frozen=True)
class LayoutChip:
    """One chip position of a layout, e.g. U2 -> mapper."""

    designator: str  # "U1".."U7", "X1"
    role: ChipRole

    @property
    def key(self) -> str:
        """Role key used by templates and classification ("rom", "mapper", ...)."""
        return self.role.value


@dataclass(frozen=True)
class LayoutConfig:
    """Ordered chip roles of one board layout."""

    id: str
    chips: tuple[LayoutChip, ...]

    def has_role(self, role: ChipRole) -> bool:
        return any(chip.role == role for chip in self.chips)


@dataclass(frozen=True)
class GameConfig:
    """Static per-game configuration."""

    type: str  # game identifier, e.g. "tetris"
    name: str  # display name, e.g. "Tetris"
    platform: GamePlatform
    layouts: tuple[str, ...]  # layout ids, first entry is the canonical one

    def first_layout(self) -> str | None:
        return self.layouts[0] if self.layouts else None
