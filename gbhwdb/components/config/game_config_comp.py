"""Configuration store component: game configs and board layouts.

Game configs come from the curated games JSON file (type -> name, platform,
layouts). Board layouts are built in; an optional YAML file can add more.
The store is read-only after construction and can be shared freely between
threads.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from gbhwdb.helpers.dto.config_dto import ChipRole, GameConfig, GamePlatform, LayoutChip, LayoutConfig
from gbhwdb.helpers.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

R = ChipRole

# Chip roles by designator, in board order
BUILTIN_LAYOUTS: dict[str, tuple[tuple[str, ChipRole], ...]] = {
    "rom": (("U1", R.ROM),),
    "rom_mapper": (("U1", R.ROM), ("U2", R.MAPPER)),
    "rom_mapper_ram": (("U1", R.ROM), ("U2", R.MAPPER), ("U3", R.RAM), ("U4", R.RAM_BACKUP)),
    "rom_mapper_ram_xtal": (
        ("U1", R.ROM),
        ("U2", R.MAPPER),
        ("U3", R.RAM),
        ("U4", R.RAM_BACKUP),
        ("X1", R.CRYSTAL),
    ),
    "mbc2": (("U1", R.ROM), ("U2", R.MAPPER), ("U3", R.RAM_BACKUP)),
    "mbc6": (("U1", R.MAPPER), ("U2", R.ROM), ("U3", R.FLASH), ("U4", R.RAM), ("U5", R.RAM_BACKUP)),
    "mbc7": (("U1", R.MAPPER), ("U2", R.ROM), ("U3", R.EEPROM), ("U4", R.ACCELEROMETER)),
    "type_15": (
        ("U1", R.ROM),
        ("U2", R.MAPPER),
        ("U3", R.RAM),
        ("U4", R.RAM_BACKUP),
        ("U5", R.ROM),
        ("U6", R.LINE_DECODER),
    ),
    "huc3": (
        ("U1", R.ROM),
        ("U2", R.MAPPER),
        ("U3", R.RAM),
        ("U4", R.RAM_BACKUP),
        ("U5", R.HEX_INVERTER),
        ("X1", R.CRYSTAL),
    ),
    "tama": (
        ("U1", R.TAMA),
        ("U2", R.TAMA),
        ("U3", R.TAMA),
        ("U4", R.UNKNOWN),
        ("U5", R.RAM_BACKUP),
        ("X1", R.CRYSTAL),
    ),
}

# PCB board family -> layout id
BOARD_LAYOUTS: dict[str, str] = {
    "0200309E4-01": "tama",
    "AAAC S": "rom",
    "CGB-A32": "mbc6",
    "DMG-A02": "rom_mapper_ram",
    "DMG-A03": "rom_mapper_ram",
    "DMG-A04": "rom_mapper_ram",
    "DMG-A06": "rom_mapper_ram",
    "DMG-A07": "rom_mapper",
    "DMG-A08": "rom_mapper_ram",
    "DMG-A09": "rom_mapper",
    "DMG-A10": "rom_mapper",
    "DMG-A11": "rom_mapper_ram",
    "DMG-A12": "rom_mapper_ram",
    "DMG-A13": "rom_mapper",
    "DMG-A14": "rom_mapper_ram",
    "DMG-A15": "type_15",
    "DMG-A16": "rom_mapper_ram",
    "DMG-A18": "rom_mapper",
    "DMG-A40": "mbc7",
    "DMG-A47": "mbc7",
    "DMG-AAA": "rom",
    "DMG-BBA": "rom_mapper",
    "DMG-BCA": "rom_mapper",
    "DMG-BEAN": "rom_mapper",
    "DMG-BEAN(K)": "rom_mapper",
    "DMG-BFAN": "rom_mapper",
    "DMG-DECN": "rom_mapper_ram",
    "DMG-DECN(K)": "rom_mapper_ram",
    "DMG-DEDN": "rom_mapper_ram",
    "DMG-DFCN": "rom_mapper_ram",
    "DMG-DGCU": "rom_mapper_ram",
    "DMG-GDAN": "mbc2",
    "DMG-KECN": "rom_mapper_ram_xtal",
    "DMG-KFCN": "rom_mapper_ram_xtal",
    "DMG-KFDN": "rom_mapper_ram_xtal",
    "DMG-KGDU": "rom_mapper_ram_xtal",
    "DMG-LFDN": "rom_mapper_ram",
    "DMG-M-BFAN": "rom_mapper",
    "DMG-MC-DFCN": "rom_mapper_ram",
    "DMG-MC-SFCN": "rom_mapper_ram",
    "DMG-MHEU": "rom_mapper_ram_xtal",
    "DMG-TEDN": "rom_mapper_ram",
    "DMG-TFDN": "rom_mapper_ram",
    "DMG-UEDT": "huc3",
    "DMG-UFDT": "huc3",
    "DMG-UGDU": "huc3",
    "DMG-Z01": "rom_mapper_ram",
    "DMG-Z02": "rom_mapper_ram",
    "DMG-Z03": "rom_mapper_ram",
    "DMG-Z04": "rom_mapper_ram",
}


def layout_from_board_label(label: str) -> str | None:
    """
    Map a PCB label to its layout id.

    The trailing "-<revision>" is stripped first ("DMG-BEAN-02" -> "DMG-BEAN");
    if that is not a known board family the full label is tried.

    Args:
        label: Board label as printed on the PCB

    Returns:
        Layout id, or None for unknown boards
    """
    pos = label.rfind("-")
    if pos != -1:
        layout = BOARD_LAYOUTS.get(label[:pos])
        if layout is not None:
            return layout
    return BOARD_LAYOUTS.get(label)


def _make_layout(layout_id: str, chips: tuple[tuple[str, ChipRole], ...]) -> LayoutConfig:
    return LayoutConfig(
        id=layout_id,
        chips=tuple(LayoutChip(designator=designator, role=role) for designator, role in chips),
    )


def builtin_layouts() -> dict[str, LayoutConfig]:
    return {layout_id: _make_layout(layout_id, chips) for layout_id, chips in BUILTIN_LAYOUTS.items()}


class ConfigurationStore:
    """
    Read-only lookup of game configs and layouts for one run.

    Example:
        >>> store = ConfigurationStore(games={"tetris": tetris_cfg}, layouts=builtin_layouts())
        >>> store.first_layout("tetris").id
        'rom'
    """

    def __init__(self, games: dict[str, GameConfig], layouts: dict[str, LayoutConfig]) -> None:
        self._games = dict(games)
        self._layouts = dict(layouts)

    def game_config(self, game_type: str) -> GameConfig | None:
        return self._games.get(game_type)

    def layout(self, layout_id: str) -> LayoutConfig | None:
        return self._layouts.get(layout_id)

    def first_layout(self, game_type: str) -> LayoutConfig | None:
        """Layout of the game's first configured layout id, if everything resolves."""
        cfg = self.game_config(game_type)
        if cfg is None:
            return None
        layout_id = cfg.first_layout()
        if layout_id is None:
            return None
        return self.layout(layout_id)

    def games(self) -> dict[str, GameConfig]:
        return dict(self._games)

    def layout_ids(self) -> list[str]:
        return list(self._layouts)


def _parse_game_config(game_type: str, raw: Any, layouts: dict[str, LayoutConfig]) -> GameConfig:
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Game config for {game_type!r} must be an object")
    name = raw.get("name")
    if not name:
        raise ConfigurationError(f"Game config for {game_type!r} has no name")
    try:
        platform = GamePlatform(raw.get("platform", "gb"))
    except ValueError as e:
        raise ConfigurationError(f"Game config for {game_type!r} has unknown platform {raw.get('platform')!r}") from e
    layout_ids = tuple(raw.get("layouts") or ())
    for layout_id in layout_ids:
        if layout_id not in layouts:
            raise ConfigurationError(f"Game config for {game_type!r} references unknown layout {layout_id!r}")
    return GameConfig(type=game_type, name=str(name), platform=platform, layouts=layout_ids)


def load_game_configs(path: str | Path, layouts: dict[str, LayoutConfig] | None = None) -> dict[str, GameConfig]:
    """
    Load the games JSON file.

    Format: {"<type>": {"name": "...", "platform": "gb|gbc|gba", "layouts": ["rom", ...]}}

    Raises:
        ConfigurationError: If the file is missing, malformed, or references unknown layouts
    """
    layouts = layouts if layouts is not None else builtin_layouts()
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Game config file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Game config file is not valid JSON: {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigurationError(f"Game config file must contain an object: {path}")

    return {game_type: _parse_game_config(game_type, cfg, layouts) for game_type, cfg in raw.items()}


def load_extra_layouts(path: str | Path) -> dict[str, LayoutConfig]:
    """
    Load additional layouts from YAML.

    Format:
        my_layout:
          U1: rom
          U2: mapper
    """
    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except FileNotFoundError as e:
        raise ConfigurationError(f"Layout file not found: {path}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Layout file is not valid YAML: {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigurationError(f"Layout file must contain a mapping: {path}")

    layouts: dict[str, LayoutConfig] = {}
    for layout_id, chips in raw.items():
        if not isinstance(chips, dict):
            raise ConfigurationError(f"Layout {layout_id!r} must map designators to roles")
        try:
            entries = tuple((str(designator), ChipRole(role)) for designator, role in chips.items())
        except ValueError as e:
            raise ConfigurationError(f"Layout {layout_id!r}: {e}") from e
        layouts[str(layout_id)] = _make_layout(str(layout_id), entries)
    return layouts


def load_configuration_store(
    games_path: str | Path,
    extra_layouts_path: str | Path | None = None,
) -> ConfigurationStore:
    """Build the store from the games file, built-in layouts and optional extra layouts."""
    layouts = builtin_layouts()
    if extra_layouts_path:
        extra = load_extra_layouts(extra_layouts_path)
        logger.info(f"[config] Loaded {len(extra)} extra layouts from {extra_layouts_path}")
        layouts.update(extra)

    games = load_game_configs(games_path, layouts)
    store = ConfigurationStore(games=games, layouts=layouts)
    logger.info(f"[config] Loaded {len(games)} game configs from {games_path} ({len(store.layout_ids())} layouts)")
    return store
