"""
Pytest fixtures and configuration for the test suite.

Strategy:
- Real configuration store built from the built-in layouts
- Real files under tmp_path for photos, batches and site output
- No mocks of the pipeline components themselves
"""

import json
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

# Add project root to path so tests can import gbhwdb package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from gbhwdb.components.config.game_config_comp import ConfigurationStore, builtin_layouts  # noqa: E402
from gbhwdb.helpers.dto.config_dto import GameConfig, GamePlatform  # noqa: E402
from gbhwdb.helpers.dto.submission_dto import CartridgeSubmission  # noqa: E402

# === GAME CONFIGURATION ===

GAMES_JSON: dict[str, dict[str, Any]] = {
    "tetris": {"name": "Tetris", "platform": "gb", "layouts": ["rom"]},
    "kirby-dream-land": {"name": "Kirby's Dream Land", "platform": "gb", "layouts": ["rom_mapper"]},
    "zelda-links-awakening": {
        "name": "The Legend of Zelda: Link's Awakening",
        "platform": "gb",
        "layouts": ["rom_mapper_ram"],
    },
    "pokemon-gold": {"name": "Pokemon Gold", "platform": "gbc", "layouts": ["rom_mapper_ram_xtal"]},
    "alleyway": {"name": "Alleyway", "platform": "gb", "layouts": ["rom"]},
    "no-layouts": {"name": "Layoutless Game", "platform": "gb", "layouts": []},
}


def _game_configs() -> dict[str, GameConfig]:
    return {
        game_type: GameConfig(
            type=game_type,
            name=cfg["name"],
            platform=GamePlatform(cfg["platform"]),
            layouts=tuple(cfg["layouts"]),
        )
        for game_type, cfg in GAMES_JSON.items()
    }


@pytest.fixture
def store() -> ConfigurationStore:
    """Configuration store with a handful of games and the built-in layouts."""
    return ConfigurationStore(games=_game_configs(), layouts=builtin_layouts())


@pytest.fixture
def games_file(tmp_path) -> Path:
    """GAMES_JSON written to disk."""
    path = tmp_path / "games.json"
    path.write_text(json.dumps(GAMES_JSON), encoding="utf-8")
    return path


# === SUBMISSIONS ===


def raw_submission(
    game_type: str | None,
    kind: str | None = None,
    slug: str | None = None,
    photos: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Raw record in the builder's JSON shape."""
    board: dict[str, Any] = {"type": "DMG-TEST-01"}
    if kind is not None:
        board["mapper"] = {"kind": kind, "label": f"{kind} Nintendo"}
    record: dict[str, Any] = {
        "slug": slug or f"{game_type}-submission",
        "title": f"{game_type} cartridge",
        "contributor": "tester",
        "metadata": {"board": board},
        "photos": {slot: {"path": path} for slot, path in (photos or {}).items()},
    }
    if game_type is not None:
        record["type"] = game_type
    return record


@pytest.fixture
def make_submission() -> Callable[..., CartridgeSubmission]:
    """Factory for parsed submissions: make_submission("tetris", kind="MBC1B", index=3)."""

    def _make(game_type: str, kind: str | None = None, index: int = 0, slug: str | None = None) -> CartridgeSubmission:
        return CartridgeSubmission.from_raw(raw_submission(game_type, kind=kind, slug=slug), index)

    return _make


@pytest.fixture
def photo_dir(tmp_path) -> Path:
    """Directory with three small photo files: front.jpg, pcb_front.jpg, pcb_back.jpg."""
    directory = tmp_path / "photos"
    directory.mkdir()
    for name in ("front.jpg", "pcb_front.jpg", "pcb_back.jpg"):
        (directory / name).write_bytes(b"\xff\xd8\xff fake jpeg " + name.encode())
    return directory


@pytest.fixture
def write_batch(tmp_path) -> Callable[[list[dict[str, Any]]], Path]:
    """Write a list of raw records as the submission batch file."""

    def _write(records: list[dict[str, Any]]) -> Path:
        path = tmp_path / "cartridges.json"
        path.write_text(json.dumps(records), encoding="utf-8")
        return path

    return _write


# === ENVIRONMENT ===


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run in an empty working directory with no GBHWDB_* variables set."""
    import os

    for key in list(os.environ):
        if key.startswith("GBHWDB_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


# === PYTEST MARKERS ===


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as a fast unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test (runs the whole pipeline)")
