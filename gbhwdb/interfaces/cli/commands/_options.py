"""
Shared option handling: CLI arguments become ConfigService overrides.
"""

from __future__ import annotations

import argparse
from typing import Any

from gbhwdb.services.config_svc import ConfigService

# argparse dest -> config key
_OPTION_KEYS = {
    "data": "data_path",
    "games": "games_path",
    "layouts": "layouts_path",
    "output": "output_dir",
    "photo_root": "photo_root",
    "workers": "render_workers",
    "log_level": "log_level",
}


def config_from_args(args: argparse.Namespace) -> ConfigService:
    """Build a ConfigService whose overrides are the options given on the command line."""
    overrides: dict[str, Any] = {}
    for dest, key in _OPTION_KEYS.items():
        value = getattr(args, dest, None)
        if value is not None:
            overrides[key] = value
    if getattr(args, "lenient", False):
        overrides["strict_game_config"] = False
    return ConfigService(overrides=overrides)
