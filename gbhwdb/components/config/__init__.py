"""Configuration store components."""

from .game_config_comp import (
    BOARD_LAYOUTS,
    BUILTIN_LAYOUTS,
    ConfigurationStore,
    builtin_layouts,
    layout_from_board_label,
    load_configuration_store,
    load_extra_layouts,
    load_game_configs,
)

__all__ = [
    "BOARD_LAYOUTS",
    "BUILTIN_LAYOUTS",
    "ConfigurationStore",
    "builtin_layouts",
    "layout_from_board_label",
    "load_configuration_store",
    "load_extra_layouts",
    "load_game_configs",
]
