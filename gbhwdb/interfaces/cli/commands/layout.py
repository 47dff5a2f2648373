"""
Layout command: show the chip roles of a PCB board label.
"""

from __future__ import annotations

import argparse

from gbhwdb.components.config.game_config_comp import (
    ConfigurationStore,
    builtin_layouts,
    layout_from_board_label,
    load_extra_layouts,
)
from gbhwdb.helpers.exceptions import GbhwdbError
from gbhwdb.interfaces.cli.ui import TableDisplay, print_error, print_info


def cmd_layout(args: argparse.Namespace) -> int:
    layouts = builtin_layouts()
    try:
        if getattr(args, "layouts", None):
            layouts.update(load_extra_layouts(args.layouts))
    except GbhwdbError as e:
        print_error(str(e))
        return 1
    store = ConfigurationStore(games={}, layouts=layouts)

    label = args.label.strip()
    layout_id = layout_from_board_label(label)
    if layout_id is None:
        print_error(f"Unknown board label: {label}")
        print_info(f"Known layouts: {', '.join(store.layout_ids())}")
        return 1

    layout = store.layout(layout_id)
    if layout is None:
        print_error(f"Board {label} maps to layout {layout_id}, which is not defined")
        return 1
    TableDisplay.show_layout(label, layout)
    return 0
