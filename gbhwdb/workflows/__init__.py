"""
Workflows package.
"""

from .site.build_site_wf import build_cartridge_pages, build_site_workflow, check_game_configs

__all__ = [
    "build_cartridge_pages",
    "build_site_workflow",
    "check_game_configs",
]
