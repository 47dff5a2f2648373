"""
DTOs for site build operations.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class BuildSiteWorkflowParams:
    """Parameters for workflows/site/build_site_wf.py::build_site_workflow."""

    data_path: str  # builder-staged submission batch (JSON list)
    games_path: str  # games JSON (type -> name, platform, layouts)
    output_dir: str  # site output root
    photo_root: str | None = None  # relative photo paths resolve against this (cwd if None)
    layouts_path: str | None = None  # optional YAML with extra layouts
    hydration_workers: int = 8
    render_workers: int = 16
    strict_game_config: bool = True  # unresolvable layout without mapper metadata is fatal
