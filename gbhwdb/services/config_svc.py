#!/usr/bin/env python3
# ======================================================================
#  Config Service - Configuration loading and caching
#  - Loads config from YAML files and env vars
#  - Caches composed config for the lifetime of a run
#  - Builds workflow params from the composed config
# ======================================================================

from __future__ import annotations

import contextlib
import logging
import os
from typing import Any

import yaml

from gbhwdb.helpers.dto.site_dto import BuildSiteWorkflowParams

ENV_PREFIX = "GBHWDB_"
SYSTEM_CONFIG_PATH = "/etc/gbhwdb/config.yaml"


class ConfigService:
    """
    Service for loading and caching build configuration.

    Loads config from multiple sources (defaults → YAML → env → overrides),
    caches the result, and provides reload capability.
    """

    def __init__(self, overrides: dict[str, Any] | None = None) -> None:
        """Initialize ConfigService with empty cache and optional overrides."""
        self._config: dict[str, Any] | None = None
        self._overrides = dict(overrides or {})
        self._logger = logging.getLogger(__name__)

    def get_config(self, force_reload: bool = False) -> dict[str, Any]:
        """
        Get the composed configuration.

        Args:
            force_reload: If True, bypass cache and reload from sources

        Returns:
            Complete configuration dict
        """
        if self._config is None or force_reload:
            self._config = self._compose()
        return self._config

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dotted path.

        Example:
            >>> service.get("output_dir")
            'build/site'
            >>> service.get("site.title", "untitled")
            'untitled'
        """
        cfg = self.get_config()
        node: Any = cfg
        for part in key_path.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def reload(self) -> dict[str, Any]:
        """Force reload configuration from all sources."""
        self._logger.info("Reloading configuration from all sources")
        return self.get_config(force_reload=True)

    def make_build_params(self) -> BuildSiteWorkflowParams:
        """
        Build BuildSiteWorkflowParams from the current configuration.

        This is the boundary where raw config values are converted to the
        types the workflow expects.
        """
        cfg = self.get_config()
        return BuildSiteWorkflowParams(
            data_path=str(cfg["data_path"]),
            games_path=str(cfg["games_path"]),
            output_dir=str(cfg["output_dir"]),
            photo_root=str(cfg["photo_root"]) if cfg.get("photo_root") else None,
            layouts_path=str(cfg["layouts_path"]) if cfg.get("layouts_path") else None,
            hydration_workers=int(cfg["hydration_workers"]),
            render_workers=int(cfg["render_workers"]),
            strict_game_config=bool(cfg["strict_game_config"]),
        )

    # ----------------------------------------------------------------------
    # Private composition logic
    # ----------------------------------------------------------------------

    def _compose(self) -> dict[str, Any]:
        """
        Load final configuration from:
          1) Built-in defaults
          2) /etc/gbhwdb/config.yaml  (if present)
          3) ./config/gbhwdb.yaml     (if present)
          4) $GBHWDB_CONFIG_PATH      (if set)
          5) Environment variables (GBHWDB_*)
          6) overrides passed to the constructor (command line options)

        Returns merged config as dict.
        """
        cfg = self._default_config()

        self._deep_merge(cfg, self._load_yaml(SYSTEM_CONFIG_PATH))
        self._deep_merge(cfg, self._load_yaml(os.path.join(os.getcwd(), "config", "gbhwdb.yaml")))

        env_path = os.getenv(f"{ENV_PREFIX}CONFIG_PATH")
        if env_path:
            self._deep_merge(cfg, self._load_yaml(env_path))

        self._apply_env_overrides(cfg)

        if self._overrides:
            self._deep_merge(cfg, self._overrides)

        with contextlib.suppress(Exception):
            self._logger.debug("compose() loaded config; keys: %s", list(cfg.keys()))

        return cfg

    def _default_config(self) -> dict[str, Any]:
        """
        Base defaults; all fields present so no KeyErrors downstream.
        """
        return {
            # Inputs
            "data_path": "build/data/cartridges.json",
            "games_path": "config/games.json",
            "layouts_path": None,  # Optional YAML with extra layouts
            "photo_root": None,  # Relative photo paths resolve against cwd when unset
            # Output
            "output_dir": "build/site",
            # Concurrency
            "hydration_workers": 8,
            "render_workers": 16,
            # Validation
            "strict_game_config": True,
            # Logging
            "log_level": "INFO",
        }

    def _deep_merge(self, a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
        """
        Recursively merge dict b into dict a (mutates a, returns it).
        """
        for k, v in b.items():
            if isinstance(v, dict) and isinstance(a.get(k), dict):
                self._deep_merge(a[k], v)
            else:
                a[k] = v
        return a

    def _load_yaml(self, path: str) -> dict[str, Any]:
        """
        Load a YAML file; returns {} if not found or invalid.
        """
        if not path or not os.path.exists(path):
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            self._logger.warning(f"[config] Ignoring unreadable config file {path}: {e}")
            return {}
        if not isinstance(data, dict):
            self._logger.warning(f"[config] Ignoring config file {path}: top level is not a mapping")
            return {}
        return data

    def _apply_env_overrides(self, cfg: dict[str, Any]) -> None:
        """
        Support environment overrides of the form:
          GBHWDB_OUTPUT_DIR=/srv/site
          GBHWDB_RENDER_WORKERS=4
          GBHWDB_STRICT_GAME_CONFIG=false
        """
        for k, v in os.environ.items():
            if not k.startswith(ENV_PREFIX) or k == f"{ENV_PREFIX}CONFIG_PATH":
                continue

            key = k[len(ENV_PREFIX) :].lower()
            if not key:
                continue

            if v.lower() in ("true", "false"):
                val: Any = v.lower() == "true"
            elif v.isdigit():
                val = int(v)
            else:
                val = v
            cfg[key] = val
