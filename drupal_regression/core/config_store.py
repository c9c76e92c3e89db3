"""Named configuration objects backed by YAML files.

Each object lives in ``<config_dir>/<name>.yml`` and is returned as raw
mapping data. Overrides are merged over the file contents on every read,
so a deployment can flip a value (such as ``drupal_regression.enabled``)
without touching the shipped files.
"""
from __future__ import annotations
import copy
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from drupal_regression.core.config import Settings
from drupal_regression.core.errors import ConfigError

log = logging.getLogger(__name__)


def deep_merge(base: Dict[str, Any], updates: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``base`` with ``updates`` merged in recursively."""
    merged = copy.deepcopy(base)
    for key, value in updates.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


class ConfigFactory:
    def __init__(
        self,
        config_dir: Path | str | None = None,
        data: Optional[Dict[str, Dict[str, Any]]] = None,
        overrides: Optional[Dict[str, Dict[str, Any]]] = None,
    ):
        self.config_dir = Path(config_dir) if config_dir is not None else None
        self.data = data or {}
        self.overrides = overrides or {}

    @classmethod
    def from_settings(cls, settings: Settings) -> "ConfigFactory":
        overrides: Dict[str, Dict[str, Any]] = {}
        if settings.regression_enabled is not None:
            overrides["drupal_regression"] = {"enabled": settings.regression_enabled}
        return cls(config_dir=settings.config_dir, overrides=overrides)

    def _load(self, name: str) -> Dict[str, Any]:
        if name in self.data:
            return copy.deepcopy(self.data[name])
        if self.config_dir is None:
            return {}

        path = self.config_dir / f"{name}.yml"
        if not path.exists():
            log.debug("Config object %s has no file at %s", name, path)
            return {}

        with open(path, "r", encoding="utf-8") as f:
            try:
                raw = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if raw is None:
            return {}
        if not isinstance(raw, dict):
            raise ConfigError(f"Config object {name} must be a mapping, got {type(raw).__name__}")
        return raw

    def get(self, name: str) -> Dict[str, Any]:
        """Return the raw data of configuration object ``name``."""
        raw = self._load(name)
        if name in self.overrides:
            raw = deep_merge(raw, self.overrides[name])
        return raw
