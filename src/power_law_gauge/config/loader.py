"""
Configuration Loader - YAML Files and Profiles.

Resolution order for one load:
    1. the given config file, else <base>/config/default.yaml if present,
       else built-in model defaults
    2. an optional profile from <base>/config/profiles/<name>.yaml,
       deep-merged on top
    3. validation into WidgetConfig

A profile only ever overlays a file; asking for one without any config
file is an error rather than a silent fallback to defaults.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from power_law_gauge.config.models import WidgetConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config") / "default.yaml"
PROFILES_DIR = Path("config") / "profiles"


def deep_merge(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Return base with overlay merged in; nested mappings merge key by key."""
    merged = dict(base)
    for key, value in overlay.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


class ConfigLoader:
    """Loads WidgetConfig from YAML, with optional profile overlays."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Directory that holds config/ (default: current directory)
        """
        self.base_path = Path(base_path) if base_path is not None else Path(".")

    @property
    def default_config_path(self) -> Path:
        return self.base_path / DEFAULT_CONFIG_PATH

    def available_profiles(self) -> List[str]:
        """Names of the profiles under config/profiles."""
        profiles_dir = self.base_path / PROFILES_DIR
        if not profiles_dir.is_dir():
            return []
        return sorted(p.stem for p in profiles_dir.glob("*.yaml"))

    def load(
        self,
        config_path: Optional[Union[str, Path]] = None,
        profile: Optional[str] = None,
    ) -> WidgetConfig:
        """
        Load and validate configuration.

        Args:
            config_path: YAML file, absolute or relative to base_path.
                         None means config/default.yaml when it exists.
            profile: Optional profile name to overlay

        Returns:
            Validated WidgetConfig

        Raises:
            FileNotFoundError: Missing config file, missing profile, or a
                               profile requested without any config file
            pydantic.ValidationError: If the merged values are invalid
        """
        path = self._select_file(config_path)
        if path is None:
            if profile:
                raise FileNotFoundError(
                    f"Profile {profile!r} needs a config file, none at {self.default_config_path}"
                )
            logger.debug("No config file found, using built-in defaults")
            return WidgetConfig()

        raw = self._read_yaml(path)
        if profile:
            raw = deep_merge(raw, self._read_profile(profile))

        logger.debug(f"Loaded config from {path} (profile={profile})")
        return WidgetConfig.model_validate(raw)

    def load_from_dict(self, config_dict: Dict[str, Any]) -> WidgetConfig:
        """Validate an already-parsed mapping."""
        return WidgetConfig.model_validate(config_dict)

    def _select_file(self, config_path: Optional[Union[str, Path]]) -> Optional[Path]:
        if config_path is None:
            default = self.default_config_path
            return default if default.exists() else None
        path = Path(config_path)
        return path if path.is_absolute() else self.base_path / path

    def _read_profile(self, profile: str) -> Dict[str, Any]:
        path = self.base_path / PROFILES_DIR / f"{profile}.yaml"
        if not path.exists():
            available = ", ".join(self.available_profiles()) or "none"
            raise FileNotFoundError(f"Profile not found: {profile} (available: {available})")
        return self._read_yaml(path)

    @staticmethod
    def _read_yaml(path: Path) -> Dict[str, Any]:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"{path}: top level must be a mapping, got {type(data).__name__}")
        return data


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> WidgetConfig:
    """Shortcut for ConfigLoader(base_path).load(config_path, profile)."""
    return ConfigLoader(base_path=base_path).load(config_path, profile)
