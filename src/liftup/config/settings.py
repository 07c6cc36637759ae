"""Application settings and configuration management."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from liftup.units import DEFAULT_UNIT_PREFERENCE, UnitPreference

logger = logging.getLogger(__name__)


def _default_config_dir() -> Path:
    """Return the default configuration directory."""
    return Path.home() / ".liftup"


def _default_profile_path() -> Path:
    """Return the default profile path."""
    return _default_config_dir() / "profile.yaml"


@dataclass
class UnitsConfig:
    """Unit preference used when a profile does not carry its own."""

    preference: str = DEFAULT_UNIT_PREFERENCE  # "imperial" or "metric"


@dataclass
class ProfileConfig:
    """Local profile storage configuration."""

    path: Path = field(default_factory=_default_profile_path)


@dataclass
class DefaultsConfig:
    """Default values for various operations."""

    output_format: str = "table"  # "table" or "json"


@dataclass
class Settings:
    """Main application settings."""

    units: UnitsConfig = field(default_factory=UnitsConfig)
    profile: ProfileConfig = field(default_factory=ProfileConfig)
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """Load settings from YAML file or return defaults.

        Args:
            config_path: Path to config.yaml. If None, uses ~/.liftup/config.yaml

        Returns:
            Settings instance

        Raises:
            ValueError: If the file is not valid YAML or names an unknown
                unit preference
        """
        if config_path is None:
            config_path = _default_config_dir() / "config.yaml"

        if not config_path.exists():
            logger.debug("No config at %s, using defaults", config_path)
            return cls()

        with open(config_path) as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Could not parse {config_path}: {e}") from e

        settings = cls()

        if "units" in data:
            units_data = data["units"]
            if "preference" in units_data:
                settings.units.preference = UnitPreference(units_data["preference"]).value

        if "profile" in data:
            profile_data = data["profile"]
            if "path" in profile_data:
                settings.profile.path = Path(profile_data["path"]).expanduser()

        if "defaults" in data:
            def_data = data["defaults"]
            if "output_format" in def_data:
                settings.defaults.output_format = def_data["output_format"]

        logger.debug("Loaded settings from %s", config_path)
        return settings

    def save(self, config_path: Optional[Path] = None) -> None:
        """Save current settings to YAML file.

        Args:
            config_path: Path to save config.yaml. If None, uses ~/.liftup/config.yaml
        """
        if config_path is None:
            config_path = _default_config_dir() / "config.yaml"

        config_path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "units": {
                "preference": self.units.preference,
            },
            "profile": {
                "path": str(self.profile.path),
            },
            "defaults": {
                "output_format": self.defaults.output_format,
            },
        }

        with open(config_path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

        logger.info("Saved settings to %s", config_path)


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, loading from disk if needed."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reload_settings() -> Settings:
    """Force reload settings from disk."""
    global _settings
    _settings = Settings.load()
    return _settings


def get_unit_preference() -> str:
    """Return the configured default unit preference."""
    return get_settings().units.preference


def set_unit_preference(preference: str) -> None:
    """Validate and persist the default unit preference.

    An unreadable config file is replaced by defaults carrying the new
    preference.

    Raises:
        ValueError: If preference is not "imperial" or "metric"
    """
    global _settings
    value = UnitPreference(preference).value

    try:
        settings = get_settings()
    except ValueError as e:
        logger.warning("Replacing invalid config: %s", e)
        settings = _settings = Settings()

    settings.units.preference = value
    settings.save()
