"""Configuration management."""

from liftup.config.settings import (
    Settings,
    get_settings,
    get_unit_preference,
    reload_settings,
    set_unit_preference,
)

__all__ = [
    "Settings",
    "get_settings",
    "get_unit_preference",
    "reload_settings",
    "set_unit_preference",
]
