"""Local YAML storage for the user profile."""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Any, Optional

import yaml

from liftup.profiles.models import UserProfile
from liftup.units import DEFAULT_UNIT_PREFERENCE

logger = logging.getLogger(__name__)


class ProfileStoreError(Exception):
    """Raised when a stored profile cannot be read."""


def _optional_number(data: dict, key: str, cast: type) -> Any:
    value = data.get(key)
    if value is None:
        return None
    try:
        number = cast(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise ProfileStoreError(f"Invalid value for '{key}': {value!r}") from e
    if not math.isfinite(number):
        raise ProfileStoreError(f"Invalid value for '{key}': {value!r}")
    return number


def profile_from_dict(data: dict) -> UserProfile:
    """Build a UserProfile from a mapping of stored fields.

    Args:
        data: Mapping with metric weight_kg/height_cm keys

    Returns:
        UserProfile instance

    Raises:
        ProfileStoreError: If a numeric field is malformed
    """
    goals = data.get("goals") or []
    if isinstance(goals, str):
        goals = [goals]

    return UserProfile(
        age=_optional_number(data, "age", int),
        weight_kg=_optional_number(data, "weight_kg", float),
        height_cm=_optional_number(data, "height_cm", float),
        fitness_level=data.get("fitness_level"),
        goals=[str(g) for g in goals],
        unit_preference=data.get("unit_preference") or DEFAULT_UNIT_PREFERENCE,
        full_name=data.get("full_name"),
    )


def profile_to_dict(profile: UserProfile) -> dict:
    """Convert UserProfile to a plain dict for YAML/JSON output."""
    return {
        "full_name": profile.full_name,
        "age": profile.age,
        "weight_kg": profile.weight_kg,
        "height_cm": profile.height_cm,
        "fitness_level": profile.fitness_level,
        "goals": list(profile.goals),
        "unit_preference": profile.unit_preference,
    }


def load_profile(path: Path) -> Optional[UserProfile]:
    """Load the profile from a YAML file.

    Args:
        path: Profile file location

    Returns:
        UserProfile, or None if the file does not exist

    Raises:
        ProfileStoreError: If the file is not a valid profile mapping
    """
    if not path.exists():
        logger.debug("No profile at %s", path)
        return None

    with open(path) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ProfileStoreError(f"Could not parse {path}: {e}") from e

    if not isinstance(data, dict):
        raise ProfileStoreError(f"Profile file {path} must contain a mapping")

    logger.debug("Loaded profile from %s", path)
    return profile_from_dict(data)


def save_profile(profile: UserProfile, path: Path) -> None:
    """Write the profile to a YAML file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.dump(profile_to_dict(profile), f, default_flow_style=False, sort_keys=False)

    logger.info("Saved profile to %s", path)
