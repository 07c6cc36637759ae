"""User profile model for nutrition recommendations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from liftup.units import DEFAULT_UNIT_PREFERENCE


class FitnessLevel(Enum):
    """Self-reported training experience."""
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"


# Goal tags with special meaning to the macro calculator
GOAL_LOSE_FAT = "Lose Fat"
GOAL_BUILD_MUSCLE = "Build Muscle"

# Tags offered on the profile form
AVAILABLE_GOALS = [
    GOAL_BUILD_MUSCLE,
    GOAL_LOSE_FAT,
    "Improve Strength",
    "Increase Endurance",
    "Maintain Weight",
    "Improve Flexibility",
    "Better Overall Health",
    "Sports Performance",
]

FITNESS_LEVELS = [level.value for level in FitnessLevel]


@dataclass
class UserProfile:
    """Profile attributes used by the macro calculator.

    Weight and height are always canonical metric values; unit_preference
    only affects how they are displayed and parsed.
    """

    age: Optional[int] = None
    weight_kg: Optional[float] = None
    height_cm: Optional[float] = None
    fitness_level: Optional[str] = None  # 'Beginner', 'Intermediate', 'Advanced', 'Expert'
    goals: list[str] = field(default_factory=list)
    unit_preference: str = DEFAULT_UNIT_PREFERENCE  # 'imperial' or 'metric'
    full_name: Optional[str] = None

    def missing_fields(self) -> list[str]:
        """Names of fields required for macro calculation that are unset."""
        required = {
            "age": self.age,
            "weight_kg": self.weight_kg,
            "height_cm": self.height_cm,
            "fitness_level": self.fitness_level,
        }
        return [name for name, value in required.items() if value is None]

    @property
    def is_complete(self) -> bool:
        """True when sufficient for macros and at least one goal is chosen."""
        return not self.missing_fields() and bool(self.goals)


def is_sufficient_for_macros(profile: UserProfile) -> bool:
    """Check whether a profile has enough data for meaningful macro output.

    The macro calculator never raises on missing fields; it substitutes
    zeros instead. Callers must check this first before trusting its output.
    """
    return not profile.missing_fields()


def parse_fitness_level(value: Optional[str]) -> Optional[FitnessLevel]:
    """Return the matching FitnessLevel, or None for missing/unknown values."""
    if value is None:
        return None
    try:
        return FitnessLevel(value)
    except ValueError:
        return None
