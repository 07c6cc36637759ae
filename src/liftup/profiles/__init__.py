"""User profiles and nutrition recommendations.

Key components:
- UserProfile model with the sufficiency predicate for macro output
- MacroCalculator (BMR, calories, macros, water, meals, workouts)
- YAML profile store
"""

from __future__ import annotations

from liftup.profiles.macro_calc import (
    MacroCalculator,
    MacroResult,
    calculate_macros,
    macros_to_dict,
)
from liftup.profiles.models import (
    AVAILABLE_GOALS,
    FITNESS_LEVELS,
    GOAL_BUILD_MUSCLE,
    GOAL_LOSE_FAT,
    FitnessLevel,
    UserProfile,
    is_sufficient_for_macros,
)
from liftup.profiles.store import (
    ProfileStoreError,
    load_profile,
    save_profile,
)

__all__ = [
    "AVAILABLE_GOALS",
    "FITNESS_LEVELS",
    "GOAL_BUILD_MUSCLE",
    "GOAL_LOSE_FAT",
    "FitnessLevel",
    "MacroCalculator",
    "MacroResult",
    "ProfileStoreError",
    "UserProfile",
    "calculate_macros",
    "is_sufficient_for_macros",
    "load_profile",
    "macros_to_dict",
    "save_profile",
]
