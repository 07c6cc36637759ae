"""Daily calorie and macronutrient recommendations.

Targets are derived entirely from the user profile: Mifflin-St Jeor BMR,
scaled by an activity multiplier for the fitness level and a goal
multiplier, then split into protein (by body weight), fat (25% of
calories) and carbohydrate (the remainder).

Every integer result truncates toward zero rather than rounding, and a
non-finite intermediate value (from nan or infinite inputs) becomes 0. Missing
profile fields are treated as zero, so check is_sufficient_for_macros()
before displaying anything computed here.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from liftup.profiles.models import (
    GOAL_BUILD_MUSCLE,
    GOAL_LOSE_FAT,
    FitnessLevel,
    UserProfile,
    parse_fitness_level,
)
from liftup.units import LBS_PER_KG, is_imperial

# Activity multipliers by fitness level (unknown level counts as Beginner)
ACTIVITY_MULTIPLIERS = {
    FitnessLevel.BEGINNER: 1.2,
    FitnessLevel.INTERMEDIATE: 1.375,
    FitnessLevel.ADVANCED: 1.55,
    FitnessLevel.EXPERT: 1.725,
}
DEFAULT_ACTIVITY_MULTIPLIER = 1.2

WORKOUTS_PER_WEEK = {
    FitnessLevel.BEGINNER: 3,
    FitnessLevel.INTERMEDIATE: 4,
    FitnessLevel.ADVANCED: 5,
    FitnessLevel.EXPERT: 6,
}
DEFAULT_WORKOUTS_PER_WEEK = 3

LOSE_FAT_MULTIPLIER = 0.85       # 15% deficit
BUILD_MUSCLE_MULTIPLIER = 1.1    # 10% surplus

# Protein grams per kg body weight
PROTEIN_PER_KG_BUILD_MUSCLE = 2.2
PROTEIN_PER_KG_LOSE_FAT = 2.0
PROTEIN_PER_KG_MAINTENANCE = 1.8

FAT_CALORIE_SHARE = 0.25
KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9

WATER_LITERS_PER_KG = 0.033
OUNCES_PER_LITER = 33.814


def _truncate(value: float) -> int:
    """Truncate toward zero; nan and infinity become 0."""
    if not math.isfinite(value):
        return 0
    return int(value)


@dataclass(frozen=True)
class MacroResult:
    """Snapshot of every value derived by MacroCalculator."""

    bmr: float
    daily_calories: int
    protein: int
    carbs: int
    fats: int
    protein_calories: int
    carb_calories: int
    fat_calories: int
    protein_percentage: int
    carbs_percentage: int
    fats_percentage: int
    protein_per_unit: str
    protein_unit: str
    water_intake: float
    water_unit: str
    meals_per_day: int
    workout_frequency: int
    goal_description: str

    def summary(self) -> str:
        """Human-readable summary of the recommendation."""
        lines = [
            f"Goal: {self.goal_description}",
            f"BMR: {_truncate(self.bmr)} kcal/day",
            f"Target: {self.daily_calories} kcal/day",
            f"Protein: {self.protein}g ({self.protein_percentage}%, "
            f"{self.protein_per_unit} {self.protein_unit})",
            f"Carbs: {self.carbs}g ({self.carbs_percentage}%)",
            f"Fats: {self.fats}g ({self.fats_percentage}%)",
            f"Eat {self.meals_per_day} meals per day",
            f"Drink {self.water_intake:.1f} {self.water_unit} of water daily",
            f"Include {self.workout_frequency} workouts per week",
        ]
        return "\n".join(lines)


def _percentage(part_calories: int, total_calories: int) -> int:
    # A zero target yields 0% instead of a division error
    if total_calories == 0:
        return 0
    return _truncate(part_calories / total_calories * 100)


class MacroCalculator:
    """Derives nutrition targets from a profile.

    Every attribute is a property recomputed on access; nothing is cached,
    so the calculator always reflects the current state of the profile.
    """

    def __init__(self, profile: UserProfile):
        self.profile = profile

    @property
    def _goals(self) -> list[str]:
        return self.profile.goals or []

    @property
    def _level(self) -> Optional[FitnessLevel]:
        return parse_fitness_level(self.profile.fitness_level)

    # --------------- Energy ------------------------------------------

    @property
    def bmr(self) -> float:
        """Basal Metabolic Rate (Mifflin-St Jeor).

        No sex is recorded on the profile, so the male constant (+5) is
        always used. Returns 0 if age, weight or height is missing.
        """
        p = self.profile
        if p.age is None or p.weight_kg is None or p.height_cm is None:
            return 0.0
        return 10 * p.weight_kg + 6.25 * p.height_cm - 5 * p.age + 5

    @property
    def activity_multiplier(self) -> float:
        return ACTIVITY_MULTIPLIERS.get(self._level, DEFAULT_ACTIVITY_MULTIPLIER)

    @property
    def goal_multiplier(self) -> float:
        # Lose Fat wins when both goals are present
        if GOAL_LOSE_FAT in self._goals:
            return LOSE_FAT_MULTIPLIER
        if GOAL_BUILD_MUSCLE in self._goals:
            return BUILD_MUSCLE_MULTIPLIER
        return 1.0

    @property
    def daily_calories(self) -> int:
        return _truncate(self.bmr * self.activity_multiplier * self.goal_multiplier)

    # --------------- Macros ------------------------------------------

    @property
    def protein(self) -> int:
        """Protein grams per day, scaled by body weight.

        Build Muscle is checked before Lose Fat here, the reverse of
        goal_multiplier.
        """
        weight = self.profile.weight_kg or 0.0
        if GOAL_BUILD_MUSCLE in self._goals:
            return _truncate(weight * PROTEIN_PER_KG_BUILD_MUSCLE)
        if GOAL_LOSE_FAT in self._goals:
            return _truncate(weight * PROTEIN_PER_KG_LOSE_FAT)
        return _truncate(weight * PROTEIN_PER_KG_MAINTENANCE)

    @property
    def protein_calories(self) -> int:
        return self.protein * KCAL_PER_G_PROTEIN

    @property
    def protein_percentage(self) -> int:
        return _percentage(self.protein_calories, self.daily_calories)

    @property
    def fats(self) -> int:
        return _truncate(self.daily_calories * FAT_CALORIE_SHARE / KCAL_PER_G_FAT)

    @property
    def fat_calories(self) -> int:
        return self.fats * KCAL_PER_G_FAT

    @property
    def fats_percentage(self) -> int:
        return _percentage(self.fat_calories, self.daily_calories)

    @property
    def carbs(self) -> int:
        """Carbohydrate grams filling the remaining calories.

        Not clamped: negative when protein and fat exceed the target.
        """
        remaining = self.daily_calories - self.protein_calories - self.fat_calories
        return _truncate(remaining / KCAL_PER_G_CARBS)

    @property
    def carb_calories(self) -> int:
        return self.carbs * KCAL_PER_G_CARBS

    @property
    def carbs_percentage(self) -> int:
        return _percentage(self.carb_calories, self.daily_calories)

    @property
    def protein_per_kg(self) -> float:
        weight = self.profile.weight_kg or 1.0
        return self.protein / weight

    @property
    def protein_per_unit(self) -> str:
        """Protein per kg (metric) or per lb (imperial), one decimal."""
        per_kg = self.protein_per_kg
        if is_imperial(self.profile.unit_preference):
            return f"{per_kg / LBS_PER_KG:.1f}"
        return f"{per_kg:.1f}"

    @property
    def protein_unit(self) -> str:
        return "g per lb" if is_imperial(self.profile.unit_preference) else "g per kg"

    # --------------- Recommendations ---------------------------------

    @property
    def water_intake(self) -> float:
        """Daily water in liters (metric) or fluid ounces (imperial)."""
        liters = (self.profile.weight_kg or 0.0) * WATER_LITERS_PER_KG
        if is_imperial(self.profile.unit_preference):
            return liters * OUNCES_PER_LITER
        return liters

    @property
    def water_unit(self) -> str:
        return "oz" if is_imperial(self.profile.unit_preference) else "liters"

    @property
    def meals_per_day(self) -> int:
        return 5 if GOAL_BUILD_MUSCLE in self._goals else 4

    @property
    def workout_frequency(self) -> int:
        return WORKOUTS_PER_WEEK.get(self._level, DEFAULT_WORKOUTS_PER_WEEK)

    @property
    def goal_description(self) -> str:
        if GOAL_LOSE_FAT in self._goals:
            return "Fat Loss"
        if GOAL_BUILD_MUSCLE in self._goals:
            return "Muscle Building"
        return "Maintenance"

    def result(self) -> MacroResult:
        """Evaluate every property into a MacroResult."""
        return MacroResult(
            bmr=self.bmr,
            daily_calories=self.daily_calories,
            protein=self.protein,
            carbs=self.carbs,
            fats=self.fats,
            protein_calories=self.protein_calories,
            carb_calories=self.carb_calories,
            fat_calories=self.fat_calories,
            protein_percentage=self.protein_percentage,
            carbs_percentage=self.carbs_percentage,
            fats_percentage=self.fats_percentage,
            protein_per_unit=self.protein_per_unit,
            protein_unit=self.protein_unit,
            water_intake=self.water_intake,
            water_unit=self.water_unit,
            meals_per_day=self.meals_per_day,
            workout_frequency=self.workout_frequency,
            goal_description=self.goal_description,
        )


def calculate_macros(profile: UserProfile) -> MacroResult:
    """Calculate daily nutrition targets for a profile.

    Args:
        profile: User profile (metric values)

    Returns:
        MacroResult with calorie, macro and auxiliary recommendations
    """
    return MacroCalculator(profile).result()


def macros_to_dict(result: MacroResult) -> dict:
    """Convert MacroResult to dict for JSON output."""
    return {
        "goal": result.goal_description,
        "calories": {
            "bmr": _truncate(result.bmr),
            "daily": result.daily_calories,
        },
        "protein": {
            "grams": result.protein,
            "calories": result.protein_calories,
            "percentage": result.protein_percentage,
            "per_body_weight": result.protein_per_unit,
            "per_body_weight_unit": result.protein_unit,
        },
        "carbs": {
            "grams": result.carbs,
            "calories": result.carb_calories,
            "percentage": result.carbs_percentage,
        },
        "fats": {
            "grams": result.fats,
            "calories": result.fat_calories,
            "percentage": result.fats_percentage,
        },
        "recommendations": {
            "meals_per_day": result.meals_per_day,
            "water_intake": round(result.water_intake, 1),
            "water_unit": result.water_unit,
            "workouts_per_week": result.workout_frequency,
        },
    }
