"""Height and weight conversion between canonical metric and display units.

Profiles always store weight in kilograms and height in centimeters. The
functions here convert those values for display and turn free-text form
input back into canonical units, honoring an explicit unit preference.
"""

from __future__ import annotations

import math
import re
from enum import Enum
from typing import Optional

CM_PER_INCH = 2.54
INCHES_PER_FOOT = 12
LBS_PER_KG = 2.20462


class UnitPreference(Enum):
    """Display/input unit system."""
    IMPERIAL = "imperial"
    METRIC = "metric"


DEFAULT_UNIT_PREFERENCE = UnitPreference.IMPERIAL.value

# Anything that is not a digit or a decimal point separates numbers
_NUMBER_SEPARATOR = re.compile(r"[^0-9.]+")


def is_imperial(preference: str) -> bool:
    """Return True if the preference selects imperial units.

    Any value other than "imperial" is treated as metric.
    """
    return preference == UnitPreference.IMPERIAL.value


# ============================================================================
# Height
# ============================================================================


def cm_to_feet_inches(cm: float) -> tuple[int, float]:
    """Convert centimeters to whole feet plus remaining inches.

    Args:
        cm: Height in centimeters

    Returns:
        (feet, inches) where inches is the unrounded remainder
    """
    total_inches = cm / CM_PER_INCH
    feet = int(total_inches / INCHES_PER_FOOT)
    inches = math.fmod(total_inches, INCHES_PER_FOOT)
    return feet, inches


def feet_inches_to_cm(feet: int, inches: float) -> float:
    """Convert feet and inches to centimeters."""
    total_inches = feet * INCHES_PER_FOOT + inches
    return total_inches * CM_PER_INCH


def format_feet_inches(feet: int, inches: float) -> str:
    """Format as 5' or 5' 10.5"."""
    if inches == 0:
        return f"{feet}'"
    return f"{feet}' {inches:.1f}\""


def parse_feet_inches(text: str) -> Optional[tuple[int, float]]:
    """Parse feet and inches from free text such as 5' 10.5", 5'10 or 6.

    Every positive number in the text is extracted in order. The first is
    taken as feet (truncated) and the second as inches; anything after that
    is ignored. A single number is read as whole feet.

    Args:
        text: User input

    Returns:
        (feet, inches), or None if the text contains no positive finite number
    """
    numbers = []
    for fragment in _NUMBER_SEPARATOR.split(text):
        try:
            value = float(fragment)
        except ValueError:
            continue
        if math.isfinite(value) and value > 0:
            numbers.append(value)

    if len(numbers) >= 2:
        return int(numbers[0]), numbers[1]
    if len(numbers) == 1:
        return int(numbers[0]), 0.0
    return None


# ============================================================================
# Weight
# ============================================================================


def kg_to_lbs(kg: float) -> float:
    """Convert kilograms to pounds."""
    return kg * LBS_PER_KG


def lbs_to_kg(lbs: float) -> float:
    """Convert pounds to kilograms."""
    return lbs / LBS_PER_KG


def format_lbs(lbs: float) -> str:
    return f"{lbs:.1f}"


def format_kg(kg: float) -> str:
    return f"{kg:.1f}"


# ============================================================================
# Display helpers
# ============================================================================


def height_unit(preference: str = DEFAULT_UNIT_PREFERENCE) -> str:
    """Unit label for height input fields."""
    return "ft/in" if is_imperial(preference) else "cm"


def weight_unit(preference: str = DEFAULT_UNIT_PREFERENCE) -> str:
    """Unit label for weight input fields."""
    return "lbs" if is_imperial(preference) else "kg"


def format_height(cm: float, preference: str = DEFAULT_UNIT_PREFERENCE) -> str:
    """Format a canonical height for display.

    Args:
        cm: Height in centimeters
        preference: "imperial" or "metric"

    Returns:
        e.g. 5' 10.9" (imperial) or 180 cm (metric)
    """
    if is_imperial(preference):
        feet, inches = cm_to_feet_inches(cm)
        return format_feet_inches(feet, inches)
    return f"{int(cm)} cm"


def format_weight(kg: float, preference: str = DEFAULT_UNIT_PREFERENCE) -> str:
    """Format a canonical weight for display, e.g. 176.4 lbs or 80.0 kg."""
    if is_imperial(preference):
        return f"{format_lbs(kg_to_lbs(kg))} lbs"
    return f"{format_kg(kg)} kg"


# ============================================================================
# Input parsing
# ============================================================================


def _parse_float(text: str) -> Optional[float]:
    """Parse a plain decimal number; None for nan, inf or digit separators."""
    if "_" in text:
        return None
    try:
        value = float(text.strip())
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_height_input(
    text: str, preference: str = DEFAULT_UNIT_PREFERENCE
) -> Optional[float]:
    """Parse a height entered in the preferred units.

    Args:
        text: Feet/inches text (imperial) or a number of centimeters (metric)
        preference: "imperial" or "metric"

    Returns:
        Height in centimeters, or None if the input could not be parsed
    """
    if is_imperial(preference):
        parsed = parse_feet_inches(text)
        if parsed is None:
            return None
        feet, inches = parsed
        cm = feet_inches_to_cm(feet, inches)
        return cm if math.isfinite(cm) else None
    return _parse_float(text)


def parse_weight_input(
    text: str, preference: str = DEFAULT_UNIT_PREFERENCE
) -> Optional[float]:
    """Parse a weight entered in the preferred units.

    Args:
        text: Pounds (imperial) or kilograms (metric)
        preference: "imperial" or "metric"

    Returns:
        Weight in kilograms, or None if the input could not be parsed
    """
    value = _parse_float(text)
    if value is None:
        return None
    if is_imperial(preference):
        return lbs_to_kg(value)
    return value
