"""Unit conversion between canonical metric storage and display units."""

from liftup.units.converter import (
    DEFAULT_UNIT_PREFERENCE,
    LBS_PER_KG,
    UnitPreference,
    cm_to_feet_inches,
    feet_inches_to_cm,
    format_feet_inches,
    format_height,
    format_kg,
    format_lbs,
    format_weight,
    height_unit,
    is_imperial,
    kg_to_lbs,
    lbs_to_kg,
    parse_feet_inches,
    parse_height_input,
    parse_weight_input,
    weight_unit,
)

__all__ = [
    "DEFAULT_UNIT_PREFERENCE",
    "LBS_PER_KG",
    "UnitPreference",
    "cm_to_feet_inches",
    "feet_inches_to_cm",
    "format_feet_inches",
    "format_height",
    "format_kg",
    "format_lbs",
    "format_weight",
    "height_unit",
    "is_imperial",
    "kg_to_lbs",
    "lbs_to_kg",
    "parse_feet_inches",
    "parse_height_input",
    "parse_weight_input",
    "weight_unit",
]
