"""Tests for height/weight conversion, formatting and parsing."""

from __future__ import annotations

import pytest

from liftup.units import (
    DEFAULT_UNIT_PREFERENCE,
    cm_to_feet_inches,
    feet_inches_to_cm,
    format_feet_inches,
    format_height,
    format_kg,
    format_lbs,
    format_weight,
    height_unit,
    kg_to_lbs,
    lbs_to_kg,
    parse_feet_inches,
    parse_height_input,
    parse_weight_input,
    weight_unit,
)


class TestHeightConversion:
    """Tests for centimeter <-> feet/inches conversion."""

    def test_cm_to_feet_inches(self) -> None:
        """180 cm is 5 ft with an unrounded inch remainder."""
        feet, inches = cm_to_feet_inches(180)
        assert feet == 5
        assert inches == pytest.approx(180 / 2.54 - 60)

    def test_feet_inches_to_cm(self) -> None:
        """5' 10" is 177.8 cm."""
        assert feet_inches_to_cm(5, 10) == pytest.approx(177.8)

    @pytest.mark.parametrize("cm", [1.0, 30.48, 152.4, 175.0, 180.0, 203.7, 250.0])
    def test_round_trip(self, cm: float) -> None:
        """Converting to feet/inches and back returns the original height."""
        feet, inches = cm_to_feet_inches(cm)
        assert feet_inches_to_cm(feet, inches) == pytest.approx(cm, abs=0.01)

    def test_zero_and_negative_do_not_raise(self) -> None:
        """Physically meaningless inputs still convert."""
        assert cm_to_feet_inches(0) == (0, 0.0)
        feet, inches = cm_to_feet_inches(-30.48)
        assert feet_inches_to_cm(feet, inches) == pytest.approx(-30.48)


class TestWeightConversion:
    """Tests for kilogram <-> pound conversion."""

    def test_kg_to_lbs(self) -> None:
        assert kg_to_lbs(80) == pytest.approx(176.3696)

    def test_lbs_to_kg(self) -> None:
        assert lbs_to_kg(220.462) == pytest.approx(100.0)

    @pytest.mark.parametrize("kg", [0.5, 45.0, 80.0, 123.4])
    def test_round_trip(self, kg: float) -> None:
        """Converting to pounds and back returns the original weight."""
        assert lbs_to_kg(kg_to_lbs(kg)) == pytest.approx(kg, abs=0.01)


class TestFormatting:
    """Tests for display formatting."""

    def test_whole_feet(self) -> None:
        """Zero inches renders feet only."""
        assert format_feet_inches(6, 0) == "6'"

    def test_feet_and_inches(self) -> None:
        assert format_feet_inches(5, 10.5) == "5' 10.5\""

    def test_format_height_metric(self) -> None:
        """Metric height is whole centimeters, truncated."""
        assert format_height(180, "metric") == "180 cm"
        assert format_height(180.9, "metric") == "180 cm"

    def test_format_height_imperial(self) -> None:
        feet, inches = cm_to_feet_inches(180)
        assert format_height(180, "imperial") == format_feet_inches(feet, inches)
        assert format_height(180, "imperial") == "5' 10.9\""

    def test_format_weight(self) -> None:
        assert format_weight(80, "metric") == "80.0 kg"
        assert format_weight(80, "imperial") == "176.4 lbs"

    def test_one_decimal(self) -> None:
        assert format_lbs(176.3696) == "176.4"
        assert format_kg(80) == "80.0"

    def test_default_preference_is_imperial(self) -> None:
        assert DEFAULT_UNIT_PREFERENCE == "imperial"
        assert format_weight(80) == "176.4 lbs"

    def test_unit_labels(self) -> None:
        assert height_unit("imperial") == "ft/in"
        assert height_unit("metric") == "cm"
        assert weight_unit("imperial") == "lbs"
        assert weight_unit("metric") == "kg"

    def test_unknown_preference_is_metric(self) -> None:
        """Anything other than imperial formats as metric."""
        assert format_height(180, "furlongs") == "180 cm"


class TestParseFeetInches:
    """Tests for the lenient feet/inches parser."""

    def test_feet_and_decimal_inches(self) -> None:
        assert parse_feet_inches("5' 10.5\"") == (5, 10.5)

    def test_feet_only(self) -> None:
        assert parse_feet_inches("6'") == (6, 0)

    def test_no_spaces(self) -> None:
        assert parse_feet_inches("5'10\"") == (5, 10.0)

    def test_empty_string(self) -> None:
        assert parse_feet_inches("") is None

    def test_no_numbers(self) -> None:
        assert parse_feet_inches("tall") is None

    def test_extra_tokens_dropped(self) -> None:
        """Only the first two numbers are used."""
        assert parse_feet_inches("10' 5' 3\"") == (10, 5.0)

    def test_non_positive_discarded(self) -> None:
        """Zeros are skipped, so 0' 0\" has no usable numbers."""
        assert parse_feet_inches("0' 0\"") is None
        assert parse_feet_inches("0' 6\"") == (6, 0)

    def test_decimal_feet_truncated(self) -> None:
        assert parse_feet_inches("5.9") == (5, 0)

    def test_overflowing_number_skipped(self) -> None:
        """A digit run too long for a float is not a usable number."""
        assert parse_feet_inches("9" * 400) is None
        assert parse_feet_inches("9" * 400 + "' 6\"") == (6, 0)


class TestInputParsing:
    """Tests for preference-aware input parsing."""

    def test_imperial_height(self) -> None:
        assert parse_height_input("5' 10\"", "imperial") == pytest.approx(177.8)

    def test_metric_height(self) -> None:
        assert parse_height_input("180", "metric") == 180.0
        assert parse_height_input(" 172.5 ", "metric") == 172.5

    def test_unparsable_height(self) -> None:
        assert parse_height_input("tall", "imperial") is None
        assert parse_height_input("tall", "metric") is None
        assert parse_height_input("5' 10\"", "metric") is None

    def test_imperial_weight(self) -> None:
        assert parse_weight_input("176.37", "imperial") == pytest.approx(80.0, abs=0.01)

    def test_metric_weight(self) -> None:
        assert parse_weight_input("80", "metric") == 80.0

    def test_unparsable_weight(self) -> None:
        assert parse_weight_input("heavy", "imperial") is None
        assert parse_weight_input("", "metric") is None

    @pytest.mark.parametrize("text", ["nan", "inf", "-inf", "1_000", "1e400"])
    def test_non_finite_and_separators_rejected(self, text: str) -> None:
        assert parse_height_input(text, "metric") is None
        assert parse_weight_input(text, "metric") is None
        assert parse_weight_input(text, "imperial") is None

    def test_height_overflowing_to_infinity(self) -> None:
        """Feet that fit a float but overflow once converted to cm."""
        assert parse_height_input("9" * 308, "imperial") is None
