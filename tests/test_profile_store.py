"""Tests for the YAML profile store."""

from __future__ import annotations

from pathlib import Path

import pytest

from liftup.profiles import ProfileStoreError, UserProfile, load_profile, save_profile
from liftup.profiles.store import profile_from_dict


class TestProfileStore:
    """Tests for saving and loading profiles."""

    def test_missing_file(self, tmp_path: Path) -> None:
        assert load_profile(tmp_path / "profile.yaml") is None

    def test_save_and_load(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "profile.yaml"
        profile = UserProfile(
            age=30,
            weight_kg=80.5,
            height_cm=180.0,
            fitness_level="Advanced",
            goals=["Build Muscle", "Improve Strength"],
            unit_preference="metric",
            full_name="Sam Lee",
        )
        save_profile(profile, path)

        assert load_profile(path) == profile

    def test_partial_profile(self, tmp_path: Path) -> None:
        path = tmp_path / "profile.yaml"
        path.write_text("age: 41\n")

        profile = load_profile(path)
        assert profile is not None
        assert profile.age == 41
        assert profile.weight_kg is None
        assert profile.goals == []
        assert profile.unit_preference == "imperial"

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "profile.yaml"
        path.write_text("- just\n- a list\n")

        with pytest.raises(ProfileStoreError):
            load_profile(path)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "profile.yaml"
        path.write_text("age: [unclosed\n")

        with pytest.raises(ProfileStoreError):
            load_profile(path)

    def test_bad_number(self) -> None:
        with pytest.raises(ProfileStoreError, match="weight_kg"):
            profile_from_dict({"weight_kg": "heavy"})

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), ".nan"])
    def test_non_finite_number(self, value) -> None:
        with pytest.raises(ProfileStoreError, match="height_cm"):
            profile_from_dict({"height_cm": value})

    def test_non_finite_in_file(self, tmp_path: Path) -> None:
        path = tmp_path / "profile.yaml"
        path.write_text("weight_kg: .inf\n")

        with pytest.raises(ProfileStoreError):
            load_profile(path)

    def test_single_goal_string(self) -> None:
        profile = profile_from_dict({"goals": "Lose Fat"})
        assert profile.goals == ["Lose Fat"]
