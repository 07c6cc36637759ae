"""Pytest fixtures for liftup tests."""

from __future__ import annotations

import pytest

from liftup.profiles import UserProfile


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point HOME at a temporary directory so no test touches real config."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setattr("liftup.config.settings._settings", None)
    return tmp_path


@pytest.fixture
def reference_profile():
    """30 years, 80 kg, 180 cm, Intermediate, no goals."""
    return UserProfile(
        age=30,
        weight_kg=80,
        height_cm=180,
        fitness_level="Intermediate",
        goals=[],
        unit_preference="metric",
    )
