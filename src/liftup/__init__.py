"""LiftUp Fit: nutrition targets and unit conversion for fitness profiles."""

__version__ = "0.1.0"
