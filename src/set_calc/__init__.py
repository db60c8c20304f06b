"""Set calculator: weight and rep targets from a reference set and RPE."""

__version__ = "0.3.0"
