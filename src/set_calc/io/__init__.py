"""Boundary layer: input validation and user settings."""
