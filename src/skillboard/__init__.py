"""Skillboard: a locally simulated skills and badges backend."""

__version__ = "1.0.0"
