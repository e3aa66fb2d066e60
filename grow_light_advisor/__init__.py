"""Grow Light Advisor — fixture and mounting-distance recommendations for plants."""

__version__ = "0.1.0"
