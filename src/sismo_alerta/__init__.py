"""Earthquake early-warning estimates for Chilean territory."""

__version__ = "0.3.0"
