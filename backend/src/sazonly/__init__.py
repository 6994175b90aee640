"""Sazonly backend: recipe nutrition estimation."""

__version__ = "0.1.0"
