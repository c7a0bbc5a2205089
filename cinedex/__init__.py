"""Cinedex: movie catalogue and task manager API."""

__version__ = "1.0.0"
