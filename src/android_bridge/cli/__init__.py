"""Command-line interface for the Android bridge."""

from .main import cli

__all__ = ["cli"]
