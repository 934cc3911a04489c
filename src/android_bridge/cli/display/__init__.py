"""CLI display and formatting utilities."""

from .formatters import (
    display_config,
    display_devices,
    display_reply,
    display_strategies,
)

__all__ = [
    "display_config",
    "display_devices",
    "display_reply",
    "display_strategies",
]
