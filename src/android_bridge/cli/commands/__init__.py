"""CLI command modules."""

from .app import BridgeApp
from .bridge import call_command, open_file_manager_command, scan_command
from .device import doctor_command, status_command, strategies_command

__all__ = [
    "BridgeApp",
    "call_command",
    "doctor_command",
    "open_file_manager_command",
    "scan_command",
    "status_command",
    "strategies_command",
]
