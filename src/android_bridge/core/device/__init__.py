"""Device access.

Intents describe actions; a ``DevicePlatform`` resolves and issues them.
"""

from .adb import AdbPlatform, is_adb_available
from .intents import Intent
from .platform import DevicePlatform, ScanCallback

__all__ = [
    "AdbPlatform",
    "DevicePlatform",
    "Intent",
    "ScanCallback",
    "is_adb_available",
]
