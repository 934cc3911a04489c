"""File browser launching.

Holds the ordered strategy chain and the launcher that walks it.
"""

from .launcher import FileBrowserLauncher
from .strategies import (
    CONTENT_PICKER,
    DEFAULT_FILE_MANAGER_PACKAGES,
    DOCUMENTS_PROVIDER,
    DOWNLOADS_PATH,
    FILE_MANAGER_APP,
    LaunchStrategy,
    default_strategies,
)

__all__ = [
    "FileBrowserLauncher",
    "LaunchStrategy",
    "default_strategies",
    "DEFAULT_FILE_MANAGER_PACKAGES",
    "DOCUMENTS_PROVIDER",
    "DOWNLOADS_PATH",
    "FILE_MANAGER_APP",
    "CONTENT_PICKER",
]
