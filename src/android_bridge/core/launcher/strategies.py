"""Strategies for presenting a file browser on the device.

Each strategy pairs an availability check with an action. ``attempt`` returns
a confirmation message when the action was issued, or None when the device
cannot satisfy it.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from ..device.intents import (
    ACTION_GET_CONTENT,
    ACTION_VIEW,
    CATEGORY_OPENABLE,
    FLAG_ACTIVITY_NEW_TASK,
    Intent,
)
from ..device.platform import DevicePlatform

logger = logging.getLogger(__name__)

DOCUMENTS_PROVIDER = "documents_provider"
DOWNLOADS_PATH = "downloads_path"
FILE_MANAGER_APP = "file_manager_app"
CONTENT_PICKER = "content_picker"

DEFAULT_DOCUMENTS_URI = (
    "content://com.android.externalstorage.documents/document/primary%3ADownload"
)
DEFAULT_DOWNLOADS_DIR = "/storage/emulated/0/Download"
DEFAULT_FILE_MANAGER_PACKAGES: Tuple[str, ...] = (
    "com.google.android.documentsui",
    "com.android.documentsui",
    "com.mi.android.globalFileexplorer",
    "com.es.fileexplorer",
)
CHOOSER_TITLE = "Open File Manager"

AttemptFn = Callable[[DevicePlatform], Optional[str]]


@dataclass(frozen=True)
class LaunchStrategy:
    """One way of presenting a file browser."""

    strategy_id: str
    description: str
    attempt: AttemptFn


def _start_if_resolvable(platform: DevicePlatform, intent: Intent) -> bool:
    if platform.resolve_activity(intent) is None:
        return False
    platform.start_activity(intent)
    return True


def documents_provider_strategy(
    documents_uri: str = DEFAULT_DOCUMENTS_URI,
) -> LaunchStrategy:
    """View the Downloads folder through the system documents provider."""
    intent = Intent(
        action=ACTION_VIEW,
        data=documents_uri,
        mime_type="resource/folder",
        categories=(CATEGORY_OPENABLE,),
        flags=FLAG_ACTIVITY_NEW_TASK,
    )

    def attempt(platform: DevicePlatform) -> Optional[str]:
        if _start_if_resolvable(platform, intent):
            return "Downloads folder opened"
        return None

    return LaunchStrategy(
        DOCUMENTS_PROVIDER, f"View {documents_uri} as a folder", attempt
    )


def downloads_path_strategy(
    downloads_dir: str = DEFAULT_DOWNLOADS_DIR,
) -> LaunchStrategy:
    """View the on-device Downloads path with any file manager."""
    intent = Intent(
        action=ACTION_VIEW,
        data=f"file://{downloads_dir}",
        mime_type="*/*",
        flags=FLAG_ACTIVITY_NEW_TASK,
    )

    def attempt(platform: DevicePlatform) -> Optional[str]:
        if _start_if_resolvable(platform, intent):
            return "File manager opened with Downloads"
        return None

    return LaunchStrategy(DOWNLOADS_PATH, f"View file://{downloads_dir}", attempt)


def file_manager_app_strategy(
    packages: Sequence[str] = DEFAULT_FILE_MANAGER_PACKAGES,
) -> LaunchStrategy:
    """Launch the first installed app from a list of known file managers."""
    candidates = tuple(packages)

    def attempt(platform: DevicePlatform) -> Optional[str]:
        for package in candidates:
            try:
                intent = platform.get_launch_intent_for_package(package)
                if intent is not None:
                    platform.start_activity(intent)
                    return f"File manager app opened: {package}"
            except Exception as e:
                logger.debug(f"Cannot launch {package}: {e}")
        return None

    return LaunchStrategy(
        FILE_MANAGER_APP, f"Launch one of: {', '.join(candidates)}", attempt
    )


def content_picker_strategy(title: str = CHOOSER_TITLE) -> LaunchStrategy:
    """Offer a generic content picker. Always considered available."""
    picker = Intent(
        action=ACTION_GET_CONTENT,
        mime_type="*/*",
        categories=(CATEGORY_OPENABLE,),
        flags=FLAG_ACTIVITY_NEW_TASK,
    )
    chooser = Intent.create_chooser(picker, title)

    def attempt(platform: DevicePlatform) -> Optional[str]:
        platform.start_activity(chooser)
        return "Generic file picker opened"

    return LaunchStrategy(CONTENT_PICKER, "Pick any openable content", attempt)


def default_strategies(
    documents_uri: str = DEFAULT_DOCUMENTS_URI,
    downloads_dir: str = DEFAULT_DOWNLOADS_DIR,
    packages: Sequence[str] = DEFAULT_FILE_MANAGER_PACKAGES,
) -> Tuple[LaunchStrategy, ...]:
    """Build the strategy chain in priority order."""
    return (
        documents_provider_strategy(documents_uri),
        downloads_path_strategy(downloads_dir),
        file_manager_app_strategy(packages),
        content_picker_strategy(),
    )
