"""Protocol for the OS capabilities the bridge relies on."""

from typing import Callable, Optional, Protocol

from .intents import Intent

ScanCallback = Callable[[str, Optional[str]], None]


class DevicePlatform(Protocol):
    """Resolvability checks and action issuance on an Android device.

    Implementations may raise from any method; callers treat an exception
    as "this action is not available".
    """

    def resolve_activity(self, intent: Intent) -> Optional[str]:
        """Return the component that would handle ``intent``, or None."""
        ...

    def start_activity(self, intent: Intent) -> None:
        """Issue ``intent``. Fire-and-forget."""
        ...

    def get_launch_intent_for_package(self, package: str) -> Optional[Intent]:
        """Return the launcher intent for ``package``, or None."""
        ...

    def scan_file(self, path: str, on_complete: ScanCallback) -> None:
        """Ask the media index to scan ``path``.

        ``on_complete(indexed_path, uri)`` is invoked later from a thread the
        caller does not control. It may never be invoked.
        """
        ...
