"""Test doubles for the Android bridge."""

from typing import Callable, Dict, Iterable, List, Optional


from android_bridge.core.device.intents import (
    ACTION_MAIN,
    CATEGORY_LAUNCHER,
    FLAG_ACTIVITY_NEW_TASK,
    Intent,
)
from android_bridge.core.errors import DeviceError


class FakePlatform:
    """In-memory device platform that records every call."""

    def __init__(
        self,
        resolvable: Iterable[str] = (),
        launchable: Iterable[str] = (),
        broken_packages: Iterable[str] = (),
        failing_starts: Iterable[str] = (),
        scan_error: Optional[Exception] = None,
        echo_scans: bool = True,
    ) -> None:
        self.resolvable = set(resolvable)
        self.launchable = set(launchable)
        self.broken_packages = set(broken_packages)
        # Intent actions or data values whose start raises
        self.failing_starts = set(failing_starts)
        self.scan_error = scan_error
        self.echo_scans = echo_scans

        self.resolved: List[Intent] = []
        self.started: List[Intent] = []
        self.package_queries: List[str] = []
        self.scans: List[str] = []
        self.pending: Dict[str, Callable[[str, Optional[str]], None]] = {}

    def resolve_activity(self, intent: Intent) -> Optional[str]:
        self.resolved.append(intent)
        if intent.data in self.resolvable:
            return "com.example.files/.BrowserActivity"
        return None

    def start_activity(self, intent: Intent) -> None:
        self.started.append(intent)
        if intent.action in self.failing_starts or intent.data in self.failing_starts:
            raise DeviceError(f"Error: Activity not started for {intent.action}")

    def get_launch_intent_for_package(self, package: str) -> Optional[Intent]:
        self.package_queries.append(package)
        if package in self.broken_packages:
            raise DeviceError(f"Package manager crashed for {package}")
        if package in self.launchable:
            return Intent(
                action=ACTION_MAIN,
                categories=(CATEGORY_LAUNCHER,),
                flags=FLAG_ACTIVITY_NEW_TASK,
                component=f"{package}/.MainActivity",
            )
        return None

    def scan_file(
        self, path: str, on_complete: Callable[[str, Optional[str]], None]
    ) -> None:
        self.scans.append(path)
        if self.scan_error is not None:
            raise self.scan_error
        if self.echo_scans:
            on_complete(path, "content://media/external/file/7")
        else:
            self.pending[path] = on_complete
