"""Device platform backed by the ``adb`` command line tool."""

import logging
import re
import shlex
import shutil
import subprocess  # nosec B404
import time
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Tuple

from ..errors import DeviceError
from .intents import (
    ACTION_MAIN,
    ACTION_MEDIA_SCANNER_SCAN_FILE,
    CATEGORY_LAUNCHER,
    FLAG_ACTIVITY_NEW_TASK,
    Intent,
)
from .platform import ScanCallback

logger = logging.getLogger(__name__)

MEDIA_FILES_URI = "content://media/external/file"
_ROW_ID_PATTERN = re.compile(r"\b_id=(\d+)")


def is_adb_available(adb_path: str = "adb") -> bool:
    """Check whether the adb binary can be found."""
    return shutil.which(adb_path) is not None


class AdbPlatform:
    """Issue intents and media scans on a device through ``adb shell``."""

    def __init__(
        self,
        adb_path: str = "adb",
        serial: Optional[str] = None,
        timeout: float = 15.0,
        scan_poll_attempts: int = 5,
        scan_poll_interval: float = 0.5,
    ) -> None:
        """Initialize the platform.

        Args:
            adb_path: Path or name of the adb binary
            serial: Device serial; adb's default device when None
            timeout: Seconds allowed for a single adb invocation
            scan_poll_attempts: Media store lookups after a scan broadcast
            scan_poll_interval: Seconds between media store lookups
        """
        self.adb_path = adb_path
        self.serial = serial
        self.timeout = timeout
        self.scan_poll_attempts = max(1, scan_poll_attempts)
        self.scan_poll_interval = scan_poll_interval
        self._executor = ThreadPoolExecutor(
            max_workers=2, thread_name_prefix="media-scan"
        )

    def close(self) -> None:
        """Stop the scan completion workers."""
        self._executor.shutdown(wait=False)

    def _base_command(self) -> List[str]:
        cmd = [self.adb_path]
        if self.serial:
            cmd += ["-s", self.serial]
        return cmd

    def _run(self, *args: str) -> str:
        """Run an adb command and return its stdout.

        Raises:
            DeviceError: If adb cannot be run, times out or exits non-zero
        """
        cmd = self._base_command() + list(args)
        logger.debug("Running: %s", " ".join(cmd))
        try:
            completed = subprocess.run(  # nosec B603
                cmd,
                capture_output=True,
                text=True,
                errors="replace",
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError:
            raise DeviceError(f"adb binary not found: {self.adb_path}")
        except subprocess.TimeoutExpired:
            raise DeviceError(f"adb timed out after {self.timeout}s: {args[:2]}")
        except OSError as e:
            raise DeviceError(f"adb could not be run: {e}")

        if completed.returncode != 0:
            stderr = completed.stderr.strip() or completed.stdout.strip()
            raise DeviceError(f"adb exited with {completed.returncode}: {stderr}")
        return completed.stdout

    def shell(self, *args: str) -> str:
        """Run a command in the device shell.

        Arguments are quoted for the remote shell, which would otherwise
        expand values such as ``*/*``.
        """
        return self._run("shell", " ".join(shlex.quote(arg) for arg in args))

    def list_devices(self) -> List[Tuple[str, str]]:
        """Return ``(serial, state)`` pairs reported by ``adb devices``."""
        output = self._run("devices")
        devices = []
        for line in output.splitlines()[1:]:
            parts = line.split()
            if len(parts) >= 2:
                devices.append((parts[0], parts[1]))
        return devices

    def resolve_activity(self, intent: Intent) -> Optional[str]:
        """Return the component that would handle ``intent``, or None."""
        output = self.shell(
            "cmd", "package", "resolve-activity", "--brief", *intent.to_am_args()
        )
        lines = [line.strip() for line in output.splitlines() if line.strip()]
        if not lines or lines[-1].startswith("No activity found"):
            return None
        component = lines[-1]
        if "/" not in component:
            return None
        return component

    def start_activity(self, intent: Intent) -> None:
        """Start an activity for ``intent``.

        Raises:
            DeviceError: If the activity manager reports an error
        """
        if intent.is_chooser:
            # am cannot carry a parcelable EXTRA_INTENT; the system shows its
            # own disambiguation dialog for the target when several apps match.
            logger.debug("Starting chooser target directly: %s", intent.extras)
            intent = intent.target  # type: ignore[assignment]

        output = self.shell("am", "start", *intent.to_am_args())
        for line in output.splitlines():
            if line.startswith("Error"):
                raise DeviceError(line.strip())

    def get_launch_intent_for_package(self, package: str) -> Optional[Intent]:
        """Return the launcher intent for ``package``, or None."""
        query = Intent(
            action=ACTION_MAIN,
            categories=(CATEGORY_LAUNCHER,),
            flags=FLAG_ACTIVITY_NEW_TASK,
            package=package,
        )
        component = self.resolve_activity(query)
        if component is None:
            return None
        return query.with_component(component)

    def scan_file(self, path: str, on_complete: ScanCallback) -> None:
        """Broadcast a scan request and report completion from a worker.

        Raises:
            DeviceError: If the broadcast cannot be issued
        """
        self.shell(
            "am",
            "broadcast",
            "-a",
            ACTION_MEDIA_SCANNER_SCAN_FILE,
            "-d",
            f"file://{path}",
        )
        self._executor.submit(self._complete_scan, path, on_complete)

    def _complete_scan(self, path: str, on_complete: ScanCallback) -> None:
        # The broadcast already went out, so the callback fires even when the
        # lookup fails; the uri is then None.
        uri = None
        try:
            for attempt in range(self.scan_poll_attempts):
                try:
                    uri = self.query_media_uri(path)
                except DeviceError as e:
                    logger.warning(f"Media store lookup failed for {path}: {e}")
                    break
                if uri is not None:
                    break
                if attempt + 1 < self.scan_poll_attempts:
                    time.sleep(self.scan_poll_interval)
        except Exception:
            logger.exception(f"Media store lookup crashed for {path}")
        finally:
            on_complete(path, uri)

    def query_media_uri(self, path: str) -> Optional[str]:
        """Look up the media store URI assigned to ``path``."""
        escaped = path.replace("'", "''")
        output = self.shell(
            "content",
            "query",
            "--uri",
            MEDIA_FILES_URI,
            "--projection",
            "_id",
            "--where",
            f"_data='{escaped}'",
        )
        match = _ROW_ID_PATTERN.search(output)
        if match is None:
            return None
        return f"{MEDIA_FILES_URI}/{match.group(1)}"
