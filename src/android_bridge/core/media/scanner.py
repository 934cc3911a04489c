"""Media index requests.

Asks the device media store to (re)scan a newly written file so other apps
can discover it. The result arrives through a callback on a platform thread.
"""

import logging
from concurrent.futures import Future
from typing import Optional

from pydantic import ValidationError

from ...models.models import ScanFailure, ScanOutcome, ScanRequest, ScanSuccess
from ..completion import pending_future, resolve_once
from ..device.platform import DevicePlatform
from ..errors import InvalidArgumentError

logger = logging.getLogger(__name__)


class MediaIndexRequester:
    """Issue media scan requests against a device platform."""

    def __init__(self, platform: DevicePlatform) -> None:
        """Initialize the requester.

        Args:
            platform: Device platform used to issue the scan
        """
        self.platform = platform

    def request_scan(self, path: Optional[str]) -> "Future[ScanOutcome]":
        """Request a scan of ``path``.

        Args:
            path: Absolute path of the file on the device

        Returns:
            Future resolved once with a ``ScanSuccess`` when the platform
            reports the indexed path, or with a ``ScanFailure`` if issuing
            the request raised

        Raises:
            InvalidArgumentError: If ``path`` is missing or empty
        """
        try:
            request = ScanRequest(path=path)
        except ValidationError as e:
            message = e.errors()[0]["msg"].removeprefix("Value error, ")
            raise InvalidArgumentError(message)

        future: "Future[ScanOutcome]" = pending_future()

        def on_complete(indexed_path: str, uri: Optional[str]) -> None:
            outcome = ScanSuccess(indexed_path=indexed_path, uri=uri)
            if resolve_once(future, outcome):
                logger.info(f"Scanned {indexed_path} ({uri or 'no uri'})")
            else:
                logger.debug(f"Ignoring repeated scan completion for {indexed_path}")

        try:
            self.platform.scan_file(request.path, on_complete)
        except Exception as e:
            logger.warning(f"Failed to scan file {request.path}: {e}")
            resolve_once(future, ScanFailure(reason=f"Failed to scan file: {e}"))

        return future


def wait_for_scan(
    future: "Future[ScanOutcome]", timeout: Optional[float] = None
) -> ScanOutcome:
    """Block until a scan completes.

    Args:
        future: Future returned by ``request_scan``
        timeout: Seconds to wait; None waits indefinitely

    Raises:
        FutureTimeoutError: If the platform did not report within ``timeout``
    """
    return future.result(timeout)
