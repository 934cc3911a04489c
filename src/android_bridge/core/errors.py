"""Error classification shared by the bridge operations.

Failures are recovered at the smallest possible scope. Only the conditions
below cross a component boundary; everything else (a strategy that is not
resolvable, an action that raised while being issued) stays local.
"""

from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    """Stable error codes reported over the dispatch boundary."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"  # Required argument missing or empty
    SCAN_ERROR = "SCAN_ERROR"  # Media scan request could not be issued
    NO_FILE_MANAGER = "NO_FILE_MANAGER"  # Every launch strategy failed
    OPEN_ERROR = "OPEN_ERROR"  # Unexpected failure around the strategy chain


class BridgeError(Exception):
    """Base class for operation-level failures."""

    code: ErrorCode = ErrorCode.OPEN_ERROR

    def __init__(self, message: str, details: Optional[object] = None) -> None:
        """Initialize the error.

        Args:
            message: Human readable description
            details: Optional structured payload for the caller
        """
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidArgumentError(BridgeError):
    """A required request field was empty or absent."""

    code = ErrorCode.INVALID_ARGUMENT


class ScanError(BridgeError):
    """Issuing a media scan raised an exception."""

    code = ErrorCode.SCAN_ERROR


class NoFileManagerError(BridgeError):
    """No launch strategy could present a file browser."""

    code = ErrorCode.NO_FILE_MANAGER


class OpenFileManagerError(BridgeError):
    """An exception escaped the launch sequence as a whole."""

    code = ErrorCode.OPEN_ERROR


class DeviceError(Exception):
    """Raised when the device cannot be reached or rejects a command."""

    pass


def classify_exception(exc: BaseException, default: ErrorCode) -> ErrorCode:
    """Map an exception to the error code reported to the caller.

    Args:
        exc: The exception to classify
        default: Code used for exceptions that carry no classification

    Returns:
        The exception's own code for ``BridgeError`` instances, else ``default``
    """
    if isinstance(exc, BridgeError):
        return exc.code
    return default
