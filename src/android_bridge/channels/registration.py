"""Wiring of the bridge operations onto method channels."""

import logging
from typing import Tuple

from ..config import DEFAULT_CHANNEL_PREFIX
from ..core.errors import (
    BridgeError,
    ErrorCode,
    InvalidArgumentError,
    NoFileManagerError,
    OpenFileManagerError,
    ScanError,
    classify_exception,
)
from ..core.launcher import FileBrowserLauncher
from ..core.media import MediaIndexRequester
from ..models.models import ScanOutcome
from .method_channel import (
    ChannelMessenger,
    MethodCall,
    MethodCallHandler,
    MethodChannel,
    MethodResult,
)

logger = logging.getLogger(__name__)

SCAN_FILE = "scanFile"
OPEN_FILE_MANAGER = "openFileManager"


def reply_error(result: MethodResult, exc: BaseException, default: ErrorCode) -> None:
    """Reply to a call with the classified error for ``exc``."""
    code = classify_exception(exc, default)
    if isinstance(exc, BridgeError):
        result.error(code.value, exc.message, exc.details)
    else:
        result.error(code.value, str(exc))


def media_scanner_handler(requester: MediaIndexRequester) -> MethodCallHandler:
    """Build the handler for the media scanner channel."""

    def handle(call: MethodCall, result: MethodResult) -> None:
        if call.method != SCAN_FILE:
            result.not_implemented()
            return

        try:
            future = requester.request_scan(call.argument("path"))
        except InvalidArgumentError as e:
            reply_error(result, e, ErrorCode.INVALID_ARGUMENT)
            return

        def deliver(outcome: ScanOutcome) -> None:
            if outcome.ok:
                result.success(outcome.message)
            else:
                reply_error(result, ScanError(outcome.reason), ErrorCode.SCAN_ERROR)

        future.add_done_callback(lambda done: deliver(done.result()))

    return handle


def file_manager_handler(launcher: FileBrowserLauncher) -> MethodCallHandler:
    """Build the handler for the file manager channel."""

    def handle(call: MethodCall, result: MethodResult) -> None:
        if call.method != OPEN_FILE_MANAGER:
            result.not_implemented()
            return

        try:
            outcome = launcher.launch()
            if outcome.ok:
                result.success(outcome.message)
                return
            exhausted = NoFileManagerError(outcome.message, list(outcome.attempted))
        except Exception as e:
            logger.exception("Opening the file manager failed")
            failure = OpenFileManagerError(f"Failed to open file manager: {e}")
            reply_error(result, failure, ErrorCode.OPEN_ERROR)
            return

        reply_error(result, exhausted, ErrorCode.NO_FILE_MANAGER)

    return handle


def register_bridge(
    messenger: ChannelMessenger,
    requester: MediaIndexRequester,
    launcher: FileBrowserLauncher,
    channel_prefix: str = DEFAULT_CHANNEL_PREFIX,
) -> Tuple[MethodChannel, MethodChannel]:
    """Register both bridge channels on ``messenger``.

    Call once at startup. There is no teardown step.

    Args:
        messenger: Messenger the channels are bound to
        requester: Implementation of ``scanFile``
        launcher: Implementation of ``openFileManager``
        channel_prefix: Prefix of both channel names

    Returns:
        The media scanner and file manager channels
    """
    media_channel = MethodChannel(f"{channel_prefix}.media_scanner", messenger)
    media_channel.set_method_call_handler(media_scanner_handler(requester))

    file_channel = MethodChannel(f"{channel_prefix}.file_manager", messenger)
    file_channel.set_method_call_handler(file_manager_handler(launcher))

    logger.debug(f"Registered channels {media_channel.name}, {file_channel.name}")
    return media_channel, file_channel
