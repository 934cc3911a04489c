"""Dispatch boundary between the application shell and the bridge."""

from .method_channel import (
    HANDLER_ERROR,
    ChannelMessenger,
    MethodCall,
    MethodCallHandler,
    MethodChannel,
    MethodResult,
    Reply,
    ResultAlreadySubmitted,
)
from .registration import (
    OPEN_FILE_MANAGER,
    SCAN_FILE,
    file_manager_handler,
    media_scanner_handler,
    register_bridge,
)

__all__ = [
    "HANDLER_ERROR",
    "ChannelMessenger",
    "MethodCall",
    "MethodCallHandler",
    "MethodChannel",
    "MethodResult",
    "Reply",
    "ResultAlreadySubmitted",
    "OPEN_FILE_MANAGER",
    "SCAN_FILE",
    "file_manager_handler",
    "media_scanner_handler",
    "register_bridge",
]
