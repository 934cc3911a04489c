"""Named request/response channels between the application shell and the bridge.

A handler receives a ``MethodCall`` and completes its ``MethodResult`` exactly
once, either right away or later from another thread. Replies are encoded as
plain dictionaries:

- ``{"success": value}``
- ``{"error": {"code": ..., "message": ..., "details": ...}}``
- ``{"not_implemented": True}``

Operation errors carry the bridge codes from ``core.errors``. A handler that
raises before replying yields the transport-level code ``HANDLER_ERROR``.
"""

import logging
import threading
from concurrent.futures import Future
from dataclasses import dataclass
from dataclasses import field as dataclass_field
from typing import Any, Callable, Dict, List, Optional

from ..core.completion import pending_future

logger = logging.getLogger(__name__)

Reply = Dict[str, Any]

# Reported when a handler raised before it replied; not an operation error code
HANDLER_ERROR = "error"


class ResultAlreadySubmitted(Exception):
    """Raised when a method result is completed a second time."""

    pass


@dataclass(frozen=True)
class MethodCall:
    """A decoded request: method name plus named arguments."""

    method: str
    arguments: Dict[str, Any] = dataclass_field(default_factory=dict)

    def argument(self, key: str) -> Any:
        """Return the named argument, or None when absent."""
        return self.arguments.get(key)


class MethodResult:
    """Single-use reply handle passed to a method call handler."""

    def __init__(self, channel: str, method: str, reply: "Future[Reply]") -> None:
        """Initialize the result.

        Args:
            channel: Channel the call arrived on
            method: Method name, for logging
            reply: Future receiving the encoded reply
        """
        self.channel = channel
        self.method = method
        self._reply = reply
        self._lock = threading.Lock()
        self._submitted = False

    @property
    def submitted(self) -> bool:
        """Whether a reply was already sent."""
        return self._submitted

    def success(self, value: Any = None) -> None:
        """Reply with a successful value."""
        self._submit({"success": value})

    def error(
        self, code: str, message: Optional[str] = None, details: Any = None
    ) -> None:
        """Reply with an error code and message."""
        logger.debug(f"{self.channel}#{self.method} failed: {code} {message}")
        self._submit(
            {"error": {"code": code, "message": message, "details": details}}
        )

    def not_implemented(self) -> None:
        """Reply that the method is unknown on this channel."""
        self._submit({"not_implemented": True})

    def _submit(self, reply: Reply) -> None:
        with self._lock:
            if self._submitted:
                raise ResultAlreadySubmitted(
                    f"Reply already submitted for {self.channel}#{self.method}"
                )
            self._submitted = True
        self._reply.set_result(reply)


MethodCallHandler = Callable[[MethodCall, MethodResult], None]


class ChannelMessenger:
    """In-process router from channel names to method call handlers."""

    def __init__(self) -> None:
        """Initialize an empty messenger."""
        self._handlers: Dict[str, MethodCallHandler] = {}

    def set_handler(self, channel: str, handler: Optional[MethodCallHandler]) -> None:
        """Register ``handler`` for ``channel``; None removes it."""
        if handler is None:
            self._handlers.pop(channel, None)
        else:
            self._handlers[channel] = handler

    @property
    def channels(self) -> List[str]:
        """Names of channels with a registered handler."""
        return sorted(self._handlers)

    def invoke(
        self, channel: str, method: str, arguments: Optional[Dict[str, Any]] = None
    ) -> "Future[Reply]":
        """Dispatch a call and return the pending reply.

        Unknown channels and methods reply ``not_implemented``. An exception
        escaping the handler before it replied becomes a ``HANDLER_ERROR`` reply.
        """
        reply: "Future[Reply]" = pending_future()
        result = MethodResult(channel, method, reply)

        handler = self._handlers.get(channel)
        if handler is None:
            logger.debug(f"No handler registered for channel {channel}")
            result.not_implemented()
            return reply

        try:
            handler(MethodCall(method, dict(arguments or {})), result)
        except Exception as e:
            logger.exception(f"Handler for {channel}#{method} raised")
            if not result.submitted:
                result.error(HANDLER_ERROR, str(e))
        return reply


class MethodChannel:
    """A named channel bound to a messenger."""

    def __init__(self, name: str, messenger: ChannelMessenger) -> None:
        """Initialize the channel.

        Args:
            name: Channel name, unique within the messenger
            messenger: Messenger routing calls to this channel
        """
        self.name = name
        self.messenger = messenger

    def set_method_call_handler(self, handler: Optional[MethodCallHandler]) -> None:
        """Route calls on this channel to ``handler``."""
        self.messenger.set_handler(self.name, handler)

    def invoke_method(
        self, method: str, arguments: Optional[Dict[str, Any]] = None
    ) -> "Future[Reply]":
        """Invoke ``method`` on this channel."""
        return self.messenger.invoke(self.name, method, arguments)
