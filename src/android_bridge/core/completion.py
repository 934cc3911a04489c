"""Single-shot futures shared by asynchronous bridge operations.

Futures handed out here are already running, so ``cancel()`` has no effect:
a pending request stays pending until it is resolved or the process exits.
"""

from concurrent.futures import Future, InvalidStateError
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Any

__all__ = ["FutureTimeoutError", "pending_future", "resolve_once"]


def pending_future() -> "Future[Any]":
    """Create a future that can be resolved but not cancelled."""
    future: "Future[Any]" = Future()
    future.set_running_or_notify_cancel()
    return future


def resolve_once(future: "Future[Any]", value: Any) -> bool:
    """Deliver ``value`` unless the future already holds one.

    Returns:
        True if this call resolved the future, False if it was ignored
    """
    try:
        future.set_result(value)
    except InvalidStateError:
        return False
    return True
