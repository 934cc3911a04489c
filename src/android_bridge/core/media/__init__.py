"""Media store integration."""

from .scanner import MediaIndexRequester, wait_for_scan

__all__ = ["MediaIndexRequester", "wait_for_scan"]
