"""Models for the Android bridge."""

from .models import (
    LaunchExhausted,
    LaunchOutcome,
    LaunchSuccess,
    ScanFailure,
    ScanOutcome,
    ScanRequest,
    ScanSuccess,
)

__all__ = [
    "ScanRequest",
    "ScanSuccess",
    "ScanFailure",
    "ScanOutcome",
    "LaunchSuccess",
    "LaunchExhausted",
    "LaunchOutcome",
]
