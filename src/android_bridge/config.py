"""Configuration management for the Android bridge."""

import os
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

from .core.launcher.strategies import (
    DEFAULT_DOCUMENTS_URI,
    DEFAULT_DOWNLOADS_DIR,
    DEFAULT_FILE_MANAGER_PACKAGES,
)

# Load .env file from config directory or project root
config_env = Path(__file__).parent.parent.parent / "config" / ".env"
if config_env.exists():
    load_dotenv(config_env)
else:
    load_dotenv()

DEFAULT_CHANNEL_PREFIX = "com.allworkdone.upflow"


def _parse_packages(value: Optional[str]) -> Tuple[str, ...]:
    """Parse a comma-separated package allowlist."""
    if value is None:
        return DEFAULT_FILE_MANAGER_PACKAGES
    return tuple(part.strip() for part in value.split(",") if part.strip())


def _parse_optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or not value.strip():
        return None
    return float(value)


class Config:
    """Application configuration."""

    def __init__(self) -> None:
        """Initialize configuration from environment variables."""
        # adb settings
        self.adb_path = os.getenv("ANDROID_BRIDGE_ADB_PATH", "adb")
        self.device_serial = os.getenv("ANDROID_BRIDGE_DEVICE_SERIAL") or None
        self.adb_timeout = float(os.getenv("ANDROID_BRIDGE_ADB_TIMEOUT", "15"))

        # File browser strategies
        self.downloads_dir = os.getenv(
            "ANDROID_BRIDGE_DOWNLOADS_DIR", DEFAULT_DOWNLOADS_DIR
        ).rstrip("/")
        self.documents_uri = os.getenv(
            "ANDROID_BRIDGE_DOCUMENTS_URI", DEFAULT_DOCUMENTS_URI
        )
        self.file_manager_packages = _parse_packages(
            os.getenv("ANDROID_BRIDGE_FILE_MANAGER_PACKAGES")
        )

        # Dispatch channels
        self.channel_prefix = os.getenv(
            "ANDROID_BRIDGE_CHANNEL_PREFIX", DEFAULT_CHANNEL_PREFIX
        )

        # Media scan; None waits for the device indefinitely
        self.scan_timeout = _parse_optional_float(
            os.getenv("ANDROID_BRIDGE_SCAN_TIMEOUT")
        )

    @property
    def media_scanner_channel(self) -> str:
        """Channel name for media scan requests."""
        return f"{self.channel_prefix}.media_scanner"

    @property
    def file_manager_channel(self) -> str:
        """Channel name for file manager requests."""
        return f"{self.channel_prefix}.file_manager"


def get_config() -> Config:
    """Get application configuration."""
    return Config()
