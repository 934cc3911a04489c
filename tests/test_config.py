"""Tests for configuration management."""

import pytest

from android_bridge.config import Config
from android_bridge.core.launcher import DEFAULT_FILE_MANAGER_PACKAGES

ENV_VARS = [
    "ANDROID_BRIDGE_ADB_PATH",
    "ANDROID_BRIDGE_DEVICE_SERIAL",
    "ANDROID_BRIDGE_ADB_TIMEOUT",
    "ANDROID_BRIDGE_DOWNLOADS_DIR",
    "ANDROID_BRIDGE_DOCUMENTS_URI",
    "ANDROID_BRIDGE_FILE_MANAGER_PACKAGES",
    "ANDROID_BRIDGE_CHANNEL_PREFIX",
    "ANDROID_BRIDGE_SCAN_TIMEOUT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove bridge settings from the environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestConfig:
    """Test configuration management."""

    def test_defaults(self):
        """Test that config can be created with defaults."""
        config = Config()

        assert config.adb_path == "adb"
        assert config.device_serial is None
        assert config.adb_timeout == 15.0
        assert config.downloads_dir == "/storage/emulated/0/Download"
        assert config.documents_uri.endswith("primary%3ADownload")
        assert config.file_manager_packages == DEFAULT_FILE_MANAGER_PACKAGES
        assert config.scan_timeout is None

    def test_channel_names(self, monkeypatch):
        """Test channel names follow the prefix."""
        assert Config().media_scanner_channel == (
            "com.allworkdone.upflow.media_scanner"
        )

        monkeypatch.setenv("ANDROID_BRIDGE_CHANNEL_PREFIX", "org.example")
        config = Config()
        assert config.media_scanner_channel == "org.example.media_scanner"
        assert config.file_manager_channel == "org.example.file_manager"

    def test_file_manager_packages_from_env(self, monkeypatch):
        """Test the allowlist is parsed and blanks are dropped."""
        monkeypatch.setenv(
            "ANDROID_BRIDGE_FILE_MANAGER_PACKAGES",
            " org.one.files , ,org.two.files",
        )

        assert Config().file_manager_packages == ("org.one.files", "org.two.files")

    def test_empty_allowlist(self, monkeypatch):
        """Test an empty variable disables app launching."""
        monkeypatch.setenv("ANDROID_BRIDGE_FILE_MANAGER_PACKAGES", "")

        assert Config().file_manager_packages == ()

    def test_numeric_settings(self, monkeypatch):
        """Test timeouts and paths from the environment."""
        monkeypatch.setenv("ANDROID_BRIDGE_ADB_TIMEOUT", "2.5")
        monkeypatch.setenv("ANDROID_BRIDGE_SCAN_TIMEOUT", "30")
        monkeypatch.setenv("ANDROID_BRIDGE_DOWNLOADS_DIR", "/sdcard/Download/")
        monkeypatch.setenv("ANDROID_BRIDGE_DEVICE_SERIAL", "emulator-5556")

        config = Config()

        assert config.adb_timeout == 2.5
        assert config.scan_timeout == 30.0
        assert config.downloads_dir == "/sdcard/Download"
        assert config.device_serial == "emulator-5556"
