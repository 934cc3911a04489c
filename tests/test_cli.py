"""Tests for the command-line interface."""

import logging
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from android_bridge.cli.commands import BridgeApp
from android_bridge.cli.main import cli
from android_bridge.core.device.intents import ACTION_CHOOSER

from .fakes import FakePlatform

REPORT = "/storage/emulated/0/Download/report.pdf"


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo the handlers installed by the CLI group."""
    root = logging.getLogger()
    bridge = logging.getLogger("android_bridge")
    handlers, level, bridge_level = root.handlers[:], root.level, bridge.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    bridge.setLevel(bridge_level)


@pytest.fixture
def runner():
    """Create a CLI runner."""
    return CliRunner()


def invoke(runner, platform, *args):
    """Run the CLI against ``platform``."""
    app = BridgeApp(platform=platform)
    return runner.invoke(cli, list(args), obj=app)


class TestBridgeCommands:
    """Test cases for commands that go through the channels."""

    def test_scan(self, runner, platform):
        """Test a scan prints the confirmation."""
        result = invoke(runner, platform, "scan", REPORT)

        assert result.exit_code == 0
        assert f"File scanned: {REPORT}" in result.output
        assert platform.scans == [REPORT]

    def test_scan_invalid_path(self, runner, platform):
        """Test an empty path exits non-zero with INVALID_ARGUMENT."""
        result = invoke(runner, platform, "scan", "")

        assert result.exit_code == 1
        assert "INVALID_ARGUMENT" in result.output

    def test_scan_timeout(self, runner):
        """Test a scan that never completes honours --timeout."""
        platform = FakePlatform(echo_scans=False)

        result = invoke(runner, platform, "scan", REPORT, "--timeout", "0.01")

        assert result.exit_code == 1
        assert "No scan result" in result.output

    def test_open_file_manager(self, runner, platform):
        """Test opening falls back to the picker on a bare device."""
        result = invoke(runner, platform, "open-file-manager")

        assert result.exit_code == 0
        assert "Generic file picker opened" in result.output

    def test_open_file_manager_exhausted(self, runner):
        """Test exhaustion exits non-zero."""
        platform = FakePlatform(failing_starts={ACTION_CHOOSER})

        result = invoke(runner, platform, "open-file-manager")

        assert result.exit_code == 1
        assert "NO_FILE_MANAGER" in result.output

    def test_call_with_arguments(self, runner, platform):
        """Test raw dispatch with key=value arguments."""
        result = invoke(
            runner,
            platform,
            "call",
            "com.allworkdone.upflow.media_scanner",
            "scanFile",
            "-a",
            f"path={REPORT}",
        )

        assert result.exit_code == 0
        assert "File scanned" in result.output

    def test_call_unknown_method(self, runner, platform):
        """Test unknown methods print not implemented."""
        result = invoke(
            runner, platform, "call", "com.allworkdone.upflow.file_manager", "nope"
        )

        assert result.exit_code == 0
        assert "Not implemented" in result.output

    def test_call_bad_argument(self, runner, platform):
        """Test malformed arguments are rejected."""
        result = invoke(
            runner, platform, "call", "some.channel", "method", "-a", "novalue"
        )

        assert result.exit_code == 2
        assert "key=value" in result.output


class TestInspectionCommands:
    """Test cases for doctor, strategies and status."""

    def test_strategies(self, runner, platform):
        """Test the strategy table lists every strategy."""
        result = invoke(runner, platform, "strategies")

        assert result.exit_code == 0
        for strategy_id in ("documents_provider", "downloads_path", "content_picker"):
            assert strategy_id in result.output

    def test_status(self, runner, platform):
        """Test the status table shows the channels."""
        result = invoke(runner, platform, "status")

        assert result.exit_code == 0
        assert "Android Bridge Configuration" in result.output

    def test_doctor_without_adb(self, runner, platform):
        """Test doctor fails when adb is missing."""
        with patch(
            "android_bridge.cli.commands.device.is_adb_available", return_value=False
        ):
            result = invoke(runner, platform, "doctor")

        assert result.exit_code == 1
        assert "adb not found" in result.output

    def test_doctor_with_fake_platform(self, runner, platform):
        """Test doctor skips the device check for non-adb platforms."""
        with patch(
            "android_bridge.cli.commands.device.is_adb_available", return_value=True
        ):
            result = invoke(runner, platform, "doctor")

        assert result.exit_code == 0
        assert "adb found" in result.output


class TestLoggingOptions:
    """Test cases for the group's logging options."""

    def test_debug_flag_lowers_bridge_level(self, runner, platform):
        """Test --debug switches bridge loggers to DEBUG."""
        result = invoke(runner, platform, "--debug", "status")

        assert result.exit_code == 0
        assert logging.getLogger("android_bridge").level == logging.DEBUG

    def test_default_level(self, runner, platform):
        """Test without --debug the root level follows --log-level."""
        result = invoke(runner, platform, "--log-level", "ERROR", "status")

        assert result.exit_code == 0
        assert logging.getLogger().level == logging.ERROR
