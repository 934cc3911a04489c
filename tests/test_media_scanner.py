"""Tests for media index requests."""

import threading

import pytest

from android_bridge.core.completion import FutureTimeoutError
from android_bridge.core.errors import DeviceError, ErrorCode, InvalidArgumentError
from android_bridge.core.media import MediaIndexRequester, wait_for_scan
from android_bridge.models import ScanFailure, ScanSuccess

from .fakes import FakePlatform

REPORT = "/storage/emulated/0/Download/report.pdf"


class TestRequestScan:
    """Test cases for MediaIndexRequester.request_scan."""

    @pytest.mark.parametrize("path", [None, "", "   "])
    def test_missing_path_is_invalid_argument(self, platform, path):
        """Test absent paths fail before the platform is touched."""
        requester = MediaIndexRequester(platform)

        with pytest.raises(InvalidArgumentError) as exc_info:
            requester.request_scan(path)

        assert exc_info.value.code == ErrorCode.INVALID_ARGUMENT
        assert platform.scans == []

    def test_null_path_message(self, platform):
        """Test the message reported for a null path."""
        with pytest.raises(InvalidArgumentError, match="File path is null"):
            MediaIndexRequester(platform).request_scan(None)

    def test_relative_path_is_invalid_argument(self, platform):
        """Test relative paths are rejected."""
        with pytest.raises(InvalidArgumentError, match="not absolute"):
            MediaIndexRequester(platform).request_scan("Download/report.pdf")
        assert platform.scans == []

    def test_path_is_passed_through_unchanged(self, platform):
        """Test surrounding whitespace is validated but not stripped."""
        path = REPORT + " "

        outcome = MediaIndexRequester(platform).request_scan(path).result(timeout=1)

        assert platform.scans == [path]
        assert outcome.indexed_path == path

    def test_echoed_path_is_success(self, platform):
        """Test the indexed path reported by the platform is returned."""
        future = MediaIndexRequester(platform).request_scan(REPORT)

        outcome = wait_for_scan(future, timeout=1)

        assert isinstance(outcome, ScanSuccess)
        assert outcome.indexed_path == REPORT
        assert outcome.uri == "content://media/external/file/7"
        assert outcome.message == f"File scanned: {REPORT}"
        assert platform.scans == [REPORT]

    def test_issue_exception_becomes_scan_failure(self):
        """Test an exception issuing the scan is reported, not raised."""
        platform = FakePlatform(scan_error=DeviceError("device offline"))

        future = MediaIndexRequester(platform).request_scan(REPORT)

        outcome = future.result(timeout=1)
        assert isinstance(outcome, ScanFailure)
        assert outcome.code is ErrorCode.SCAN_ERROR
        assert outcome.reason == "Failed to scan file: device offline"

    def test_result_waits_for_callback(self):
        """Test the outcome is only available once the platform reports."""
        platform = FakePlatform(echo_scans=False)
        future = MediaIndexRequester(platform).request_scan(REPORT)

        assert not future.done()
        with pytest.raises(FutureTimeoutError):
            wait_for_scan(future, timeout=0.01)

        platform.pending[REPORT](REPORT, None)

        assert future.done()
        assert future.result().indexed_path == REPORT

    def test_only_first_completion_counts(self):
        """Test repeated callbacks do not replace the outcome."""
        platform = FakePlatform(echo_scans=False)
        future = MediaIndexRequester(platform).request_scan(REPORT)

        platform.pending[REPORT](REPORT, "content://media/external/file/1")
        platform.pending[REPORT]("/other", "content://media/external/file/2")

        assert future.result().uri == "content://media/external/file/1"

    def test_callback_from_other_thread(self):
        """Test a scan completed from a platform thread."""
        platform = FakePlatform(echo_scans=False)
        future = MediaIndexRequester(platform).request_scan(REPORT)
        seen = []
        future.add_done_callback(seen.append)

        worker = threading.Thread(
            target=platform.pending[REPORT], args=(REPORT, None), name="media-scan"
        )
        worker.start()
        worker.join(timeout=1)

        assert future.result(timeout=1).indexed_path == REPORT
        assert seen == [future]

    def test_concurrent_requests_are_independent(self):
        """Test futures resolve in whatever order the platform reports."""
        platform = FakePlatform(echo_scans=False)
        requester = MediaIndexRequester(platform)
        first = requester.request_scan("/sdcard/a.jpg")
        second = requester.request_scan("/sdcard/b.jpg")

        platform.pending["/sdcard/b.jpg"]("/sdcard/b.jpg", None)

        assert second.done()
        assert not first.done()
