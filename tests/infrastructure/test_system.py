"""Tests for host adapters."""

import sys
import webbrowser

from ptyguard.domain import Platform
from ptyguard.infrastructure.system import (
    MonotonicClock,
    WebBrowserOpener,
    detect_platform,
    host_environment,
)


class TestMonotonicClock:
    """Tests for MonotonicClock."""

    def test_returns_milliseconds(self, monkeypatch):
        """Test that seconds are converted to milliseconds."""
        monkeypatch.setattr("ptyguard.infrastructure.system.time.monotonic", lambda: 12.5)

        assert MonotonicClock().now() == 12500

    def test_never_decreases(self):
        """Test that successive readings are non-decreasing."""
        clock = MonotonicClock()
        first = clock.now()

        assert clock.now() >= first


class TestDetectPlatform:
    """Tests for detect_platform."""

    def test_matches_sys_platform(self):
        """Test that detection agrees with sys.platform."""
        expected = Platform.WINDOWS if sys.platform == "win32" else Platform.POSIX

        assert detect_platform() is expected

    def test_windows(self, monkeypatch):
        """Test Windows detection."""
        monkeypatch.setattr(sys, "platform", "win32")

        assert detect_platform() is Platform.WINDOWS


class TestHostEnvironment:
    """Tests for host_environment."""

    def test_is_a_copy(self, monkeypatch):
        """Test that the snapshot reflects os.environ and is detached."""
        monkeypatch.setenv("PTYGUARD_TEST_VAR", "value")

        env = host_environment()
        env["PTYGUARD_TEST_VAR"] = "changed"

        assert host_environment()["PTYGUARD_TEST_VAR"] == "value"


class TestWebBrowserOpener:
    """Tests for WebBrowserOpener."""

    def test_delegates_to_webbrowser(self, monkeypatch):
        """Test that the URL is handed to webbrowser.open."""
        opened = []
        monkeypatch.setattr(webbrowser, "open", lambda url: opened.append(url) or True)

        assert WebBrowserOpener()("https://example.com") is True
        assert opened == ["https://example.com"]

    def test_browser_error_returns_false(self, monkeypatch):
        """Test that a webbrowser error is reported as failure."""

        def fail(url):
            raise webbrowser.Error("no browser")

        monkeypatch.setattr(webbrowser, "open", fail)

        assert WebBrowserOpener()("https://example.com") is False
