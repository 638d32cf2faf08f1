"""Tests for Platform."""

import pytest

from ptyguard.domain import Platform


class TestPlatform:
    """Tests for Platform.from_tag."""

    @pytest.mark.parametrize(
        ("tag", "expected"),
        [
            ("posix", Platform.POSIX),
            ("POSIX", Platform.POSIX),
            ("linux", Platform.POSIX),
            ("linux2", Platform.POSIX),
            ("darwin", Platform.POSIX),
            ("freebsd14", Platform.POSIX),
            ("windows", Platform.WINDOWS),
            ("win32", Platform.WINDOWS),
            (Platform.WINDOWS, Platform.WINDOWS),
        ],
    )
    def test_known_tags(self, tag, expected):
        """Test that known tags resolve."""
        assert Platform.from_tag(tag) is expected

    @pytest.mark.parametrize("tag", ["", "win", "beos", None, 3])
    def test_unknown_tags(self, tag):
        """Test that unknown tags resolve to None."""
        assert Platform.from_tag(tag) is None
