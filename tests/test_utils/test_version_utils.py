"""Unit tests for calbump.utils.version_utils.

Test Coverage:
- PEP 440 normal form of calver strings
- Ordering checks between consecutive versions
- Invalid and missing input
"""

from __future__ import annotations

import pytest

from calbump.utils.version_utils import is_newer, to_pep440


@pytest.mark.unit
class TestToPep440:
    """Tests for to_pep440."""

    @pytest.mark.parametrize(
        "version, expected",
        [
            ("26.10.0", "26.10.0"),
            ("2021.1.1.0-alpha.1", "2021.1.1.0a1"),
            ("2021.1.1-beta.2", "2021.1.1b2"),
            ("2021.1.1-rc.0", "2021.1.1rc0"),
        ],
    )
    def test_valid(self, version: str, expected: str) -> None:
        assert to_pep440(version) == expected

    @pytest.mark.parametrize("version", ["invalid.version", "2021.1.1-nightly.3", "", None])
    def test_invalid(self, version) -> None:
        assert to_pep440(version) is None


@pytest.mark.unit
class TestIsNewer:
    """Tests for is_newer."""

    def test_calendar_rollover_is_newer(self) -> None:
        assert is_newer("26.8.3", "26.10.0") is True

    def test_minor_bump_is_newer(self) -> None:
        assert is_newer("26.10.0", "26.10.1") is True

    def test_prerelease_bump_is_newer(self) -> None:
        assert is_newer("2021.1.1.0-alpha.0", "2021.1.1.0-alpha.1") is True

    def test_same_version_is_not_newer(self) -> None:
        assert is_newer("26.10.0", "26.10.0") is False

    def test_older_version(self) -> None:
        assert is_newer("26.10.4", "26.1.0") is False

    def test_invalid_side_returns_none(self) -> None:
        assert is_newer("invalid.version", "26.10.0") is None
        assert is_newer("26.10.0", None) is None
