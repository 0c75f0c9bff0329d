"""Tests for dotted-numeric version comparison."""
from __future__ import annotations

import pytest

from src.version_gate.comparator import is_version_at_least


class TestIsVersionAtLeast:
    def test_equal_versions(self):
        assert is_version_at_least("7.2.0", "7.2.0") is True

    def test_older_patch_fails(self):
        assert is_version_at_least("7.1.9", "7.2.0") is False

    def test_segments_compare_numerically(self):
        assert is_version_at_least("7.10.0", "7.9.5") is True
        assert is_version_at_least("7.9.5", "7.10.0") is False

    def test_missing_segments_count_as_zero(self):
        assert is_version_at_least("7.2", "7.2.0") is True
        assert is_version_at_least("4.9", "4.9.1") is False

    def test_newer_major(self):
        assert is_version_at_least("8.0", "7.2.0") is True

    @pytest.mark.parametrize(
        "current, required, expected",
        [
            ("6.4.3", "4.9", True),
            ("4.8.9", "4.9", False),
            ("3.12.1", "3.9", True),
            ("3.8.18", "3.9", False),
        ],
    )
    def test_typical_pairs(self, current, required, expected):
        assert is_version_at_least(current, required) is expected


class TestMalformedVersions:
    def test_distro_suffix_uses_numeric_prefix(self):
        assert is_version_at_least("7.4.3-1ubuntu1", "7.2.0") is True
        assert is_version_at_least("7.1.3-1ubuntu1", "7.2.0") is False

    def test_empty_current_never_raises(self):
        assert is_version_at_least("", "7.2.0") is False

    def test_garbage_on_both_sides_never_raises(self):
        assert is_version_at_least("not-a-version", "also bad") is True

    def test_garbage_required_is_satisfied_by_anything(self):
        assert is_version_at_least("1.0", "unknown") is True
