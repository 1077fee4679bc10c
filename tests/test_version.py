# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Unit Tests for the Version Comparator

Tests major-version extraction and part-by-part version ordering across
the vendor spellings seen in SDK registries.
"""

import itertools

import pytest

from sdk_registry.version import (
    compare_versions,
    extract_major,
    major_or_unknown,
    version_sort_key,
)


class TestExtractMajor:
    """Test suite for extract_major"""

    @pytest.mark.parametrize("version,expected", [
        ("11.0.26_4", "11"),
        ("17.0.11_10", "17"),
        ("21.0.6_7", "21"),
        ("8u442b06", "8"),
        ("8u432b06", "8"),
        ("22.13.1", "22"),
        ("jdk-17.0.11", "17"),
        ("jdk_11.0.26_4", "11"),
        ("11.0.29.7.1", "11"),
        ("8.472.08.1", "8"),
        ("25.0.1", "25"),
        ("17.0.11+7.1", "17"),
        ("21.0", "21"),
    ])
    def test_extracts_major(self, version, expected):
        """Test dotted, legacy and prefixed spellings"""
        assert extract_major(version) == expected

    def test_legacy_update_style(self):
        """Test the Java 8 'u' separator"""
        assert extract_major("8u442b06") == "8"

    def test_bare_number_is_not_a_version(self):
        """Test that a standalone integer yields no major"""
        assert extract_major("21") == ""

    def test_empty_string(self):
        """Test empty input yields empty output"""
        assert extract_major("") == ""

    def test_no_version_info(self):
        """Test a word with no digits"""
        assert extract_major("invalid") == ""

    def test_prefix_without_separator(self):
        """Test a prefixed bare number is still rejected"""
        assert extract_major("jdk-21") == ""

    def test_consistent_for_same_major(self):
        """Test that every Java 11 build maps to '11'"""
        for version in ("11.0.26_4", "11.0.27_5", "11.0.28_6"):
            assert extract_major(version) == "11"

    def test_major_or_unknown(self):
        """Test the display fallback for versions without a major"""
        assert major_or_unknown("11.0.26_4") == "11"
        assert major_or_unknown("21") == "unknown"


class TestCompareVersions:
    """Test suite for compare_versions"""

    @pytest.mark.parametrize("v1,v2,expected", [
        ("11.0.26_4", "11.0.27_5", True),
        ("11.0.27_5", "11.0.26_4", False),
        ("11.0.26_4", "11.0.26_4", False),
        ("11.0.26_4", "17.0.11_10", True),
        ("17.0.11_10", "11.0.26_4", False),
        ("8u432b06", "8u442b06", True),
        ("8u442b06", "8u432b06", False),
        ("21.0.6", "21.0.6_7", True),
        ("21.0.6_7", "21.0.6", False),
        ("11.0.26_4", "11.0.26_5", True),
        ("20.18.1", "22.13.1", True),
        ("11.0.28.6.1", "11.0.29.7.1", True),
        ("8u442b06", "11.0.26_4", True),
    ])
    def test_ordering(self, v1, v2, expected):
        """Test older-than results across vendor formats"""
        assert compare_versions(v1, v2) is expected

    def test_shorter_version_is_older(self):
        """Test that a missing build suffix sorts first"""
        assert compare_versions("21.0.6", "21.0.6_7") is True

    def test_numeric_parts_compare_numerically(self):
        """Test that 9 < 10 rather than '10' < '9'"""
        assert compare_versions("11.0.9", "11.0.10") is True

    def test_non_numeric_parts_compare_lexicographically(self):
        """Test fallback to string comparison for mixed parts"""
        assert compare_versions("1.0.beta", "1.0.rc") is True
        assert compare_versions("1.0.rc", "1.0.beta") is False

    def test_never_both_older(self):
        """Test that x < y and y < x never hold together"""
        versions = [
            "11.0.26_4", "11.0.27_5", "8u442b06", "8u432b06", "21.0.6",
            "21.0.6_7", "22.13.1", "11.0.29.7.1", "17.0.11+7.1", "jdk-17",
            "1.0.beta", "1.0.rc", "", "21",
        ]
        for x, y in itertools.permutations(versions, 2):
            assert not (compare_versions(x, y) and compare_versions(y, x)), (x, y)

    def test_sort_key_orders_oldest_first(self):
        """Test semantic sorting with the comparator key"""
        versions = ["21.0.6_7", "11.0.26_4", "21.0.6", "17.0.11_10", "11.0.9_1"]
        assert sorted(versions, key=version_sort_key) == [
            "11.0.9_1", "11.0.26_4", "17.0.11_10", "21.0.6", "21.0.6_7"
        ]
