# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Unit Tests for Major-Version Grouping
"""

from sdk_registry.grouping import available_majors, filter_by_major, group_by_major, sort_semantic
from sdk_registry.models import ResolvedAsset


def make_asset(version: str) -> ResolvedAsset:
    return ResolvedAsset(
        version=version,
        download_url=f"http://nexus.example.com/jdk-{version}.tar.gz",
        pattern_name="temurin",
        path=f"/jdk/jdk-{version}.tar.gz",
    )


class TestGroupByMajor:
    """Test suite for group_by_major"""

    def test_groups_and_orders(self):
        """Test majors ascend numerically and versions ascend within a group"""
        versions = ["21.0.6_7", "8u442b06", "11.0.25_9", "11.0.9_1", "17.0.15_6", "21.0.10_7"]

        groups = group_by_major(versions)

        assert list(groups) == [8, 11, 17, 21]
        assert groups[11] == ["11.0.9_1", "11.0.25_9"]
        assert groups[21] == ["21.0.6_7", "21.0.10_7"]
        assert groups[8] == ["8u442b06"]

    def test_versions_without_major_dropped(self):
        """Test versions with no recognisable major are left out"""
        groups = group_by_major(["21", "latest", "17.0.1"])
        assert groups == {17: ["17.0.1"]}

    def test_empty(self):
        assert group_by_major([]) == {}


class TestMajorFilter:
    """Test suite for filter_by_major and available_majors"""

    def test_filter_equality(self):
        """Test major 1 does not match 11 or 17"""
        assets = [make_asset(v) for v in ["1.8.0", "11.0.2", "17.0.1"]]

        assert [a.version for a in filter_by_major(assets, "1")] == ["1.8.0"]
        assert [a.version for a in filter_by_major(assets, "11")] == ["11.0.2"]
        assert filter_by_major(assets, "21") == []

    def test_available_majors(self):
        assert available_majors(["21.0.1", "8u392b08", "11.0.2", "21.0.2", "x"]) == [8, 11, 21]


class TestSortSemantic:
    """Test suite for sort_semantic"""

    def test_numeric_order(self):
        """Test assets are ordered with compare_versions, oldest first"""
        assets = [make_asset(v) for v in ["8.442.06.1", "21.0.9.11.1", "11.0.24.7.1", "17.0.15.8.1"]]

        assert [a.version for a in sort_semantic(assets)] == [
            "8.442.06.1", "11.0.24.7.1", "17.0.15.8.1", "21.0.9.11.1"
        ]

    def test_underscore_build_numbers(self):
        assets = [make_asset(v) for v in ["11.0.24_8", "11.0.24_10", "11.0.9_1"]]

        assert [a.version for a in sort_semantic(assets)] == ["11.0.9_1", "11.0.24_8", "11.0.24_10"]
