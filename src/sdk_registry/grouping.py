# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Major-version grouping for human-readable version listings.

This is the display ordering: groups by numeric major, versions inside a
group ordered by compare_versions. The resolver's own result order (plain
string sort) is left alone.
"""

from typing import Dict, Iterable, List

from .models import ResolvedAsset
from .version import extract_major, version_sort_key


def group_by_major(versions: Iterable[str]) -> Dict[int, List[str]]:
    """
    Group versions by major version.

    Args:
        versions: Version strings from one distribution

    Returns:
        Mapping of major -> versions (oldest first), majors ascending.
        Versions with no major version are left out.
    """
    groups: Dict[int, List[str]] = {}
    for version in versions:
        major = extract_major(version)
        if not major:
            continue
        groups.setdefault(int(major), []).append(version)

    return {
        major: sorted(groups[major], key=version_sort_key)
        for major in sorted(groups)
    }


def available_majors(versions: Iterable[str]) -> List[int]:
    """Distinct major versions, ascending."""
    return sorted({int(m) for m in map(extract_major, versions) if m})


def filter_by_major(assets: Iterable[ResolvedAsset], major: str) -> List[ResolvedAsset]:
    """Keep assets whose major version equals *major*."""
    return [asset for asset in assets if extract_major(asset.version) == major]


def sort_semantic(assets: Iterable[ResolvedAsset]) -> List[ResolvedAsset]:
    """Order assets oldest first by compare_versions."""
    return sorted(assets, key=lambda asset: version_sort_key(asset.version))
