# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Version Comparator

Single responsibility: Extract major versions and order vendor version strings

Two vendor conventions dominate SDK file names: dotted versions with an
optional build suffix ("11.0.26_4", "21.0.6_7", "11.0.29.7.1") and the legacy
Java 8 update style ("8u442b06"). Neither is SemVer, so ordering is done
part by part after normalizing the "u" and "_" separators to dots.

Only compare versions that come from the same distribution; mixing the
legacy and dotted styles gives an ordering that is not guaranteed to be
transitive.
"""

import functools
import re
import string
from typing import Callable, Optional

_MAJOR_PATTERNS = (
    re.compile(r"^([0-9]+)\..*", re.ASCII),  # 11.0.26_4, 21.0.6_7
    re.compile(r"^([0-9]+)u.*", re.ASCII),   # 8u442b06
)

_PREFIX_CHARS = string.ascii_letters + "-_"

_INTEGER = re.compile(r"[+-]?[0-9]+", re.ASCII)

UNKNOWN_MAJOR = "unknown"


def extract_major(version: str) -> str:
    """
    Extract the major version from a full version string.

    Examples:
        "11.0.26_4" -> "11"
        "8u442b06" -> "8"
        "jdk-17.0.11" -> "17"
        "21" -> "" (a bare number is not a versioned string)
        "" -> ""

    Args:
        version: Version string as extracted from a listing path

    Returns:
        Major version digits, or an empty string when none can be found
    """
    if not version:
        return ""

    for pattern in _MAJOR_PATTERNS:
        match = pattern.match(version)
        if match:
            return match.group(1)

    # Drop a vendor prefix such as "jdk-" and retry on the remainder
    cleaned = version.lstrip(_PREFIX_CHARS)

    # A standalone number like "21" may be folder metadata, not a version
    if "." not in cleaned and "u" not in cleaned:
        return ""

    major_part = cleaned.split(".")[0].split("u")[0]
    if _INTEGER.fullmatch(major_part):
        return major_part

    return ""


def major_or_unknown(version: str) -> str:
    """Major version of *version*, or "unknown" when it has none."""
    return extract_major(version) or UNKNOWN_MAJOR


def _normalize(version: str) -> list:
    return version.replace("u", ".").replace("_", ".").split(".")


def _as_int(part: str) -> Optional[int]:
    if _INTEGER.fullmatch(part):
        return int(part)
    return None


def compare_versions(v1: str, v2: str) -> bool:
    """
    Return True if *v1* is older than *v2*.

    Both strings are normalized ("8u442b06" -> "8.442b06",
    "11.0.26_4" -> "11.0.26.4") and compared part by part. Numeric parts
    compare numerically; if either part is not numeric the pair compares
    lexicographically. When every shared part is equal the version with
    fewer parts is older, so "21.0.6" is older than "21.0.6_7".

    Args:
        v1: First version
        v2: Second version

    Returns:
        True when v1 sorts strictly before v2
    """
    parts1 = _normalize(v1)
    parts2 = _normalize(v2)

    for left, right in zip(parts1, parts2):
        n1 = _as_int(left)
        n2 = _as_int(right)

        if n1 is None or n2 is None:
            if left < right:
                return True
            if left > right:
                return False
            continue

        if n1 < n2:
            return True
        if n1 > n2:
            return False

    return len(parts1) < len(parts2)


def _compare(v1: str, v2: str) -> int:
    if compare_versions(v1, v2):
        return -1
    if compare_versions(v2, v1):
        return 1
    return 0


version_sort_key: Callable[[str], object] = functools.cmp_to_key(_compare)
"""Sort key ordering versions oldest first by compare_versions."""
