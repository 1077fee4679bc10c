# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Built-in pattern sets used to seed a missing patterns file.

Vendor-specific sets come first and the generic fallback last, since
extraction is first-match-wins.
"""

from .models import PatternSet

BUILTIN_PATTERN_SETS = (
    PatternSet(
        name="temurin",
        sdk_type="jdk",
        description="Eclipse Temurin (AdoptOpenJDK)",
        patterns=(
            r"(?i)OpenJDK\d+U-jdk_[a-z0-9]+_[a-z]+_hotspot_(\d+\.\d+\.\d+_\d+)",
            r"(?i)OpenJDK8U-jdk_[a-z0-9]+_[a-z]+_hotspot_(8u\d+b\d+)",
            r"(?i)jdk-(\d+\.\d+\.\d+_\d+)",
            r"(?i)jdk(8u\d+-b\d+)",
        ),
    ),
    PatternSet(
        name="corretto",
        sdk_type="jdk",
        description="Amazon Corretto",
        patterns=(
            r"(?i)amazon-corretto-(\d+\.\d+\.\d+\.\d+(?:\.\d+)?)",
            r"(?i)corretto-(\d+\.\d+\.\d+\.\d+(?:\.\d+)?)",
        ),
    ),
    PatternSet(
        name="zulu",
        sdk_type="jdk",
        description="Azul Zulu",
        patterns=(
            r"(?i)zulu\d+\.\d+\.\d+-ca-jdk(\d+\.\d+\.\d+)",
        ),
    ),
    PatternSet(
        name="graalvm",
        sdk_type="jdk",
        description="GraalVM Community Edition",
        patterns=(
            r"(?i)graalvm-community-jdk-(\d+\.\d+\.\d+)",
            r"(?i)graalvm-jdk-(\d+\.\d+\.\d+(?:\+\d+\.\d+)?)",
        ),
    ),
    PatternSet(
        name="liberica",
        sdk_type="jdk",
        description="BellSoft Liberica",
        patterns=(
            r"(?i)bellsoft-jdk(\d+\.\d+\.\d+\+\d+)",
            r"(?i)bellsoft-jdk(8u\d+\+\d+)",
        ),
    ),
    PatternSet(
        name="nodejs",
        sdk_type="node",
        description="Node.js official builds",
        patterns=(
            r"(?i)node-v(\d+\.\d+\.\d+)",
        ),
    ),
    PatternSet(
        name="cpython",
        sdk_type="python",
        description="CPython source and standalone builds",
        patterns=(
            r"(?i)Python-(\d+\.\d+\.\d+)",
            r"(?i)cpython-(\d+\.\d+\.\d+)",
        ),
    ),
    PatternSet(
        name="generic-version",
        sdk_type="*",
        description="Generic dotted version",
        patterns=(
            r"(\d+\.\d+\.\d+)",
        ),
    ),
)
