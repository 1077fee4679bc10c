# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Patterns File Loader

Single responsibility: Load the user-editable pattern table from TOML

File location priority:
1. SDK_REGISTRY_PATTERNS_PATH environment variable
2. patterns_file from the application config
3. sdkpatterns.toml in the current directory
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import tomli_w

from .builtin_patterns import BUILTIN_PATTERN_SETS
from .errors import PatternConfigError
from .models import PatternSet
from .patterns import PatternExtractor, PatternTable

logger = logging.getLogger(__name__)

PATTERNS_PATH_ENV = "SDK_REGISTRY_PATTERNS_PATH"
DEFAULT_PATTERNS_FILE = "sdkpatterns.toml"

PATTERNS_FILE_HEADER = """\
# SDK Version Parsing Patterns
#
# Regex patterns for extracting versions from SDK distribution paths.
# Edit this file to add your own distributions.
#
# PATTERN STRUCTURE:
# [[patterns]]
# name = "provider-name"     # Unique identifier for the pattern set
# type = "jdk"               # SDK type (jdk, node, python, ...) or "*" for any
# description = "..."        # Human-readable description
# patterns = [               # Regexes tried in order, one capture group each
#     "(?i)pattern1...",
# ]
#
# Pattern sets are tried in file order and the first match wins:
# keep specific distributions above generic fallbacks.

"""


def get_patterns_file_path(configured_path: Optional[str] = None) -> Path:
    """
    Resolve the patterns file path.

    Args:
        configured_path: patterns_file from the application config (may be empty)

    Returns:
        Path to the patterns file
    """
    env_path = os.getenv(PATTERNS_PATH_ENV)
    if env_path:
        return Path(env_path)
    if configured_path:
        return Path(configured_path)
    return Path(DEFAULT_PATTERNS_FILE)


def parse_pattern_table(data: Dict[str, Any], source: str = "<memory>") -> PatternTable:
    """
    Build a PatternTable from decoded patterns-file data.

    Args:
        data: Decoded TOML document with a [[patterns]] array
        source: File name used in error messages

    Returns:
        PatternTable in file order

    Raises:
        PatternConfigError: If the structure is invalid or names repeat
    """
    entries = data.get("patterns", [])
    if not isinstance(entries, list):
        raise PatternConfigError(
            f"'patterns' must be an array of tables in {source}",
            config_file=source
        )

    pattern_sets = []
    seen_names = set()

    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise PatternConfigError(
                f"patterns[{index}] must be a table in {source}",
                config_file=source
            )
        try:
            pattern_set = PatternSet.from_dict(entry)
        except ValueError as e:
            raise PatternConfigError(
                f"patterns[{index}] in {source}: {e}",
                config_file=source
            ) from e

        if pattern_set.name in seen_names:
            raise PatternConfigError(
                f"Duplicate pattern set name '{pattern_set.name}' in {source}",
                config_file=source
            )
        seen_names.add(pattern_set.name)
        pattern_sets.append(pattern_set)

    return PatternTable(pattern_sets)


class PatternFileLoader:
    """Loads and seeds the TOML patterns file"""

    def __init__(self, path: Path):
        """
        Initialize patterns file loader.

        Args:
            path: Path to the patterns file
        """
        self.path = Path(path)

    @classmethod
    def from_config(cls, configured_path: Optional[str] = None) -> "PatternFileLoader":
        return cls(get_patterns_file_path(configured_path))

    def ensure(self, pattern_sets: Iterable[PatternSet] = BUILTIN_PATTERN_SETS) -> bool:
        """
        Create the patterns file from the built-in table if it does not exist.

        Args:
            pattern_sets: Pattern sets to write into a new file

        Returns:
            True if a file was created

        Raises:
            PatternConfigError: If the file cannot be written
        """
        if self.path.exists():
            logger.debug(f"Patterns file already exists: {self.path}")
            return False

        logger.debug(f"Creating default patterns file: {self.path}")
        document = {"patterns": [ps.to_dict() for ps in pattern_sets]}

        try:
            if self.path.parent != Path("."):
                self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(PATTERNS_FILE_HEADER + tomli_w.dumps(document), encoding="utf-8")
        except OSError as e:
            raise PatternConfigError(
                f"Failed to create patterns file: {e}",
                config_file=str(self.path)
            ) from e

        logger.info(f"Created patterns file: {self.path}")
        return True

    def load(self, create_missing: bool = True) -> PatternTable:
        """
        Load the pattern table.

        Args:
            create_missing: Seed a missing file with the built-in patterns first

        Returns:
            PatternTable in file order

        Raises:
            PatternConfigError: If the file is missing, unreadable or invalid
        """
        if create_missing:
            try:
                self.ensure()
            except PatternConfigError as e:
                logger.debug(f"Failed to ensure patterns file: {e}")

        try:
            with open(self.path, "rb") as f:
                data = tomllib.load(f)
        except OSError as e:
            raise PatternConfigError(
                f"Failed to read patterns file {self.path}: {e}",
                config_file=str(self.path)
            ) from e
        except tomllib.TOMLDecodeError as e:
            raise PatternConfigError(
                f"Failed to parse patterns file {self.path}: {e}",
                config_file=str(self.path)
            ) from e

        table = parse_pattern_table(data, source=str(self.path))
        logger.debug(f"Loaded {len(table)} pattern sets from {self.path}")
        return table


def load_extractor(
    configured_path: Optional[str] = None,
    custom_patterns: Optional[Iterable[PatternSet]] = None
) -> PatternExtractor:
    """
    Load the patterns file and build an extractor.

    Args:
        configured_path: patterns_file from the application config
        custom_patterns: Pattern sets to try before the file's own

    Returns:
        PatternExtractor over the loaded table
    """
    table = PatternFileLoader.from_config(configured_path).load()
    extractor = PatternExtractor(table)
    if custom_patterns:
        extractor = extractor.with_custom_patterns(custom_patterns)
    return extractor
