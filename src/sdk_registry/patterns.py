# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Pattern Registry & Extractor

Single responsibility: Match listing paths against ordered pattern sets

Matching is first-match-wins, not best-match: pattern sets are tried in table
order and, inside a set, regexes are tried in list order. Ordering patterns
from most specific to most generic is the patterns-file author's job.
"""

import logging
import re
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Pattern

from .models import Extraction, PatternSet

logger = logging.getLogger(__name__)


class PatternTable:
    """Immutable, ordered table of pattern sets"""

    def __init__(self, pattern_sets: Iterable[PatternSet] = ()):
        """
        Initialize pattern table.

        Args:
            pattern_sets: Pattern sets in priority order (stored verbatim)
        """
        self._pattern_sets = tuple(pattern_sets)

    def __iter__(self) -> Iterator[PatternSet]:
        return iter(self._pattern_sets)

    def __len__(self) -> int:
        return len(self._pattern_sets)

    def __getitem__(self, index: int) -> PatternSet:
        return self._pattern_sets[index]

    def __repr__(self) -> str:
        return f"PatternTable({[ps.name for ps in self._pattern_sets]!r})"

    def names(self) -> List[str]:
        return [ps.name for ps in self._pattern_sets]

    def prepend(self, pattern_sets: Iterable[PatternSet]) -> "PatternTable":
        """Return a new table with *pattern_sets* tried before this one."""
        return PatternTable(tuple(pattern_sets) + self._pattern_sets)


class PatternExtractor:
    """
    Extracts versions from listing paths using a PatternTable.

    The table is never mutated, so one extractor can be shared by concurrent
    resolutions. Compiled regexes are cached per extractor; a regex that
    fails to compile is logged once and skipped from then on.
    """

    def __init__(self, table: PatternTable):
        """
        Initialize extractor.

        Args:
            table: Pattern table loaded from configuration
        """
        self.table = table
        self._compiled: Dict[str, Optional[Pattern]] = {}

    def _compile(self, regex: str) -> Optional[Pattern]:
        if regex in self._compiled:
            return self._compiled[regex]

        try:
            compiled = re.compile(regex)
        except re.error as e:
            logger.debug(f"Invalid regex pattern {regex!r}: {e}")
            compiled = None

        self._compiled[regex] = compiled
        return compiled

    def _extract(
        self,
        path: str,
        include: Callable[[PatternSet], bool],
        scope: str
    ) -> Optional[Extraction]:
        for pattern_set in self.table:
            if not include(pattern_set):
                continue

            for regex in pattern_set.patterns:
                compiled = self._compile(regex)
                if compiled is None:
                    continue

                match = compiled.search(path)
                if match is None or not match.re.groups:
                    continue

                version = match.group(1)
                if not version:
                    continue

                logger.debug(
                    f"Matched pattern '{pattern_set.name}' ({pattern_set.description}): "
                    f"extracted version {version} from {path}"
                )
                return Extraction(version, pattern_set.name)

        logger.debug(f"No pattern matched for path: {path}{scope}")
        return None

    def extract_any(self, path: str) -> Optional[Extraction]:
        """
        Extract a version using every pattern set in table order.

        Args:
            path: Listing path or URL

        Returns:
            Extraction (version, pattern name), or None if nothing matched
        """
        return self._extract(path, lambda ps: True, "")

    def extract_by_type(self, path: str, sdk_type: str) -> Optional[Extraction]:
        """
        Extract a version using only pattern sets for *sdk_type* or any type.

        Args:
            path: Listing path or URL
            sdk_type: SDK type being resolved (e.g. "jdk", "node")

        Returns:
            Extraction (version, pattern name), or None if nothing matched
        """
        return self._extract(
            path,
            lambda ps: ps.sdk_type.accepts(sdk_type),
            f" (type: {sdk_type})"
        )

    def extract_by_distribution(self, path: str, distribution: str) -> Optional[Extraction]:
        """
        Extract a version using only the pattern set named *distribution*.

        Args:
            path: Listing path or URL
            distribution: Pattern set name

        Returns:
            Extraction (version, pattern name), or None if nothing matched
        """
        return self._extract(
            path,
            lambda ps: ps.name == distribution,
            f" (distribution: {distribution})"
        )

    def patterns_by_type(self, sdk_type: str) -> List[PatternSet]:
        """All pattern sets that apply to *sdk_type*, in table order."""
        return [ps for ps in self.table if ps.sdk_type.accepts(sdk_type)]

    def pattern_by_name(self, name: str) -> Optional[PatternSet]:
        for pattern_set in self.table:
            if pattern_set.name == name:
                return pattern_set
        return None

    def list_patterns(self) -> List[PatternSet]:
        return list(self.table)

    def with_custom_patterns(self, custom: Iterable[PatternSet]) -> "PatternExtractor":
        """
        Build an extractor that tries *custom* pattern sets before this table.

        Args:
            custom: Additional pattern sets, highest priority first

        Returns:
            New PatternExtractor; this one is left untouched
        """
        table = self.table.prepend(custom)
        logger.debug(f"Added custom patterns (total: {len(table)})")
        return PatternExtractor(table)
