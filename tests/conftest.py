# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Test Fixtures and Utilities

Provides pattern tables, an in-memory paginated listing client, and
logger cleanup shared by the unit tests.
"""

import logging
import os
import sys
from typing import List, Optional

import pytest

# Add src to path for imports when the package is not installed
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from sdk_registry.client import ListingClient
from sdk_registry.models import Credentials, ListingItem, ListingPage, PatternSet
from sdk_registry.patterns import PatternExtractor, PatternTable


# ============================================================================
# Listing helpers
# ============================================================================

def make_item(path: str, base_url: str = "http://nexus.example.com/repository/raw") -> ListingItem:
    """Listing item whose download URL mirrors its path"""
    return ListingItem(path=path, download_url=f"{base_url}{path}")


class FakeListingClient(ListingClient):
    """
    In-memory paginated listing.

    Page N carries continuation token "page-N+1" except the last page.
    Every call is recorded as (request_url, continuation_token, credentials).
    """

    def __init__(self, pages: List[List[ListingItem]], fail_on_page: Optional[int] = None, error=None):
        self.pages = pages
        self.fail_on_page = fail_on_page
        self.error = error
        self.calls = []
        self.closed = False

    def fetch_page(
        self,
        request_url: str,
        continuation_token: Optional[str] = None,
        credentials: Optional[Credentials] = None
    ) -> ListingPage:
        self.calls.append((request_url, continuation_token, credentials))
        index = 0 if continuation_token is None else int(continuation_token.split("-")[1]) - 1

        if self.fail_on_page is not None and index + 1 == self.fail_on_page:
            raise self.error

        next_token = f"page-{index + 2}" if index + 1 < len(self.pages) else None
        return ListingPage(items=self.pages[index], continuation_token=next_token)

    def close(self) -> None:
        self.closed = True


# ============================================================================
# Pattern fixtures
# ============================================================================

@pytest.fixture
def jdk_table():
    """Small table: two JDK vendors, one Node set, and a generic fallback"""
    return PatternTable([
        PatternSet(
            name="temurin",
            sdk_type="jdk",
            description="Eclipse Temurin",
            patterns=[
                r"(?i)OpenJDK\d+U-jdk_x64_linux_hotspot_(\d+\.\d+\.\d+_\d+)",
                r"jdk-(\d+\.\d+\.\d+_\d+)",
            ],
        ),
        PatternSet(
            name="corretto",
            sdk_type="jdk",
            description="Amazon Corretto",
            patterns=[r"(?i)amazon-corretto-(\d+\.\d+\.\d+\.\d+(?:\.\d+)?)"],
        ),
        PatternSet(
            name="nodejs",
            sdk_type="node",
            description="Node.js",
            patterns=[r"node-v(\d+\.\d+\.\d+)"],
        ),
        PatternSet(
            name="generic-version",
            sdk_type="*",
            description="Generic",
            patterns=[r"(\d+\.\d+\.\d+)"],
        ),
    ])


@pytest.fixture
def extractor(jdk_table):
    return PatternExtractor(jdk_table)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI attaches so they do not outlive captured streams"""
    yield
    package_logger = logging.getLogger("sdk_registry")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def clear_path_env(monkeypatch):
    """Keep the developer's environment from redirecting config lookups"""
    monkeypatch.delenv("SDK_REGISTRY_PATTERNS_PATH", raising=False)
    monkeypatch.delenv("SDK_REGISTRY_CONFIG_PATH", raising=False)
