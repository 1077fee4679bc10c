# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Registry Listing Resolver

Single responsibility: Turn a paginated registry listing into installable versions

Pipeline: exhaust every page -> keep items under the distribution prefix ->
extract a version per item (type-filtered patterns) -> keep the first item
per version -> optional substring filter -> sort descending.
"""

import logging
from typing import List, Optional

from .client import ListingClient
from .errors import NoVersionsFoundError
from .models import Credentials, ListingItem, ResolvedAsset
from .patterns import PatternExtractor

logger = logging.getLogger(__name__)


def normalize_prefix(path: str) -> str:
    """
    Normalize a distribution path to "/segment/.../" form.

    "jdk/temurin" -> "/jdk/temurin/". The trailing slash makes prefix checks
    stop at a segment boundary, so "/jdk/temurin-nightly/x" is not under
    "/jdk/temurin/".
    """
    prefix = "/" + path.removeprefix("/")
    if not prefix.endswith("/"):
        prefix += "/"
    return prefix


class RegistryResolver:
    """Resolves the available versions of one distribution from a registry"""

    def __init__(self, extractor: PatternExtractor, client: ListingClient):
        """
        Initialize resolver.

        Args:
            extractor: Pattern extractor (shared, read-only)
            client: Listing client used for page fetches
        """
        self.extractor = extractor
        self.client = client

    def collect_items(
        self,
        request_url: str,
        credentials: Optional[Credentials] = None
    ) -> List[ListingItem]:
        """
        Fetch every page of a listing.

        Pages are requested strictly one after another; the loop ends on the
        first page without a continuation token. A failed fetch aborts the
        loop and propagates.

        Args:
            request_url: Listing endpoint for the first page
            credentials: Optional credentials sent with every page request

        Returns:
            All items from all pages, in arrival order

        Raises:
            TransportError: If any page fetch fails
        """
        items: List[ListingItem] = []
        continuation_token = None
        page_count = 0

        while True:
            page_count += 1
            logger.debug(f"Fetching page {page_count} from registry...")

            page = self.client.fetch_page(request_url, continuation_token, credentials)
            logger.debug(f"Received {len(page.items)} items on page {page_count}")
            items.extend(page.items)

            if page.is_last:
                break
            continuation_token = page.continuation_token

        logger.debug(f"Pagination complete after {page_count} pages. Total items: {len(items)}")
        return items

    def resolve(
        self,
        request_url: str,
        path_prefix: str,
        sdk_type: str,
        version_filter: Optional[str] = None,
        credentials: Optional[Credentials] = None
    ) -> List[ResolvedAsset]:
        """
        Resolve the versions available under *path_prefix*.

        Args:
            request_url: Listing endpoint
            path_prefix: Distribution path, e.g. "jdk/adoptium/temurin"
                (empty disables prefix filtering)
            sdk_type: SDK type used to select pattern sets
            version_filter: Keep only versions containing this substring
            credentials: Optional registry credentials

        Returns:
            Assets sorted by version string, newest-looking first

        Raises:
            TransportError: If a page fetch fails
            NoVersionsFoundError: If no asset survives filtering
        """
        items = self.collect_items(request_url, credentials)
        prefix = normalize_prefix(path_prefix) if path_prefix else ""

        assets: List[ResolvedAsset] = []
        seen_versions = set()
        ignored: List[str] = []

        for item in items:
            if prefix and not item.path.startswith(prefix):
                ignored.append(item.path)
                continue

            extraction = self.extractor.extract_by_type(item.path, sdk_type)
            if extraction is None:
                ignored.append(item.path)
                continue

            if extraction.version in seen_versions:
                continue
            seen_versions.add(extraction.version)

            assets.append(ResolvedAsset(
                version=extraction.version,
                download_url=item.download_url,
                pattern_name=extraction.pattern_name,
                path=item.path
            ))

        if ignored:
            logger.debug(f"Ignored {len(ignored)} files:")
            for path in ignored:
                logger.debug(f"   - {path}")

        matched_count = len(assets)
        if version_filter:
            assets = [a for a in assets if version_filter in a.version]

        if not assets:
            raise NoVersionsFoundError(
                path_prefix,
                version_filter=version_filter,
                total_items=len(items),
                matched_items=matched_count
            )

        assets.sort(key=lambda a: a.version, reverse=True)

        logger.info(
            f"Resolved {len(assets)} versions for {path_prefix or '/'} "
            f"from {len(items)} listing items"
        )
        return assets
