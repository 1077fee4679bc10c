# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Available Versions Service

Single responsibility: Wire configuration, client and resolver for one lookup
"""

import logging
from typing import List, Optional

from .client import DEFAULT_TIMEOUT, ListingClient, NexusListingClient, build_request_url
from .config import RegistryConfig, SDKRepository
from .errors import TransportError, UnsupportedRegistryError
from .models import ResolvedAsset
from .patterns import PatternExtractor
from .resolver import RegistryResolver

logger = logging.getLogger(__name__)

SUPPORTED_REGISTRY_TYPES = ("nexus",)


def create_listing_client(registry: RegistryConfig, timeout: float = DEFAULT_TIMEOUT) -> ListingClient:
    """
    Create the listing client for a registry type.

    Raises:
        UnsupportedRegistryError: If the registry type has no client
    """
    if registry.type == "nexus":
        return NexusListingClient(timeout=timeout)
    logger.error(f"Unsupported repository type: {registry.type}")
    raise UnsupportedRegistryError(registry.type)


def fetch_available_versions(
    repo: SDKRepository,
    registry: RegistryConfig,
    extractor: PatternExtractor,
    version_filter: Optional[str] = None,
    client: Optional[ListingClient] = None,
    timeout: float = DEFAULT_TIMEOUT
) -> List[ResolvedAsset]:
    """
    Fetch the available versions of one distribution.

    Args:
        repo: Distribution (SDK repository) configuration
        registry: Registry the distribution lives in
        extractor: Pattern extractor
        version_filter: Optional substring filter on versions
        client: Listing client to use instead of one built from registry.type
        timeout: Request timeout for a client built here

    Returns:
        Resolved assets, string-sorted descending

    Raises:
        UnsupportedRegistryError: If the registry type is not supported
        TransportError: If the listing cannot be fetched
        NoVersionsFoundError: If nothing matched
    """
    owns_client = client is None
    if client is None:
        client = create_listing_client(registry, timeout=timeout)

    request_url = build_request_url(registry.api_url, repo.repository)
    logger.debug(f"Repository: {repo.repository}, path: {repo.path}, URL: {request_url}")

    resolver = RegistryResolver(extractor, client)
    try:
        return resolver.resolve(
            request_url,
            repo.path,
            repo.type,
            version_filter=version_filter,
            credentials=registry.credentials
        )
    except TransportError as e:
        logger.error(f"{e.message}: check if the path {repo.path} exists in the registry")
        raise
    finally:
        if owns_client:
            client.close()
