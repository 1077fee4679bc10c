# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
SDK Registry Resolver

Resolves installable SDK build versions from a remote artifact registry
listing, using a user-editable table of regex naming conventions:
- version: compare and group heterogeneous vendor version strings
- patterns: ordered, type-tagged pattern sets, first match wins
- resolver: paginate a listing, filter by path prefix, dedupe by version
"""

from .errors import (
    ConfigurationError,
    NoVersionsFoundError,
    NotFoundError,
    PatternConfigError,
    SDKRegistryError,
    TransportError,
    UnsupportedRegistryError,
)
from .models import (
    ANY_TYPE,
    AnyType,
    Credentials,
    Extraction,
    ListingItem,
    ListingPage,
    PatternSet,
    ResolvedAsset,
    SdkType,
    SpecificType,
)
from .version import compare_versions, extract_major
from .patterns import PatternExtractor, PatternTable
from .client import ListingClient, NexusListingClient
from .resolver import RegistryResolver, normalize_prefix
from .service import fetch_available_versions

__all__ = [
    "ANY_TYPE",
    "AnyType",
    "ConfigurationError",
    "Credentials",
    "Extraction",
    "ListingClient",
    "ListingItem",
    "ListingPage",
    "NexusListingClient",
    "NoVersionsFoundError",
    "NotFoundError",
    "PatternConfigError",
    "PatternExtractor",
    "PatternSet",
    "PatternTable",
    "RegistryResolver",
    "ResolvedAsset",
    "SDKRegistryError",
    "SdkType",
    "SpecificType",
    "TransportError",
    "UnsupportedRegistryError",
    "compare_versions",
    "extract_major",
    "fetch_available_versions",
    "normalize_prefix",
]
