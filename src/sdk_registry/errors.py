# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Custom exceptions for SDK registry resolution.

All exceptions inherit from SDKRegistryError for consistent error handling.
A pattern that simply does not match is not an error and never raises.
"""

from typing import Optional


class SDKRegistryError(Exception):
    """Base exception for all SDK registry errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize SDK registry error.

        Args:
            message: Human-readable error message
            details: Additional error details
        """
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Convert error to dictionary for JSON output."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details
        }


class ConfigurationError(SDKRegistryError):
    """Application configuration error."""

    def __init__(self, message: str, config_file: Optional[str] = None, details: Optional[dict] = None):
        """
        Initialize configuration error.

        Args:
            message: Configuration error message
            config_file: Configuration file path
            details: Additional error details
        """
        super().__init__(message, details=details)
        self.config_file = config_file


class PatternConfigError(ConfigurationError):
    """Patterns file is missing, unreadable or structurally invalid."""


class NotFoundError(SDKRegistryError):
    """Configured resource not found."""

    def __init__(self, resource: str, identifier: str, details: Optional[dict] = None):
        """
        Initialize not found error.

        Args:
            resource: Type of resource (e.g., "Distribution", "Registry")
            identifier: Resource identifier
            details: Additional error details
        """
        message = f"{resource} not found: {identifier}"
        super().__init__(message, details=details)
        self.resource = resource
        self.identifier = identifier


class UnsupportedRegistryError(SDKRegistryError):
    """Registry type has no listing client."""

    def __init__(self, registry_type: str):
        super().__init__(
            f"unsupported repository type: {registry_type}",
            details={"registry_type": registry_type}
        )
        self.registry_type = registry_type


class TransportError(SDKRegistryError):
    """A listing page could not be fetched or decoded."""

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[dict] = None
    ):
        """
        Initialize transport error.

        Args:
            message: Transport error message
            url: Request URL that failed
            status_code: HTTP status code, if a response was received
            details: Additional error details
        """
        details = dict(details or {})
        if url:
            details.setdefault("url", url)
        if status_code is not None:
            details.setdefault("status_code", status_code)
        super().__init__(message, details=details)
        self.url = url
        self.status_code = status_code


class NoVersionsFoundError(SDKRegistryError):
    """No asset survived prefix filtering, extraction and the version filter."""

    def __init__(
        self,
        path_prefix: str,
        version_filter: Optional[str] = None,
        total_items: int = 0,
        matched_items: int = 0
    ):
        """
        Initialize empty-result error.

        Args:
            path_prefix: Distribution path prefix that was resolved
            version_filter: Substring filter that was applied, if any
            total_items: Number of listing items fetched across all pages
            matched_items: Number of distinct versions before the substring filter
        """
        if version_filter:
            message = f"no version {version_filter} found for {path_prefix}"
        else:
            message = f"no versions found for {path_prefix}"
        super().__init__(message, details={
            "path_prefix": path_prefix,
            "version_filter": version_filter,
            "total_items": total_items,
            "matched_items": matched_items
        })
        self.path_prefix = path_prefix
        self.version_filter = version_filter
        self.total_items = total_items
        self.matched_items = matched_items

    @property
    def filter_excluded_all(self) -> bool:
        """True when versions existed but the version filter removed every one."""
        return bool(self.version_filter) and self.matched_items > 0
