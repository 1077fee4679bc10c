# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Registry Listing Client

Single responsibility: Fetch one page of a remote asset listing

Each call is a single bounded HTTP request; timeouts are enforced by the
underlying httpx client and surface as TransportError. No retries.
"""

import logging
from typing import Optional

import httpx

from .errors import TransportError
from .models import Credentials, ListingPage

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
CONTINUATION_PARAM = "continuationToken"
REPOSITORY_PLACEHOLDER = "{repository}"


def build_request_url(api_url: str, repository: str) -> str:
    """
    Substitute the repository name into a registry API URL.

    Args:
        api_url: URL template, e.g. ".../v1/assets?repository={repository}"
        repository: Repository name

    Returns:
        Request URL for the first page
    """
    return api_url.replace(REPOSITORY_PLACEHOLDER, repository)


class ListingClient:
    """Interface for paginated listing sources"""

    def fetch_page(
        self,
        request_url: str,
        continuation_token: Optional[str] = None,
        credentials: Optional[Credentials] = None
    ) -> ListingPage:
        """
        Fetch one listing page.

        Args:
            request_url: Listing endpoint
            continuation_token: Cursor from the previous page, None for the first
            credentials: Optional Basic credentials sent with the request

        Returns:
            ListingPage

        Raises:
            TransportError: If the page cannot be fetched or decoded
        """
        raise NotImplementedError

    def close(self) -> None:
        """Release any resources held by the client."""


class NexusListingClient(ListingClient):
    """Sonatype Nexus REST assets listing (GET /service/rest/v1/assets)"""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, client: Optional[httpx.Client] = None):
        """
        Initialize Nexus listing client.

        Args:
            timeout: Per-request timeout in seconds
            client: Preconfigured httpx client (tests pass one with a mock transport)
        """
        self.client = client or httpx.Client(timeout=timeout)

    def __enter__(self) -> "NexusListingClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.client.close()

    def fetch_page(
        self,
        request_url: str,
        continuation_token: Optional[str] = None,
        credentials: Optional[Credentials] = None
    ) -> ListingPage:
        url = httpx.URL(request_url)
        if continuation_token:
            # Keep the repository query; the token is added alongside it
            url = url.copy_merge_params({CONTINUATION_PARAM: continuation_token})
        auth = credentials.as_auth() if credentials else None

        if auth:
            logger.debug(f"Using Basic Auth with username: {credentials.username}")
        logger.debug(f"Registry API URL: {request_url}")

        try:
            response = self.client.get(url, auth=auth)
        except httpx.HTTPError as e:
            raise TransportError(
                f"failed to query registry API: {e}",
                url=request_url
            ) from e

        if not response.is_success:
            raise TransportError(
                f"registry API returned {response.status_code}",
                url=str(response.request.url),
                status_code=response.status_code
            )

        try:
            page = ListingPage.model_validate(response.json())
        except ValueError as e:
            raise TransportError(
                f"failed to decode JSON response: {e}",
                url=str(response.request.url),
                status_code=response.status_code
            ) from e

        return page
