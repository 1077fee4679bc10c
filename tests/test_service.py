# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Unit Tests for the Available Versions Service
"""

import pytest

from conftest import FakeListingClient, make_item
from sdk_registry.client import NexusListingClient
from sdk_registry.config import RegistryConfig, SDKRepository
from sdk_registry.errors import NoVersionsFoundError, TransportError, UnsupportedRegistryError
from sdk_registry.models import Credentials
from sdk_registry.service import create_listing_client, fetch_available_versions

API_URL = "http://nexus.example.com/service/rest/v1/assets?repository={repository}"


@pytest.fixture
def repo():
    return SDKRepository(type="jdk", registry="nexus", repository="raw", path="jdk/temurin")


@pytest.fixture
def registry():
    return RegistryConfig(type="nexus", api_url=API_URL, username="reader", password="secret")


class TestCreateListingClient:
    """Test suite for create_listing_client"""

    def test_nexus(self, registry):
        client = create_listing_client(registry)
        try:
            assert isinstance(client, NexusListingClient)
        finally:
            client.close()

    def test_unsupported_type(self):
        """Test unknown registry types are rejected before any request"""
        registry = RegistryConfig(type="artifactory", api_url="http://x")

        with pytest.raises(UnsupportedRegistryError, match="unsupported repository type: artifactory"):
            create_listing_client(registry)


class TestFetchAvailableVersions:
    """Test suite for fetch_available_versions"""

    def test_resolves_with_registry_settings(self, repo, registry, extractor):
        """Test URL, credentials, prefix and type come from configuration"""
        client = FakeListingClient([[
            make_item("/jdk/temurin/jdk-21.0.6_7-linux.tar.gz"),
            make_item("/jdk/other/jdk-17.0.15_6-linux.tar.gz"),
        ]])

        assets = fetch_available_versions(repo, registry, extractor, client=client)

        assert [a.version for a in assets] == ["21.0.6_7"]
        url, token, credentials = client.calls[0]
        assert url == "http://nexus.example.com/service/rest/v1/assets?repository=raw"
        assert credentials == Credentials("reader", "secret")

    def test_anonymous_registry(self, repo, extractor):
        """Test incomplete credentials are not sent"""
        registry = RegistryConfig(api_url=API_URL, username="reader")
        client = FakeListingClient([[make_item("/jdk/temurin/jdk-21.0.6_7.tar.gz")]])

        fetch_available_versions(repo, registry, extractor, client=client)

        assert client.calls[0][2] is None

    def test_version_filter(self, repo, registry, extractor):
        client = FakeListingClient([[make_item("/jdk/temurin/jdk-21.0.6_7.tar.gz")]])

        with pytest.raises(NoVersionsFoundError, match="no version 17 found for jdk/temurin"):
            fetch_available_versions(repo, registry, extractor, version_filter="17", client=client)

    def test_passed_client_left_open(self, repo, registry, extractor):
        """Test a caller-owned client is not closed"""
        client = FakeListingClient([[make_item("/jdk/temurin/jdk-21.0.6_7.tar.gz")]])

        fetch_available_versions(repo, registry, extractor, client=client)

        assert client.closed is False

    def test_transport_error_logged_and_raised(self, repo, registry, extractor, caplog):
        """Test transport failures carry a path hint in the log"""
        client = FakeListingClient(
            [[]],
            fail_on_page=1,
            error=TransportError("registry API returned 404", status_code=404),
        )

        with pytest.raises(TransportError):
            fetch_available_versions(repo, registry, extractor, client=client)

        assert "check if the path jdk/temurin exists" in caplog.text

    def test_unsupported_registry(self, repo, extractor):
        registry = RegistryConfig(type="s3", api_url="http://x")

        with pytest.raises(UnsupportedRegistryError):
            fetch_available_versions(repo, registry, extractor)
