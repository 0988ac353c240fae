"""Shared test fixtures for all tests."""

from __future__ import annotations

import json
from typing import Any, Callable

import pytest

from xns.config import XnsSettings
from xns.core.models import DomainRecord, MetadataAttribute, MetadataDocument
from xns.core.types import NamingService, NetworkProfile


# ============================================================================
# Test Data Constants
# ============================================================================


TEST_RPC_URL = "https://ledger.test/rpc"
TEST_INDEXER_URL = "https://indexer.test/rpc"
TEST_PROFILE_URL = "https://profiles.test/v1/profile"
TEST_GATEWAYS = [
    "https://gw1.test/ipfs/",
    "https://gw2.test/ipfs/",
    "https://gw3.test/ipfs/",
]

OWNER = "rOwner1"
NFT_ID = "000800006203F49C21D5D6E022CB16DE3538F248662FC73C00000001"


# ============================================================================
# Encoding Helpers
# ============================================================================


@pytest.fixture
def hex_uri() -> Callable[[str], str]:
    """Factory that hex-encodes text the way the ledger stores URI fields."""
    def _encode(text: str) -> str:
        return text.encode("utf-8").hex().upper()
    return _encode


@pytest.fixture
def embedded_uri(hex_uri: Callable[[str], str]) -> Callable[..., str]:
    """Factory for a hex URI carrying an inline metadata document."""
    def _encode(name: str = "", **fields: Any) -> str:
        return hex_uri(json.dumps({"name": name, **fields}))
    return _encode


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_metadata() -> MetadataDocument:
    """Create a metadata document for a registered domain."""
    return MetadataDocument.model_validate(
        {
            "name": "ckelley.xrp",
            "description": "XNS domain",
            "image": "ipfs://QmImage",
            "attributes": [
                {"trait_type": "domain", "value": "ckelley.xrp"},
                {"trait_type": "Expiration", "value": 1767225600},
            ],
            "collection": "XNS",
        }
    )


@pytest.fixture
def sample_domain_record(sample_metadata: MetadataDocument) -> DomainRecord:
    """Create a fully populated domain record."""
    return DomainRecord(
        domain="ckelley.xrp",
        owner=OWNER,
        nft_id=NFT_ID,
        service=NamingService.XNS,
        addresses={"btc": "bc1qexample", "eth": "0xexample"},
        text_records={"twitter": "@ckelley"},
        expires_at=1767225600,
        metadata=sample_metadata,
    )


@pytest.fixture
def sample_domain_record_minimal() -> DomainRecord:
    """Create a domain record with only required fields."""
    return DomainRecord(
        domain="minimal.xrp",
        owner=OWNER,
        nft_id=NFT_ID,
        service=NamingService.XRP_DOMAINS,
        metadata=MetadataDocument(
            name="minimal.xrp",
            attributes=[MetadataAttribute(trait_type="domain", value="minimal.xrp")],
        ),
    )


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def mock_settings() -> XnsSettings:
    """Create settings pointing at mocked endpoints."""
    return XnsSettings(
        network=NetworkProfile.MAINNET,
        rpc_url=TEST_RPC_URL,
        indexer_url=TEST_INDEXER_URL,
        ipfs_gateways=TEST_GATEWAYS,
        profile_api_url=TEST_PROFILE_URL,
        http_timeout=5.0,
        cache_ttl=60.0,
        cache_max_entries=10,
        max_concurrent_fetches=2,
        throttle_batch_size=50,
        throttle_pause=0.0,
        debug=True,
        log_level="DEBUG",
    )


@pytest.fixture
def mock_settings_minimal() -> XnsSettings:
    """Create settings without profile enrichment."""
    return XnsSettings(
        rpc_url=TEST_RPC_URL,
        indexer_url=TEST_INDEXER_URL,
        ipfs_gateways=TEST_GATEWAYS,
        profile_api_url=None,
        throttle_pause=0.0,
    )
