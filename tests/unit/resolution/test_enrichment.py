"""Tests for profile enrichment."""

from __future__ import annotations

import httpx
import pytest
from httpx import Response

from xns.resolution.enrichment import ProfileData, ProfileEnricher


PROFILE_URL = "https://profiles.test/v1/profile"


@pytest.fixture
def enricher() -> ProfileEnricher:
    return ProfileEnricher(PROFILE_URL, timeout=5.0)


@pytest.fixture
def profile_response() -> dict:
    """Sample profile API response."""
    return {
        "data": {
            "addresses": [
                {"symbol": "BTC", "address": "bc1qexample"},
                {"symbol": "ETH", "address": "0xexample"},
                {"symbol": "", "address": "ignored"},
                {"symbol": "SOL"},
            ],
            "profile_info": {
                "email": "ck@example.com",
                "twitter": "@ckelley",
                "github": "",
                "discord": "not-a-text-record",
            },
        }
    }


class TestProfileEnricher:
    """Tests for best-effort enrichment."""

    async def test_parses_profile(self, enricher: ProfileEnricher, profile_response: dict, respx_mock):
        """Addresses are keyed by lowercased symbol and known text records kept."""
        route = respx_mock.get(PROFILE_URL).mock(return_value=Response(200, json=profile_response))

        profile = await enricher.enrich("ckelley.xrp")

        assert profile.addresses == {"btc": "bc1qexample", "eth": "0xexample"}
        assert profile.text_records == {"email": "ck@example.com", "twitter": "@ckelley"}
        assert route.calls.last.request.url.params["domain"] == "ckelley.xrp"

    async def test_http_error_gives_empty(self, enricher: ProfileEnricher, respx_mock):
        """A failed response yields empty data."""
        respx_mock.get(PROFILE_URL).mock(return_value=Response(500))

        assert await enricher.enrich("ckelley.xrp") == ProfileData()

    async def test_transport_error_gives_empty(self, enricher: ProfileEnricher, respx_mock):
        """Transport failures are swallowed."""
        respx_mock.get(PROFILE_URL).mock(side_effect=httpx.ConnectError)

        assert await enricher.enrich("ckelley.xrp") == ProfileData()

    async def test_invalid_json_gives_empty(self, enricher: ProfileEnricher, respx_mock):
        """Unparsable bodies are swallowed."""
        respx_mock.get(PROFILE_URL).mock(return_value=Response(200, text="oops"))

        assert await enricher.enrich("ckelley.xrp") == ProfileData()

    @pytest.mark.parametrize(
        "body",
        [[], {"data": None}, {"data": {"addresses": "none", "profile_info": []}}, {}],
    )
    async def test_unexpected_shapes_tolerated(self, enricher: ProfileEnricher, respx_mock, body):
        """Missing or mistyped sections produce empty data."""
        respx_mock.get(PROFILE_URL).mock(return_value=Response(200, json=body))

        assert await enricher.enrich("ckelley.xrp") == ProfileData()
