"""Best-effort profile enrichment from a third-party domain API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any, AsyncIterator, ClassVar

import httpx

from xns.core.exceptions import NetworkError

logger = logging.getLogger(__name__)


@dataclass
class ProfileData:
    """Address bindings and text records for a domain."""

    addresses: dict[str, str] = field(default_factory=dict)
    text_records: dict[str, str] = field(default_factory=dict)


class ProfileEnricher:
    """
    Fetches secondary addresses and text records for a domain.

    Expected response shape:
        {"data": {"addresses": [{"symbol": ..., "address": ...}],
                  "profile_info": {"email": ..., "twitter": ...}}}

    Any missing field is tolerated. ``enrich`` never raises.
    """

    TEXT_RECORD_KEYS: ClassVar[tuple[str, ...]] = ("email", "twitter", "github", "website")

    def __init__(self, api_url: str, *, timeout: float = 15.0) -> None:
        self.api_url = api_url
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None

    @asynccontextmanager
    async def _get_client(self) -> AsyncIterator[httpx.AsyncClient]:
        """Get or create HTTP client with proper lifecycle."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                headers={
                    "User-Agent": "xns-resolver/0.1",
                    "Accept": "application/json",
                },
                follow_redirects=True,
            )

        try:
            yield self._client
        except httpx.HTTPError as e:
            raise NetworkError(f"HTTP error: {e}") from e

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def enrich(self, domain: str) -> ProfileData:
        """Return whatever profile data is available; empty on any failure."""
        try:
            async with self._get_client() as client:
                response = await client.get(self.api_url, params={"domain": domain})

            if not response.is_success:
                logger.debug(f"Profile API returned HTTP {response.status_code} for {domain}")
                return ProfileData()

            return self._parse_profile(response.json())

        except Exception as e:
            logger.warning(f"Profile enrichment failed for {domain}: {e}")
            return ProfileData()

    def _parse_profile(self, body: Any) -> ProfileData:
        profile = ProfileData()
        if not isinstance(body, dict):
            return profile

        data = body.get("data")
        if not isinstance(data, dict):
            return profile

        for entry in data.get("addresses") or []:
            if not isinstance(entry, dict):
                continue
            symbol = entry.get("symbol")
            address = entry.get("address")
            if isinstance(symbol, str) and symbol and isinstance(address, str) and address:
                profile.addresses[symbol.lower()] = address

        info = data.get("profile_info")
        if isinstance(info, dict):
            for key in self.TEXT_RECORD_KEYS:
                value = info.get(key)
                if isinstance(value, str) and value:
                    profile.text_records[key] = value

        return profile

    async def __aenter__(self) -> "ProfileEnricher":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
