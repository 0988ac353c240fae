"""Main library client for standalone usage."""

from __future__ import annotations

import logging

from xns.config import XnsSettings, get_settings
from xns.core.issuers import DEFAULT_ISSUERS, IssuerTable
from xns.core.models import DomainRecord
from xns.memo.storage import MemoStorage
from xns.resolution.engine import XnsResolver

logger = logging.getLogger(__name__)


class XnsClient:
    """
    Main client for the xns library.

    Usage:
        async with XnsClient() as client:
            record = await client.resolve("ckelley.xrp")
            domains = await client.reverse_lookup("r...")

    Settings are loaded from environment variables or can be passed explicitly.
    """

    def __init__(
        self,
        settings: XnsSettings | None = None,
        *,
        issuers: IssuerTable = DEFAULT_ISSUERS,
    ) -> None:
        """
        Initialize the client.

        Args:
            settings: Resolver settings. If not provided, loaded from environment.
            issuers: Naming service issuer table.
        """
        self._settings = settings or get_settings()
        self._issuers = issuers
        self._resolver: XnsResolver | None = None

    async def __aenter__(self) -> XnsClient:
        """Initialize resources on context entry."""
        self._resolver = XnsResolver.from_settings(self._settings, issuers=self._issuers)
        logger.debug(f"Resolver initialized for {self._settings.network.value}")
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Clean up resources on context exit."""
        await self.close()

    async def close(self) -> None:
        """Close all resources."""
        if self._resolver:
            await self._resolver.close()
            self._resolver = None

    @property
    def resolver(self) -> XnsResolver:
        """The underlying resolver."""
        if self._resolver is None:
            raise RuntimeError("Client not initialized. Use 'async with XnsClient() as client:'")
        return self._resolver

    async def resolve(self, domain: str) -> DomainRecord:
        """Resolve a .xrp domain to its owner record."""
        return await self.resolver.resolve(domain)

    async def reverse_lookup(self, address: str) -> list[str]:
        """List the .xrp domains held by an address."""
        return await self.resolver.reverse_lookup(address)

    async def get_memo_addresses(self, account: str) -> dict[str, str]:
        """Read the address map an account published in a transaction memo."""
        return await MemoStorage(self.resolver.ledger).get_addresses(account)


# Convenience functions for one-off lookups
async def resolve_domain(
    domain: str,
    *,
    settings: XnsSettings | None = None,
) -> DomainRecord:
    """
    Resolve a domain (convenience function).

    For multiple resolutions, use XnsClient so the cache is reused.
    """
    async with XnsClient(settings) as client:
        return await client.resolve(domain)


async def reverse_lookup(
    address: str,
    *,
    settings: XnsSettings | None = None,
) -> list[str]:
    """Reverse lookup (convenience function)."""
    async with XnsClient(settings) as client:
        return await client.reverse_lookup(address)
