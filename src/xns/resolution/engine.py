"""Resolution engine: .xrp domain -> owner record, and address -> domains."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from xns.cache.keys import CacheKeys
from xns.cache.memory import MemoryCache
from xns.core.domain import normalize_domain, validate_domain
from xns.core.exceptions import DomainNotFoundError, UnsupportedServiceError, XnsError
from xns.core.issuers import DEFAULT_ISSUERS, IssuerTable
from xns.core.models import UNKNOWN_OWNER, DomainRecord, MetadataDocument, TokenRecord
from xns.core.types import NamingService, NetworkProfile
from xns.ledger.client import LedgerClient
from xns.metadata.fetcher import MetadataFetcher
from xns.metadata.matcher import extract_domain_name, extract_expiration
from xns.resolution.enrichment import ProfileData, ProfileEnricher
from xns.resolution.limiter import ConcurrencyLimiter, TokenThrottle

if TYPE_CHECKING:
    from xns.config import XnsSettings

logger = logging.getLogger(__name__)


class XnsResolver:
    """
    Resolves .xrp domains across the configured naming services.

    Features:
    - Services tried in fixed priority order, first match wins
    - Indexer listing with ledger fallback per service
    - Ownership confirmation (burned tokens never match)
    - Bounded metadata-fetch concurrency shared across resolutions
    - TTL cache of resolved records

    Usage:
        async with XnsResolver(NetworkProfile.MAINNET) as resolver:
            record = await resolver.resolve("ckelley.xrp")
            domains = await resolver.reverse_lookup("r...")
    """

    def __init__(
        self,
        network: NetworkProfile = NetworkProfile.MAINNET,
        *,
        ledger: LedgerClient | None = None,
        fetcher: MetadataFetcher | None = None,
        enricher: ProfileEnricher | None = None,
        issuers: IssuerTable = DEFAULT_ISSUERS,
        cache: MemoryCache[DomainRecord] | None = None,
        limiter: ConcurrencyLimiter | None = None,
        throttle: TokenThrottle | None = None,
    ) -> None:
        self.network = network
        self.ledger = ledger or LedgerClient(network)
        self.fetcher = fetcher or MetadataFetcher()
        self.enricher = enricher
        self.issuers = issuers
        self.cache: MemoryCache[DomainRecord] = (
            cache if cache is not None else MemoryCache(max_entries=1000, ttl=300.0)
        )
        self.limiter = limiter if limiter is not None else ConcurrencyLimiter(10)
        self.throttle = throttle if throttle is not None else TokenThrottle()

    @classmethod
    def from_settings(
        cls,
        settings: "XnsSettings",
        *,
        issuers: IssuerTable = DEFAULT_ISSUERS,
    ) -> "XnsResolver":
        """Build a resolver and its collaborators from settings."""
        enricher = None
        if settings.profile_api_url:
            enricher = ProfileEnricher(settings.profile_api_url, timeout=settings.http_timeout)

        return cls(
            settings.network,
            ledger=LedgerClient(
                settings.network,
                rpc_url=settings.resolved_rpc_url,
                indexer_url=settings.indexer_url,
                timeout=settings.http_timeout,
            ),
            fetcher=MetadataFetcher(settings.ipfs_gateways, timeout=settings.http_timeout),
            enricher=enricher,
            issuers=issuers,
            cache=MemoryCache(max_entries=settings.cache_max_entries, ttl=settings.cache_ttl),
            limiter=ConcurrencyLimiter(settings.max_concurrent_fetches),
            throttle=TokenThrottle(settings.throttle_batch_size, settings.throttle_pause),
        )

    async def resolve(self, domain: str) -> DomainRecord:
        """
        Resolve a .xrp domain to its owner and metadata.

        Raises:
            InvalidDomainError: if the domain lacks the .xrp suffix (no network use)
            DomainNotFoundError: if no naming service yields a live token for it
        """
        validate_domain(domain)

        cache_key = CacheKeys.domain(domain, self.network)
        cached = await self.cache.get(cache_key)
        if cached is not None:
            logger.debug(f"Cache hit for domain: {domain}")
            return cached

        logger.info(f"Resolving domain: {domain}")

        for service in self.issuers.services():
            try:
                record = await self._resolve_from_service(domain, service)
            except UnsupportedServiceError as e:
                logger.debug(f"Skipping {service.value}: {e}")
                continue
            except XnsError as e:
                logger.debug(f"Service {service.value} failed for {domain}: {e}")
                continue

            await self.cache.set(cache_key, record)
            return record

        raise DomainNotFoundError(domain)

    async def _resolve_from_service(
        self,
        domain: str,
        service: NamingService,
    ) -> DomainRecord:
        """Scan one service's token collection for the domain."""
        issuer = self.issuers.issuer_for(service, self.network)
        logger.debug(f"Querying {service.value} issuer: {issuer}")

        tokens = await self._list_service_tokens(issuer)
        logger.debug(f"Found {len(tokens)} NFTs from {service.value}")

        wanted = normalize_domain(domain)

        for processed, token in enumerate(tokens, start=1):
            match = await self._match_token(token)
            await self.throttle.tick(processed)

            if match is None:
                continue

            nft_domain, metadata = match
            if normalize_domain(nft_domain) != wanted:
                continue

            logger.info(f"Found domain {domain} in NFT {token.nft_id}")
            # Burned tokens raise DomainNotFoundError and end this service's attempt
            owner, verified = await self._confirm_owner(token)
            profile = await self._enrich(nft_domain, service)

            return DomainRecord(
                domain=nft_domain,
                owner=owner,
                owner_verified=verified,
                nft_id=token.nft_id,
                service=service,
                addresses=profile.addresses,
                text_records=profile.text_records,
                expires_at=extract_expiration(metadata),
                metadata=metadata,
            )

        raise DomainNotFoundError(domain, details={"service": service.value})

    async def _list_service_tokens(self, issuer: str) -> list[TokenRecord]:
        """Prefer the indexer listing, fall back to the ledger's account_nfts."""
        try:
            return await self.ledger.list_tokens_by_issuer(issuer)
        except XnsError as e:
            logger.warning(f"Indexer listing failed for {issuer}, falling back to ledger: {e}")
        return await self.ledger.list_tokens(issuer)

    async def _fetch_metadata(self, token: TokenRecord) -> MetadataDocument:
        async with self.limiter.slot():
            return await self.fetcher.resolve_uri(token.uri or "")

    async def _match_token(
        self,
        token: TokenRecord,
        *,
        quiet: bool = False,
    ) -> tuple[str, MetadataDocument] | None:
        """Fetch a token's metadata and extract its domain, or None."""
        if not token.uri:
            return None

        try:
            metadata = await self._fetch_metadata(token)
        except XnsError as e:
            log = logger.debug if quiet else logger.warning
            log(f"Failed to parse NFT metadata for {token.nft_id}: {e}")
            return None

        nft_domain = extract_domain_name(metadata)
        if nft_domain is None:
            return None
        return nft_domain, metadata

    async def _confirm_owner(self, token: TokenRecord) -> tuple[str, bool]:
        """
        Return (owner, verified) for a matched token.

        If the indexer is unreachable the listing's owner, or the
        UNKNOWN_OWNER placeholder, is returned with verified=False.
        """
        try:
            ownership = await self.ledger.get_token_ownership(token.nft_id)
        except DomainNotFoundError:
            logger.info(f"NFT {token.nft_id} is burned")
            raise
        except XnsError as e:
            logger.warning(f"Ownership lookup failed for {token.nft_id}: {e}")
            return token.owner or UNKNOWN_OWNER, False

        if not ownership.owner:
            return token.owner or UNKNOWN_OWNER, False
        return ownership.owner, True

    async def _enrich(self, domain: str, service: NamingService) -> ProfileData:
        if self.enricher is None or not self.issuers.supports_profile(service):
            return ProfileData()
        return await self.enricher.enrich(domain)

    async def reverse_lookup(self, address: str) -> list[str]:
        """
        Find every .xrp domain held by an address, in token order.

        Tokens without a URI or with unreadable metadata are skipped.
        Results are neither deduplicated nor cached.
        """
        logger.info(f"Reverse lookup for address: {address}")

        tokens = await self.ledger.list_tokens(address)
        domains: list[str] = []

        for processed, token in enumerate(tokens, start=1):
            match = await self._match_token(token, quiet=True)
            await self.throttle.tick(processed)
            if match is not None:
                domains.append(match[0])

        return domains

    async def clear_cache(self) -> None:
        """Drop all cached domain records."""
        await self.cache.clear()

    async def close(self) -> None:
        """Close all HTTP clients."""
        await self.ledger.close()
        await self.fetcher.close()
        if self.enricher is not None:
            await self.enricher.close()

    async def __aenter__(self) -> "XnsResolver":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
