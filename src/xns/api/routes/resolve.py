"""Resolution endpoints."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, HTTPException

from xns.api.dependencies import Resolver
from xns.api.schemas import APIError, DomainResponse, ReverseLookupResponse
from xns.core.exceptions import XnsError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["resolve"])


def _to_http_error(error: XnsError) -> HTTPException:
    """Map a resolver error onto an HTTP status code."""
    body = APIError.from_exception(error)
    return HTTPException(status_code=body.status_code, detail=body.model_dump(mode="json", by_alias=True))


@router.get(
    "/resolve/{domain}",
    response_model=DomainResponse,
    operation_id="resolveDomain",
    summary="Resolve a .xrp domain",
    description="Resolve a .xrp domain to its owner, source NFT and records.",
)
async def resolve_domain(
    domain: str,
    resolver: Resolver,
    include_metadata: bool = False,
) -> DomainResponse:
    """Resolve a domain through every configured naming service."""
    start_time = time.monotonic()

    try:
        record = await resolver.resolve(domain)
    except XnsError as e:
        logger.info(f"Resolution failed for {domain}: {e}")
        raise _to_http_error(e) from e

    return DomainResponse.from_record(
        record,
        include_metadata=include_metadata,
        duration_ms=(time.monotonic() - start_time) * 1000,
    )


@router.get(
    "/reverse/{address}",
    response_model=ReverseLookupResponse,
    operation_id="reverseLookup",
    summary="Reverse lookup",
    description="List the .xrp domains held by an XRPL address.",
)
async def reverse_lookup(address: str, resolver: Resolver) -> ReverseLookupResponse:
    """Find all domains held by an address."""
    start_time = time.monotonic()

    try:
        domains = await resolver.reverse_lookup(address)
    except XnsError as e:
        logger.info(f"Reverse lookup failed for {address}: {e}")
        raise _to_http_error(e) from e

    return ReverseLookupResponse(
        address=address,
        domains=domains,
        count=len(domains),
        duration_ms=(time.monotonic() - start_time) * 1000,
    )
