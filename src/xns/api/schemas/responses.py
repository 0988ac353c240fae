"""Response schemas for API endpoints."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from xns.api.schemas.base import APIBaseSchema
from xns.core.models import DomainRecord
from xns.core.types import NamingService, NetworkProfile


class DomainResponse(APIBaseSchema):
    """A resolved domain."""

    domain: str
    owner: str
    owner_verified: bool
    nft_id: str
    service: NamingService
    addresses: dict[str, str] = Field(default_factory=dict)
    text_records: dict[str, str] = Field(default_factory=dict)
    expires_at: int | None = None
    metadata: dict[str, Any] | None = None
    duration_ms: float = 0.0

    @classmethod
    def from_record(
        cls,
        record: DomainRecord,
        *,
        include_metadata: bool = False,
        duration_ms: float = 0.0,
    ) -> "DomainResponse":
        metadata = None
        if include_metadata and record.metadata is not None:
            metadata = record.metadata.model_dump()

        return cls(
            domain=record.domain,
            owner=record.owner,
            owner_verified=record.owner_verified,
            nft_id=record.nft_id,
            service=record.service,
            addresses=record.addresses,
            text_records=record.text_records,
            expires_at=record.expires_at,
            metadata=metadata,
            duration_ms=duration_ms,
        )


class ReverseLookupResponse(APIBaseSchema):
    """Domains held by an address."""

    address: str
    domains: list[str]
    count: int
    duration_ms: float = 0.0


class HealthResponse(APIBaseSchema):
    """Health check response."""

    status: Literal["healthy", "degraded", "unhealthy"]
    version: str
    network: NetworkProfile | None = None
    services: dict[str, Literal["up", "down", "unknown"]]
