"""Naming service issuer configuration.

Each naming service mints its domain NFTs from a known issuer account. The
issuer differs per network and a missing entry means the service is not
available there.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .exceptions import UnsupportedServiceError
from .types import NamingService, NetworkProfile


@dataclass(frozen=True)
class IssuerTable:
    """Immutable (service, network) -> issuer address lookup."""

    issuers: Mapping[tuple[NamingService, NetworkProfile], str]

    # Services are searched in this order
    service_order: tuple[NamingService, ...] = (
        NamingService.XNS,
        NamingService.XRP_DOMAINS,
    )

    # Services whose domains can be enriched from the profile API
    profile_services: frozenset[NamingService] = field(
        default_factory=lambda: frozenset({NamingService.XNS})
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "issuers", MappingProxyType(dict(self.issuers)))

    def issuer_for(self, service: NamingService, network: NetworkProfile) -> str:
        """Return the issuer address or raise UnsupportedServiceError."""
        issuer = self.issuers.get((service, network))
        if not issuer:
            raise UnsupportedServiceError(
                f"Unsupported naming service: {service.value} on {network.value}",
                details={"service": service.value, "network": network.value},
            )
        return issuer

    def supports_profile(self, service: NamingService) -> bool:
        return service in self.profile_services

    def services(self) -> Iterable[NamingService]:
        return iter(self.service_order)


DEFAULT_ISSUERS = IssuerTable(
    issuers={
        (NamingService.XNS, NetworkProfile.MAINNET): "rYhfynZDrde1uSvvQAYctApg6DnVE5HKm",
        (NamingService.XRP_DOMAINS, NetworkProfile.MAINNET): "r4pM3nT7r7X1k2WMcSw5Sz8ftUu33TEfA4",
    }
)
