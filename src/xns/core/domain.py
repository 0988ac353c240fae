"""Domain name validation helpers."""

from __future__ import annotations

from .exceptions import InvalidDomainError

DOMAIN_SUFFIX = ".xrp"


def validate_domain(domain: str) -> str:
    """
    Validate a domain query.

    The suffix comparison ignores case so that 'CKelley.XRP' is accepted;
    matching against NFT metadata is case-insensitive as well.

    Raises:
        InvalidDomainError: if the domain lacks the suffix or a label.
    """
    if not domain.lower().endswith(DOMAIN_SUFFIX):
        raise InvalidDomainError(
            f"Domain must end with {DOMAIN_SUFFIX}: {domain}",
            details={"domain": domain},
        )
    if len(domain) == len(DOMAIN_SUFFIX):
        raise InvalidDomainError(f"Domain has an empty name: {domain}", details={"domain": domain})
    return domain


def normalize_domain(domain: str) -> str:
    """Lowercase form used for comparisons and cache keys."""
    return domain.lower()
