"""Custom exception hierarchy for xns."""

from typing import Any


class XnsError(Exception):
    """Base exception for all xns errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class DomainNotFoundError(XnsError):
    """No naming service holds a token for the domain."""

    def __init__(self, domain: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(f"Domain not found: {domain}", details)
        self.domain = domain


class InvalidDomainError(XnsError):
    """Domain failed input validation."""

    pass


class NetworkError(XnsError):
    """Transport-level failure talking to a remote service."""

    pass


class ParseError(XnsError):
    """Hex, UTF-8 or JSON decoding failed."""

    pass


class RpcError(XnsError):
    """Ledger or indexer call returned an error."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.status_code = status_code


class MetadataError(XnsError):
    """NFT metadata could not be retrieved."""

    pass


class UnsupportedServiceError(XnsError):
    """Naming service has no issuer on the active network."""

    pass


class InternalError(XnsError):
    """Internal invariant was violated."""

    pass
