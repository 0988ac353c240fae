"""Core types, models, and utilities."""

from .domain import DOMAIN_SUFFIX, normalize_domain, validate_domain
from .exceptions import (
    DomainNotFoundError,
    InternalError,
    InvalidDomainError,
    MetadataError,
    NetworkError,
    ParseError,
    RpcError,
    UnsupportedServiceError,
    XnsError,
)
from .issuers import DEFAULT_ISSUERS, IssuerTable
from .models import (
    UNKNOWN_OWNER,
    DomainRecord,
    MetadataAttribute,
    MetadataDocument,
    TokenOwnership,
    TokenRecord,
)
from .types import NamingService, NetworkProfile, UriScheme

__all__ = [
    # Types
    "NamingService",
    "NetworkProfile",
    "UriScheme",
    # Domain helpers
    "DOMAIN_SUFFIX",
    "normalize_domain",
    "validate_domain",
    # Issuers
    "DEFAULT_ISSUERS",
    "IssuerTable",
    # Models
    "UNKNOWN_OWNER",
    "DomainRecord",
    "MetadataAttribute",
    "MetadataDocument",
    "TokenOwnership",
    "TokenRecord",
    # Exceptions
    "DomainNotFoundError",
    "InternalError",
    "InvalidDomainError",
    "MetadataError",
    "NetworkError",
    "ParseError",
    "RpcError",
    "UnsupportedServiceError",
    "XnsError",
]
