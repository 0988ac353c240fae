"""xns - Resolve .xrp domain names on the XRP Ledger."""

from xns.client import XnsClient, resolve_domain, reverse_lookup
from xns.config import XnsSettings
from xns.core.exceptions import (
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
from xns.core.issuers import DEFAULT_ISSUERS, IssuerTable
from xns.core.models import DomainRecord, MetadataDocument, TokenRecord
from xns.core.types import NamingService, NetworkProfile
from xns.resolution.engine import XnsResolver

__version__ = "0.1.0"
__all__ = [
    # Client
    "XnsClient",
    "XnsResolver",
    "XnsSettings",
    "resolve_domain",
    "reverse_lookup",
    # Types
    "NamingService",
    "NetworkProfile",
    "IssuerTable",
    "DEFAULT_ISSUERS",
    # Models
    "DomainRecord",
    "MetadataDocument",
    "TokenRecord",
    # Errors
    "DomainNotFoundError",
    "InternalError",
    "InvalidDomainError",
    "MetadataError",
    "NetworkError",
    "ParseError",
    "RpcError",
    "UnsupportedServiceError",
    "XnsError",
    # Version
    "__version__",
]
