"""Resolution layer: engine, throttling and profile enrichment."""

from xns.resolution.engine import XnsResolver
from xns.resolution.enrichment import ProfileData, ProfileEnricher
from xns.resolution.limiter import ConcurrencyLimiter, TokenThrottle

__all__ = [
    # Engine
    "XnsResolver",
    # Enrichment
    "ProfileData",
    "ProfileEnricher",
    # Throttling
    "ConcurrencyLimiter",
    "TokenThrottle",
]
