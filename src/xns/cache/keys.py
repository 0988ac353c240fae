"""Cache key builders for consistent key formatting."""

from xns.core.domain import normalize_domain
from xns.core.types import NetworkProfile


class CacheKeys:
    """Cache key builders for consistent key formatting."""

    PREFIX = "xns"

    @classmethod
    def domain(cls, domain: str, network: NetworkProfile | str | None = None) -> str:
        """
        Key for a resolved domain.

        Domain matching is case-insensitive, so the key is lowercased and
        'CKelley.xrp' shares an entry with 'ckelley.xrp'.
        """
        scope = f"{network}:" if network else ""
        return f"{cls.PREFIX}:domain:{scope}{normalize_domain(domain)}"
