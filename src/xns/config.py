"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from xns.core.types import NetworkProfile

DEFAULT_INDEXER_URL = "https://clio.xrpl.org"
DEFAULT_IPFS_GATEWAYS = [
    "https://ipfs.io/ipfs/",
    "https://gateway.pinata.cloud/ipfs/",
    "https://cloudflare-ipfs.com/ipfs/",
]
DEFAULT_PROFILE_API_URL = "https://api.xrpns.com/v1/profile"


class XnsSettings(BaseSettings):
    """Resolver configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="XNS_",
    )

    # Ledger
    network: NetworkProfile = Field(
        default=NetworkProfile.MAINNET,
        description="XRP Ledger network to resolve against",
    )
    rpc_url: str | None = Field(
        default=None,
        description="Ledger JSON-RPC URL (defaults to the network's public node)",
    )
    indexer_url: str = Field(
        default=DEFAULT_INDEXER_URL,
        description="Clio indexer URL used for nft_info and nfts_by_issuer",
    )

    # Metadata
    ipfs_gateways: list[str] = Field(
        default_factory=lambda: list(DEFAULT_IPFS_GATEWAYS),
        description="IPFS gateway base URLs, tried in order",
    )
    profile_api_url: str | None = Field(
        default=DEFAULT_PROFILE_API_URL,
        description="Third-party profile API (set empty to disable enrichment)",
    )
    http_timeout: float = Field(
        default=15.0,
        gt=0,
        description="Timeout in seconds for every outbound HTTP request",
    )

    # Cache
    cache_ttl: float = Field(
        default=300.0,
        gt=0,
        description="Seconds a resolved domain stays cached",
    )
    cache_max_entries: int = Field(
        default=1000,
        ge=1,
        description="Maximum number of cached domains",
    )

    # Throttling
    max_concurrent_fetches: int = Field(
        default=10,
        ge=1,
        description="Metadata fetches allowed in flight per resolver",
    )
    throttle_batch_size: int = Field(
        default=50,
        ge=1,
        description="Pause after this many tokens have been scanned",
    )
    throttle_pause: float = Field(
        default=0.1,
        ge=0.0,
        description="Pause length in seconds",
    )

    # Server
    host: str = Field(
        default="127.0.0.1",
        description="Interface the xns-api server binds to",
    )
    port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Port the xns-api server listens on",
    )

    # App settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        description="Allowed CORS origins for the HTTP API",
    )

    @property
    def resolved_rpc_url(self) -> str:
        """Explicit RPC URL, or the network default."""
        return self.rpc_url or self.network.rpc_url


@lru_cache
def get_settings() -> XnsSettings:
    """Get cached settings instance."""
    return XnsSettings()
