"""Core enums and type definitions."""

from enum import StrEnum


class NetworkProfile(StrEnum):
    """XRP Ledger environments a resolver can target."""

    MAINNET = "mainnet"
    TESTNET = "testnet"
    DEVNET = "devnet"

    @property
    def rpc_url(self) -> str:
        """Default public JSON-RPC endpoint for this network."""
        return _RPC_URLS[self]


_RPC_URLS: dict[NetworkProfile, str] = {
    NetworkProfile.MAINNET: "https://s1.ripple.com:51234",
    NetworkProfile.TESTNET: "https://s.altnet.rippletest.net:51234",
    NetworkProfile.DEVNET: "https://s.devnet.rippletest.net:51234",
}


class NamingService(StrEnum):
    """Known .xrp domain naming services."""

    XNS = "xns"  # xrpns.com
    XRP_DOMAINS = "xrpdomains"  # xrpdomains.xyz


class UriScheme(StrEnum):
    """How a decoded NFT URI points at its metadata."""

    IPFS = "ipfs"
    HTTP = "http"
    EMBEDDED_JSON = "embedded_json"
