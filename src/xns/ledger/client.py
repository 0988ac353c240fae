"""JSON-RPC client for an XRP Ledger node and the Clio indexer."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, ClassVar

import httpx
from pydantic import ValidationError

from xns.config import DEFAULT_INDEXER_URL
from xns.core.exceptions import DomainNotFoundError, NetworkError, ParseError, RpcError
from xns.core.models import TokenOwnership, TokenRecord
from xns.core.types import NetworkProfile

logger = logging.getLogger(__name__)


class LedgerClient:
    """
    Read-only access to ledger state.

    Two endpoints are used:
    - the network's rippled node for account_nfts / account_info / account_tx
    - a Clio indexer for nft_info and nfts_by_issuer, which rippled lacks

    Usage:
        async with LedgerClient(NetworkProfile.MAINNET) as ledger:
            tokens = await ledger.list_tokens("r...")
    """

    PAGE_SIZE: ClassVar[int] = 400
    LEDGER_INDEX: ClassVar[str] = "validated"

    def __init__(
        self,
        network: NetworkProfile = NetworkProfile.MAINNET,
        *,
        rpc_url: str | None = None,
        indexer_url: str = DEFAULT_INDEXER_URL,
        timeout: float = 15.0,
    ) -> None:
        self.network = network
        self.rpc_url = rpc_url or network.rpc_url
        self.indexer_url = indexer_url
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None

    @asynccontextmanager
    async def _get_client(self) -> AsyncIterator[httpx.AsyncClient]:
        """Get or create HTTP client with proper lifecycle."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                headers={
                    "User-Agent": "xns-resolver/0.1",
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                },
                follow_redirects=True,
            )

        try:
            yield self._client
        except httpx.HTTPError as e:
            raise NetworkError(f"HTTP error: {e}") from e

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _call(self, url: str, method: str, params: dict[str, Any]) -> dict[str, Any]:
        """Issue a JSON-RPC request and return its ``result`` object."""
        payload = {"method": method, "params": [params]}

        async with self._get_client() as client:
            response = await client.post(url, json=payload)

        if not response.is_success:
            raise RpcError(
                f"HTTP {response.status_code}: {response.text}",
                status_code=response.status_code,
                details={"method": method, "url": url},
            )

        try:
            body = response.json()
        except ValueError as e:
            raise ParseError(f"Invalid JSON from {method}: {e}") from e

        result = body.get("result") if isinstance(body, dict) else None
        if not isinstance(result, dict):
            raise ParseError(f"Missing result object in {method} response")

        # rippled and Clio report request errors in-band with HTTP 200
        if result.get("status") == "error":
            error = result.get("error", "unknown")
            raise RpcError(
                f"{method} failed: {error} {result.get('error_message', '')}".rstrip(),
                status_code=response.status_code,
                details={"method": method, "error": error},
            )

        return result

    @staticmethod
    def _parse_tokens(entries: Any, method: str) -> list[TokenRecord]:
        if not isinstance(entries, list):
            raise ParseError(f"Expected a token list in {method} response")
        try:
            return [TokenRecord.model_validate(entry) for entry in entries]
        except ValidationError as e:
            raise ParseError(f"Malformed token in {method} response: {e}") from e

    async def list_tokens(self, account: str) -> list[TokenRecord]:
        """
        List every NFT held by an account, following pagination markers.

        Raises:
            NetworkError: on transport failure
            RpcError: on a non-success response
            ParseError: on a malformed response
        """
        tokens: list[TokenRecord] = []
        marker: Any = None

        while True:
            params: dict[str, Any] = {
                "account": account,
                "limit": self.PAGE_SIZE,
                "ledger_index": self.LEDGER_INDEX,
            }
            if marker is not None:
                params["marker"] = marker

            logger.debug(f"Querying ledger: account_nfts for {account}")
            result = await self._call(self.rpc_url, "account_nfts", params)
            tokens.extend(self._parse_tokens(result.get("account_nfts", []), "account_nfts"))

            marker = result.get("marker")
            if marker is None:
                break

        return tokens

    async def list_tokens_by_issuer(
        self,
        issuer: str,
        limit: int | None = None,
    ) -> list[TokenRecord]:
        """
        List NFTs minted by an issuer via the indexer.

        Without a limit, the indexer's pagination markers are followed to
        the end of the collection.
        """
        tokens: list[TokenRecord] = []
        marker: Any = None

        while True:
            params: dict[str, Any] = {
                "issuer": issuer,
                "ledger_index": self.LEDGER_INDEX,
            }
            if limit is not None:
                params["limit"] = limit
            if marker is not None:
                params["marker"] = marker

            logger.debug(f"Querying indexer: nfts_by_issuer for {issuer}")
            result = await self._call(self.indexer_url, "nfts_by_issuer", params)
            tokens.extend(self._parse_tokens(result.get("nfts", []), "nfts_by_issuer"))

            marker = result.get("marker")
            if marker is None or limit is not None:
                break

        return tokens

    async def get_token_ownership(self, nft_id: str) -> TokenOwnership:
        """
        Look up the current holder of an NFT.

        Raises:
            DomainNotFoundError: if the token has been burned
        """
        logger.debug(f"Querying indexer: nft_info for {nft_id}")
        result = await self._call(self.indexer_url, "nft_info", {"nft_id": nft_id})

        # Burned tokens may come back without an owner
        if result.get("is_burned") is True:
            raise DomainNotFoundError(nft_id, details={"reason": "burned", "nft_id": nft_id})

        try:
            return TokenOwnership.model_validate(result)
        except ValidationError as e:
            raise ParseError(f"Malformed nft_info response: {e}") from e

    async def get_account_summary(self, account: str) -> dict[str, Any]:
        """Return the raw account_info result."""
        return await self._call(
            self.rpc_url,
            "account_info",
            {"account": account, "ledger_index": self.LEDGER_INDEX},
        )

    async def list_account_transactions(
        self,
        account: str,
        limit: int = 200,
    ) -> list[dict[str, Any]]:
        """Return the most recent validated transactions for an account, newest first."""
        result = await self._call(
            self.rpc_url,
            "account_tx",
            {
                "account": account,
                "ledger_index_min": -1,
                "ledger_index_max": -1,
                "limit": limit,
                "forward": False,
            },
        )
        transactions = result.get("transactions", [])
        if not isinstance(transactions, list):
            raise ParseError("Expected a transaction list in account_tx response")
        return transactions

    async def __aenter__(self) -> "LedgerClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
