"""NFT URI decoding and metadata retrieval."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from pydantic import ValidationError

from xns.config import DEFAULT_IPFS_GATEWAYS
from xns.core.exceptions import MetadataError, NetworkError, ParseError, XnsError
from xns.core.models import MetadataDocument
from xns.core.types import UriScheme

logger = logging.getLogger(__name__)

IPFS_PREFIX = "ipfs://"


def decode_uri(uri_hex: str) -> str:
    """
    Decode a ledger URI field (hex-encoded UTF-8).

    Raises:
        ParseError: on invalid hex or invalid UTF-8
    """
    try:
        raw = bytes.fromhex(uri_hex)
    except ValueError as e:
        raise ParseError(f"Hex decode error: {e}") from e

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"Invalid UTF-8 in URI: {e}") from e


def classify_uri(uri: str) -> UriScheme:
    """
    Determine how a decoded URI should be retrieved.

    Raises:
        MetadataError: for anything that is not IPFS, HTTP(S) or inline JSON
    """
    if uri.startswith(IPFS_PREFIX):
        return UriScheme.IPFS
    if uri.startswith(("http://", "https://")):
        return UriScheme.HTTP
    if uri.startswith(("{", "[")):
        return UriScheme.EMBEDDED_JSON
    raise MetadataError(f"Unsupported URI format: {uri}", details={"uri": uri})


def parse_document(text: str) -> MetadataDocument:
    """
    Deserialize a metadata JSON document.

    Raises:
        ParseError: if the text is not a JSON object matching the schema
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Failed to parse metadata JSON: {e}") from e

    if not isinstance(data, dict):
        raise ParseError(f"Metadata must be a JSON object, got {type(data).__name__}")

    try:
        return MetadataDocument.model_validate(data)
    except ValidationError as e:
        raise ParseError(f"Invalid metadata document: {e}") from e


class MetadataFetcher:
    """
    Resolves an NFT URI field to its metadata document.

    IPFS content is tried against each gateway in order because any single
    public gateway may be rate limited or down. Nothing is cached here.
    """

    def __init__(
        self,
        gateways: Sequence[str] | None = None,
        *,
        timeout: float = 15.0,
    ) -> None:
        self.gateways: tuple[str, ...] = tuple(gateways or DEFAULT_IPFS_GATEWAYS)
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

    async def resolve_uri(self, uri_hex: str) -> MetadataDocument:
        """Decode a hex URI and fetch the document it points to."""
        uri = decode_uri(uri_hex)
        logger.debug(f"Parsing NFT URI: {uri}")

        scheme = classify_uri(uri)
        if scheme == UriScheme.IPFS:
            return await self.fetch_from_ipfs(uri)
        if scheme == UriScheme.HTTP:
            return await self.fetch_from_http(uri)
        return parse_document(uri)

    async def fetch_from_ipfs(self, uri: str) -> MetadataDocument:
        """Try each gateway in order; the first parsed document wins."""
        cid = uri.removeprefix(IPFS_PREFIX).removeprefix("ipfs/")
        if not cid:
            raise MetadataError(f"Invalid IPFS URI: {uri}")

        last_error: XnsError | None = None
        for gateway in self.gateways:
            url = f"{gateway}{cid}"
            try:
                return await self.fetch_from_http(url)
            except XnsError as e:
                logger.warning(f"IPFS gateway {url} failed: {e}")
                last_error = e

        raise MetadataError(
            f"All gateways failed: {last_error}",
            details={"cid": cid, "gateways": list(self.gateways)},
        ) from last_error

    async def fetch_from_http(self, url: str) -> MetadataDocument:
        """Fetch and parse a metadata document with a single GET."""
        logger.debug(f"Fetching metadata from HTTP: {url}")

        async with self._get_client() as client:
            response = await client.get(url)

        if not response.is_success:
            raise NetworkError(
                f"HTTP {response.status_code}: Failed to fetch metadata",
                details={"url": url, "status_code": response.status_code},
            )

        return parse_document(response.text)

    async def __aenter__(self) -> "MetadataFetcher":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
