"""Unit test fixtures with HTTP mocking."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest
import respx
from httpx import Response

from xns.config import XnsSettings
from xns.ledger.client import LedgerClient
from xns.metadata.fetcher import MetadataFetcher


# ============================================================================
# HTTP Mocking Fixtures
# ============================================================================


@pytest.fixture
def respx_mock():
    """Provide a respx mock router for HTTP mocking.

    Use this when you need fine-grained control over mocked responses.
    The mock is automatically started and stopped by respx.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router


# ============================================================================
# JSON-RPC Stub
# ============================================================================


Handler = Callable[[dict[str, Any]], "Response | dict[str, Any]"]


class JsonRpcStub:
    """
    Side effect for a mocked JSON-RPC endpoint.

    Requests are dispatched on their ``method``. A handler returns either a
    full Response or a result dict to wrap in the JSON-RPC envelope.
    Unregistered methods get an in-band ``unknownCmd`` error, as rippled
    reports them.
    """

    def __init__(self) -> None:
        self.handlers: dict[str, Handler] = {}
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def on(self, method: str, handler: Handler) -> "JsonRpcStub":
        self.handlers[method] = handler
        return self

    def result(self, method: str, result: dict[str, Any]) -> "JsonRpcStub":
        """Answer every call to ``method`` with the same result."""
        return self.on(method, lambda params: result)

    def fail(self, method: str, status_code: int = 500, text: str = "boom") -> "JsonRpcStub":
        return self.on(method, lambda params: Response(status_code, text=text))

    def count(self, method: str) -> int:
        return sum(1 for name, _ in self.calls if name == method)

    def __call__(self, request: httpx.Request) -> Response:
        payload = json.loads(request.content)
        method = payload["method"]
        params = payload["params"][0]
        self.calls.append((method, params))

        handler = self.handlers.get(method)
        if handler is None:
            return rpc_result({"status": "error", "error": "unknownCmd"})

        reply = handler(params)
        return reply if isinstance(reply, Response) else rpc_result(reply)


@pytest.fixture
def rpc_stub() -> Callable[[], JsonRpcStub]:
    """Factory for fresh JSON-RPC stubs."""
    return JsonRpcStub


# ============================================================================
# Client Fixtures
# ============================================================================


@pytest.fixture
def ledger(mock_settings: XnsSettings) -> LedgerClient:
    """Ledger client pointing at the mocked node and indexer."""
    return LedgerClient(
        mock_settings.network,
        rpc_url=mock_settings.rpc_url,
        indexer_url=mock_settings.indexer_url,
        timeout=mock_settings.http_timeout,
    )


@pytest.fixture
def fetcher(mock_settings: XnsSettings) -> MetadataFetcher:
    """Metadata fetcher using the mocked gateways."""
    return MetadataFetcher(mock_settings.ipfs_gateways, timeout=mock_settings.http_timeout)


# ============================================================================
# Mock Response Helpers
# ============================================================================


def mock_json_response(data: Any, status_code: int = 200) -> Response:
    """Create a mock JSON response."""
    return Response(
        status_code=status_code,
        json=data,
        headers={"Content-Type": "application/json"},
    )


def rpc_result(result: dict[str, Any]) -> Response:
    """Wrap a result object in a JSON-RPC response envelope."""
    return mock_json_response({"result": {"status": "success", **result}})
