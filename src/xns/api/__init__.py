"""HTTP API for the resolver."""

from xns.api.app import create_app

__all__ = ["create_app"]
