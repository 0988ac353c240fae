"""Ledger access layer."""

from xns.ledger.client import LedgerClient

__all__ = ["LedgerClient"]
