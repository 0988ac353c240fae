"""On-chain address records stored in XRPL transaction memos.

A holder publishes ``{"BTC": "bc1q...", "ETH": "0x..."}`` by sending a
1-drop payment to themselves carrying an ``XNS_ADDRESSES`` memo. This module
builds that payment unsigned (signing and submission happen in the holder's
wallet) and reads the newest such memo back from the account's history.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

from xns.core.exceptions import ParseError

if TYPE_CHECKING:
    from xns.ledger.client import LedgerClient

logger = logging.getLogger(__name__)

XNS_ADDRESSES_MEMO_TYPE = "XNS_ADDRESSES"


def encode_memo(text: str) -> str:
    """Hex-encode memo text the way the ledger stores it."""
    return text.encode("utf-8").hex().upper()


def decode_memo(memo_hex: str) -> str:
    """
    Decode a hex memo field.

    Raises:
        ParseError: on invalid hex or UTF-8
    """
    try:
        return bytes.fromhex(memo_hex).decode("utf-8")
    except ValueError as e:
        raise ParseError(f"Invalid memo: {e}") from e


def parse_addresses(memo_data: str) -> dict[str, str]:
    """
    Parse an address map from decoded memo data.

    Raises:
        ParseError: if the data is not a JSON object of strings
    """
    try:
        data = json.loads(memo_data)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid address JSON: {e}") from e

    if not isinstance(data, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in data.items()
    ):
        raise ParseError("Address memo must map symbols to address strings")
    return data


class MemoField(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    memo_type: str = Field(..., alias="MemoType")
    memo_data: str = Field(..., alias="MemoData")


class TransactionMemo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    memo: MemoField = Field(..., alias="Memo")


class AddressStorageTransaction(BaseModel):
    """Unsigned self-payment carrying an address memo."""

    model_config = ConfigDict(populate_by_name=True)

    transaction_type: str = Field(default="Payment", alias="TransactionType")
    account: str = Field(..., min_length=1, alias="Account")
    destination: str = Field(..., min_length=1, alias="Destination")
    amount: str = Field(default="1", alias="Amount")  # drops
    memos: list[TransactionMemo] = Field(default_factory=list, alias="Memos")

    @classmethod
    def for_addresses(cls, account: str, addresses: dict[str, str]) -> "AddressStorageTransaction":
        memo = MemoField(
            memo_type=encode_memo(XNS_ADDRESSES_MEMO_TYPE),
            memo_data=encode_memo(json.dumps(addresses, sort_keys=True)),
        )
        return cls(
            account=account,
            destination=account,
            memos=[TransactionMemo(memo=memo)],
        )

    def to_ledger_json(self) -> dict[str, Any]:
        """Serialize with ledger field names."""
        return self.model_dump(by_alias=True)


class MemoStorage:
    """Reads and prepares memo-based address records for an account."""

    def __init__(self, ledger: "LedgerClient") -> None:
        self._ledger = ledger

    def build_storage_transaction(
        self,
        account: str,
        addresses: dict[str, str],
    ) -> dict[str, Any]:
        """Build the unsigned transaction JSON for publishing addresses."""
        return AddressStorageTransaction.for_addresses(account, addresses).to_ledger_json()

    async def get_addresses(self, account: str, limit: int = 200) -> dict[str, str]:
        """
        Return the newest address map the account published, or {}.

        Only memos on transactions sent by the account itself count.
        Malformed memos are skipped.
        """
        transactions = await self._ledger.list_account_transactions(account, limit=limit)

        for entry in transactions:
            tx = entry.get("tx_json") or entry.get("tx") or {}
            if tx.get("Account") != account:
                continue

            for wrapper in tx.get("Memos") or []:
                memo = wrapper.get("Memo") or {}
                try:
                    if decode_memo(memo.get("MemoType", "")) != XNS_ADDRESSES_MEMO_TYPE:
                        continue
                    return parse_addresses(decode_memo(memo.get("MemoData", "")))
                except ParseError as e:
                    logger.debug(f"Skipping malformed address memo for {account}: {e}")

        return {}
