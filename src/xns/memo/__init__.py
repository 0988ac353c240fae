"""Memo-based on-chain address storage."""

from xns.memo.storage import (
    XNS_ADDRESSES_MEMO_TYPE,
    AddressStorageTransaction,
    MemoStorage,
    decode_memo,
    encode_memo,
    parse_addresses,
)

__all__ = [
    "XNS_ADDRESSES_MEMO_TYPE",
    "AddressStorageTransaction",
    "MemoStorage",
    "decode_memo",
    "encode_memo",
    "parse_addresses",
]
