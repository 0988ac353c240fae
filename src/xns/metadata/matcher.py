"""Extract domain names and expiry from NFT metadata."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from xns.core.domain import DOMAIN_SUFFIX
from xns.core.models import MetadataDocument

DOMAIN_ATTRIBUTE_KEYS = frozenset({"domain", "name"})
EXPIRY_ATTRIBUTE_KEYS = ("expiration", "expires", "expires_at")
EXPIRY_EXTRA_KEYS = ("expires_at", "expiration")


def _domain_value(value: Any, suffix: str) -> str | None:
    if isinstance(value, str) and value.endswith(suffix):
        return value
    return None


def extract_domain_name(
    metadata: MetadataDocument,
    suffix: str = DOMAIN_SUFFIX,
) -> str | None:
    """
    Find the domain a metadata document describes.

    Lookup order, first match wins:
    1. the display name
    2. attributes whose trait_type is exactly "domain" or "name"
    3. the extra "domain" field

    Documents may satisfy several rules with different strings, so the
    order matters.
    """
    if found := _domain_value(metadata.name, suffix):
        return found

    for attr in metadata.attributes:
        if attr.trait_type in DOMAIN_ATTRIBUTE_KEYS:
            if found := _domain_value(attr.value, suffix):
                return found

    return _domain_value(metadata.extra_fields.get("domain"), suffix)


def _to_timestamp(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if text.isdigit():
            return int(text)
        try:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            return None
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return int(parsed.timestamp())
    return None


def extract_expiration(metadata: MetadataDocument) -> int | None:
    """Return the domain expiry as epoch seconds, if the metadata carries one."""
    for attr in metadata.attributes:
        if attr.trait_type.lower() in EXPIRY_ATTRIBUTE_KEYS:
            if (ts := _to_timestamp(attr.value)) is not None:
                return ts

    extra = metadata.extra_fields
    for key in EXPIRY_EXTRA_KEYS:
        if (ts := _to_timestamp(extra.get(key))) is not None:
            return ts

    return None
