"""NFT metadata retrieval and domain matching."""

from xns.metadata.fetcher import MetadataFetcher, classify_uri, decode_uri, parse_document
from xns.metadata.matcher import extract_domain_name, extract_expiration

__all__ = [
    "MetadataFetcher",
    "classify_uri",
    "decode_uri",
    "extract_domain_name",
    "extract_expiration",
    "parse_document",
]
