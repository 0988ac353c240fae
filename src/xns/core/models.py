"""Domain models for ledger tokens, metadata and resolved domains."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .types import NamingService

# Owner value used when the indexer could not confirm who holds a token.
UNKNOWN_OWNER = "rUnknownOwner"


class TokenRecord(BaseModel):
    """An NFT as listed by the ledger (account_nfts) or indexer (nfts_by_issuer)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    nft_id: str = Field(
        ...,
        validation_alias=AliasChoices("NFTokenID", "nft_id"),
        description="NFToken identifier",
    )
    uri: str | None = Field(
        default=None,
        validation_alias=AliasChoices("URI", "uri"),
        description="Hex-encoded metadata pointer",
    )
    issuer: str | None = Field(
        default=None,
        validation_alias=AliasChoices("Issuer", "issuer"),
        description="Minting account",
    )
    owner: str | None = Field(
        default=None,
        description="Current holder, only reported by the indexer listing",
    )


class TokenOwnership(BaseModel):
    """Result of an indexer nft_info lookup."""

    model_config = ConfigDict(frozen=True)

    nft_id: str
    owner: str | None = None
    is_burned: bool = False
    uri: str | None = None
    issuer: str | None = None


class MetadataAttribute(BaseModel):
    """A single typed attribute from NFT metadata."""

    trait_type: str = ""
    value: Any = None


class MetadataDocument(BaseModel):
    """Deserialized NFT metadata.

    The schema is open: unknown top-level fields are kept and exposed
    through ``extra_fields``.
    """

    model_config = ConfigDict(extra="allow")

    name: str = Field(default="", description="Display name")
    description: str = Field(default="", description="Free-text description")
    image: str = Field(default="", description="Image reference")
    attributes: list[MetadataAttribute] = Field(
        default_factory=list, description="Typed attributes, in document order"
    )

    @property
    def extra_fields(self) -> dict[str, Any]:
        """Top-level fields not covered by the known schema."""
        return dict(self.model_extra or {})


class DomainRecord(BaseModel):
    """A resolved .xrp domain."""

    model_config = ConfigDict(frozen=True)

    domain: str = Field(..., description="Domain name, e.g. 'ckelley.xrp'")
    owner: str = Field(..., min_length=1, description="Owner XRPL address")
    owner_verified: bool = Field(
        default=True,
        description="False when the owner could not be confirmed via the indexer",
    )
    nft_id: str = Field(..., description="Source NFToken identifier")
    service: NamingService = Field(..., description="Naming service of origin")
    addresses: dict[str, str] = Field(
        default_factory=dict, description="Lowercased chain symbol -> address"
    )
    text_records: dict[str, str] = Field(
        default_factory=dict, description="Free-text records (email, twitter, ...)"
    )
    expires_at: int | None = Field(default=None, description="Expiry, epoch seconds")
    metadata: MetadataDocument | None = Field(default=None, description="Raw metadata")
