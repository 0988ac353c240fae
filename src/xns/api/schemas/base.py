"""Shared schema configuration and the error envelope."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from xns.core.exceptions import (
    DomainNotFoundError,
    InvalidDomainError,
    MetadataError,
    NetworkError,
    ParseError,
    RpcError,
    XnsError,
)

_UPSTREAM_ERRORS = (NetworkError, RpcError, ParseError, MetadataError)


class APIBaseSchema(BaseModel):
    """Response models serialize with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ErrorCode(StrEnum):
    """Machine-readable error codes returned by the API."""

    INVALID_DOMAIN = "invalid_domain"
    DOMAIN_NOT_FOUND = "domain_not_found"
    UPSTREAM_ERROR = "upstream_error"
    INTERNAL_ERROR = "internal_error"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]

    @classmethod
    def for_error(cls, error: XnsError) -> ErrorCode:
        """Classify a resolver error. Ledger, indexer and gateway failures are upstream errors."""
        if isinstance(error, InvalidDomainError):
            return cls.INVALID_DOMAIN
        if isinstance(error, DomainNotFoundError):
            return cls.DOMAIN_NOT_FOUND
        if isinstance(error, _UPSTREAM_ERRORS):
            return cls.UPSTREAM_ERROR
        return cls.INTERNAL_ERROR


_STATUS_CODES = {
    ErrorCode.INVALID_DOMAIN: 400,
    ErrorCode.DOMAIN_NOT_FOUND: 404,
    ErrorCode.UPSTREAM_ERROR: 502,
    ErrorCode.INTERNAL_ERROR: 500,
}


class ErrorDetail(APIBaseSchema):
    code: ErrorCode
    message: str
    details: dict[str, Any] | None = None


class APIError(APIBaseSchema):
    """Body of every non-2xx resolve or reverse lookup response."""

    error: ErrorDetail

    @classmethod
    def from_exception(cls, error: XnsError) -> APIError:
        return cls(
            error=ErrorDetail(
                code=ErrorCode.for_error(error),
                message=error.message,
                details=error.details or None,
            )
        )

    @property
    def status_code(self) -> int:
        return self.error.code.status_code
