"""API schema definitions."""

from xns.api.schemas.base import APIBaseSchema, APIError, ErrorCode, ErrorDetail
from xns.api.schemas.responses import DomainResponse, HealthResponse, ReverseLookupResponse

__all__ = [
    # Base
    "APIBaseSchema",
    "APIError",
    "ErrorCode",
    "ErrorDetail",
    # Responses
    "DomainResponse",
    "HealthResponse",
    "ReverseLookupResponse",
]
