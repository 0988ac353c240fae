"""API route modules."""

from xns.api.routes.health import router as health_router
from xns.api.routes.resolve import router as resolve_router

__all__ = [
    "health_router",
    "resolve_router",
]
