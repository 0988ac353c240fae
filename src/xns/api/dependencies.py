"""FastAPI dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request

from xns.resolution.engine import XnsResolver


async def get_resolver(request: Request) -> XnsResolver:
    """Get the shared resolver from app state."""
    resolver = getattr(request.app.state, "resolver", None)
    if resolver is None:
        raise HTTPException(status_code=503, detail="Resolver not initialized")
    return resolver


# Type alias for cleaner dependency injection
Resolver = Annotated[XnsResolver, Depends(get_resolver)]
