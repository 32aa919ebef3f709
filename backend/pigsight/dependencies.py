"""FastAPI dependency injection."""

from __future__ import annotations

from collections.abc import AsyncGenerator

from fastapi import Depends, Request

from pigsight.config import Settings, settings
from pigsight.gateway.client import AnalysisGateway


def get_settings() -> Settings:
    return settings


async def get_gateway(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> AsyncGenerator[AnalysisGateway, None]:
    """Request-scoped gateway over the app's shared HTTP client.

    Raises ConfigurationError when unconfigured. Without a running lifespan
    (no ``app.state.http_client``) the gateway opens and closes its own client.
    """
    client = getattr(request.app.state, "http_client", None)
    async with AnalysisGateway(settings, client=client) as gateway:
        yield gateway
