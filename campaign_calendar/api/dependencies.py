from __future__ import annotations

from fastapi import Depends, Request

from campaign_calendar.models.access import AccessScope
from campaign_calendar.services.container import ServiceContainer


def get_container(request: Request) -> ServiceContainer:
    return request.app.state.container


async def get_caller_address(request: Request, container: ServiceContainer = Depends(get_container)) -> str:
    """Return the caller's claimed address; it is not verified in any way."""

    config = container.config
    if config.ALLOW_ADDRESS_SIMULATION:
        simulated = request.headers.get(config.CALLER_ADDRESS_HEADER)
        if simulated and simulated.strip():
            return simulated.strip()
    return request.client.host if request.client else ""


async def get_access_scope(
    address: str = Depends(get_caller_address),
    container: ServiceContainer = Depends(get_container),
) -> AccessScope:
    return await container.directory_service.resolve_scope(address)
