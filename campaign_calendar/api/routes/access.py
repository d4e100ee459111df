"""Caller access endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from campaign_calendar.api.dependencies import get_caller_address, get_container
from campaign_calendar.models.access import AccessProfile
from campaign_calendar.services.container import ServiceContainer

router = APIRouter(prefix="/access", tags=["access"])


@router.get("/me", response_model=AccessProfile)
async def who_am_i(
    address: str = Depends(get_caller_address),
    container: ServiceContainer = Depends(get_container),
) -> AccessProfile:
    """Describe the role and department scope resolved for the calling address."""

    return await container.directory_service.describe(address)
