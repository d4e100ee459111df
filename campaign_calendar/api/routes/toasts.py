"""Transient user messages and holiday lookup."""

from __future__ import annotations

from datetime import date
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from campaign_calendar.api.dependencies import get_container
from campaign_calendar.models.toast import ToastMessage
from campaign_calendar.services.container import ServiceContainer
from campaign_calendar.services.holidays import holidays_in_year

router = APIRouter(tags=["ui"])


@router.get("/toasts", response_model=List[ToastMessage])
async def list_toasts(container: ServiceContainer = Depends(get_container)) -> List[ToastMessage]:
    return container.toasts.active()


@router.delete("/toasts/{toast_id}", status_code=status.HTTP_204_NO_CONTENT)
async def dismiss_toast(toast_id: str, container: ServiceContainer = Depends(get_container)) -> None:
    if not container.toasts.dismiss(toast_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Toast not found")


@router.get("/holidays", response_model=Dict[str, str])
async def list_holidays(year: Optional[int] = None) -> Dict[str, str]:
    return holidays_in_year(year or date.today().year)
