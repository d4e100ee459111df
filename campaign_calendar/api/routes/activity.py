"""Notification and activity log endpoints (designer only)."""

from __future__ import annotations

from typing import Dict, List

from fastapi import APIRouter, Depends

from campaign_calendar.api.dependencies import get_access_scope, get_caller_address, get_container
from campaign_calendar.models.access import AccessScope
from campaign_calendar.models.activity import AuditLogEntry, Notification
from campaign_calendar.services.container import ServiceContainer
from campaign_calendar.services.guards import require_designer
from campaign_calendar.utils.audit import audit_logger

router = APIRouter(tags=["activity"])


@router.get("/notifications", response_model=List[Notification])
async def list_notifications(
    scope: AccessScope = Depends(get_access_scope),
    container: ServiceContainer = Depends(get_container),
) -> List[Notification]:
    require_designer(scope, "view notifications")
    return await container.recorder.notifications.list_all()


@router.post("/notifications/read-all", response_model=Dict[str, int])
async def mark_notifications_read(
    scope: AccessScope = Depends(get_access_scope),
    container: ServiceContainer = Depends(get_container),
) -> Dict[str, int]:
    require_designer(scope, "update notifications")
    return {"updated": await container.recorder.mark_all_read()}


@router.delete("/notifications", response_model=Dict[str, int])
async def clear_notifications(
    address: str = Depends(get_caller_address),
    scope: AccessScope = Depends(get_access_scope),
    container: ServiceContainer = Depends(get_container),
) -> Dict[str, int]:
    require_designer(scope, "clear notifications")
    removed = await container.recorder.notifications.clear_all()
    audit_logger.record("notifications.clear", address, {"removed": removed})
    return {"removed": removed}


@router.get("/logs", response_model=List[AuditLogEntry])
async def list_logs(
    scope: AccessScope = Depends(get_access_scope),
    container: ServiceContainer = Depends(get_container),
) -> List[AuditLogEntry]:
    require_designer(scope, "view the activity log")
    return await container.recorder.logs.list_all()


@router.delete("/logs", response_model=Dict[str, int])
async def clear_logs(
    address: str = Depends(get_caller_address),
    scope: AccessScope = Depends(get_access_scope),
    container: ServiceContainer = Depends(get_container),
) -> Dict[str, int]:
    require_designer(scope, "clear the activity log")
    removed = await container.recorder.logs.clear_all()
    audit_logger.record("logs.clear", address, {"removed": removed})
    return {"removed": removed}
