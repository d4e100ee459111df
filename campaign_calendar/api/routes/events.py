"""Campaign event endpoints."""

from __future__ import annotations

from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, status

from campaign_calendar.api.dependencies import get_access_scope, get_caller_address, get_container
from campaign_calendar.models.access import AccessScope
from campaign_calendar.models.event import EventCreateRequest, EventQuery, EventView, UrgencyLevel
from campaign_calendar.services.campaigns import EventCreateResult
from campaign_calendar.services.container import ServiceContainer
from campaign_calendar.utils.audit import audit_logger

router = APIRouter(prefix="/events", tags=["events"])


@router.get("", response_model=List[EventView])
async def list_events(
    q: str = "",
    assignee_id: Optional[str] = None,
    urgency: Optional[UrgencyLevel] = None,
    scope: AccessScope = Depends(get_access_scope),
    container: ServiceContainer = Depends(get_container),
) -> List[EventView]:
    """List the events visible to the caller, narrowed by the search terms."""

    query = EventQuery(text=q, assignee_id=assignee_id or None, urgency=urgency)
    return await container.campaigns.list_visible(scope, query)


@router.post("", response_model=EventCreateResult, status_code=status.HTTP_201_CREATED)
async def create_event(
    payload: EventCreateRequest,
    address: str = Depends(get_caller_address),
    scope: AccessScope = Depends(get_access_scope),
    container: ServiceContainer = Depends(get_container),
) -> EventCreateResult:
    result = await container.campaigns.create_event(scope, payload)
    audit_logger.record(
        "event.create",
        address,
        {
            "event_id": result.event.id,
            "assignee_id": result.event.assignee_id,
            "outcome": result.assignment.outcome.value if result.assignment else None,
        },
    )
    return result


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(
    event_id: str,
    address: str = Depends(get_caller_address),
    scope: AccessScope = Depends(get_access_scope),
    container: ServiceContainer = Depends(get_container),
) -> None:
    await container.campaigns.delete_event(scope, event_id)
    audit_logger.record("event.delete", address, {"event_id": event_id})


@router.delete("", response_model=Dict[str, int])
async def delete_all_events(
    address: str = Depends(get_caller_address),
    scope: AccessScope = Depends(get_access_scope),
    container: ServiceContainer = Depends(get_container),
) -> Dict[str, int]:
    removed = await container.campaigns.delete_all(scope)
    audit_logger.record("event.delete_all", address, {"removed": removed})
    return {"removed": removed}
