"""Campaign event orchestration: scoped reads, creation with assignment, deletion."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from pydantic import BaseModel

from campaign_calendar.access.visibility import filter_events
from campaign_calendar.constants import (
    MSG_EVENT_ASSIGNEE_UNKNOWN,
    MSG_EVENT_CREATED,
    MSG_EVENT_CREATED_UNASSIGNED,
    MSG_EVENT_DELETE_FAILED,
    MSG_EVENT_DELETED,
    MSG_EVENT_WRITE_FAILED,
    MSG_EVENTS_DELETED,
    UNASSIGNED_LABEL,
    UNKNOWN_LABEL,
)
from campaign_calendar.core.exceptions import EventWriteError
from campaign_calendar.models.access import AccessScope
from campaign_calendar.models.delivery import AssignmentReport
from campaign_calendar.models.directory import User
from campaign_calendar.models.event import CalendarEvent, EventCreateRequest, EventQuery, EventView
from campaign_calendar.notifications.notifier import AssignmentNotifier
from campaign_calendar.services.guards import guarded_write, require_designer
from campaign_calendar.services.holidays import holiday_for
from campaign_calendar.storage.directory import Directory
from campaign_calendar.storage.events import EventStore
from campaign_calendar.storage.toasts import ToastBoard

logger = logging.getLogger(__name__)


class EventCreateResult(BaseModel):
    event: EventView
    assignment: Optional[AssignmentReport] = None
    holiday_warning: Optional[str] = None


class CampaignService:
    def __init__(
        self,
        *,
        directory: Directory,
        events: EventStore,
        notifier: AssignmentNotifier,
        toasts: ToastBoard,
    ) -> None:
        self.directory = directory
        self.events = events
        self.notifier = notifier
        self.toasts = toasts

    async def list_visible(self, scope: AccessScope, query: Optional[EventQuery] = None) -> List[EventView]:
        """Return the events ``scope`` may see, in store order, matching ``query``."""

        events = await self.events.list_events()
        return await self.render(filter_events(events, scope, query))

    async def render(self, events: List[CalendarEvent]) -> List[EventView]:
        users = {user.id: user.name for user in await self.directory.list_users()}
        departments = {department.id: department.name for department in await self.directory.list_departments()}
        return [_render_event(event, users, departments) for event in events]

    async def create_event(self, scope: AccessScope, payload: EventCreateRequest) -> EventCreateResult:
        require_designer(scope, "create events")

        event = await guarded_write(
            lambda: self.events.create_event(payload),
            error_type=EventWriteError,
            error_code="EVENT_CREATE_FAILED",
            toasts=self.toasts,
            failure_message=MSG_EVENT_WRITE_FAILED,
        )
        logger.info("Created event %s (%s)", event.id, event.title)

        assignment: Optional[AssignmentReport] = None
        if not event.assignee_id:
            self.toasts.success(MSG_EVENT_CREATED_UNASSIGNED)
        else:
            assignee = await self.directory.get_user(event.assignee_id)
            if assignee is None:
                logger.warning(
                    "Event %s references unknown assignee %s; skipping notification", event.id, event.assignee_id
                )
                self.toasts.info(MSG_EVENT_ASSIGNEE_UNKNOWN)
            else:
                self.toasts.success(MSG_EVENT_CREATED)
                assignment = await self._notify(event, assignee)

        [view] = await self.render([event])
        return EventCreateResult(event=view, assignment=assignment, holiday_warning=holiday_for(event.date))

    async def delete_event(self, scope: AccessScope, event_id: str) -> None:
        require_designer(scope, "delete events")
        await guarded_write(
            lambda: self.events.delete_event(event_id),
            error_type=EventWriteError,
            error_code="EVENT_DELETE_FAILED",
            toasts=self.toasts,
            failure_message=MSG_EVENT_DELETE_FAILED,
        )
        self.toasts.info(MSG_EVENT_DELETED)

    async def delete_all(self, scope: AccessScope) -> int:
        require_designer(scope, "delete events")
        removed = await guarded_write(
            self.events.delete_all,
            error_type=EventWriteError,
            error_code="EVENT_DELETE_FAILED",
            toasts=self.toasts,
            failure_message=MSG_EVENT_DELETE_FAILED,
        )
        self.toasts.info(MSG_EVENTS_DELETED)
        return removed

    async def _notify(self, event: CalendarEvent, assignee: User) -> AssignmentReport:
        department_name = None
        if event.department_id:
            department = await self.directory.get_department(event.department_id)
            department_name = department.name if department else None

        return await self.notifier.notify_assignment(event, assignee, department_name=department_name)


def _render_event(event: CalendarEvent, users: Dict[str, str], departments: Dict[str, str]) -> EventView:
    return EventView(
        **event.model_dump(),
        assignee_name=_label(event.assignee_id, users),
        department_name=_label(event.department_id, departments),
    )


def _label(reference: Optional[str], names: Dict[str, str]) -> str:
    if not reference:
        return UNASSIGNED_LABEL
    return names.get(reference, UNKNOWN_LABEL)


__all__ = ["CampaignService", "EventCreateResult"]
