"""Projection of the event list onto what a caller may see."""

from __future__ import annotations

from typing import Iterable, List

from campaign_calendar.models.access import AccessRole, AccessScope
from campaign_calendar.models.event import CalendarEvent, EventQuery


def passes_scope(event: CalendarEvent, scope: AccessScope) -> bool:
    if scope.role is AccessRole.DESIGNER:
        return True
    if scope.role is AccessRole.DEPARTMENT_USER:
        return scope.department_id is not None and event.department_id == scope.department_id
    return False


def passes_query(event: CalendarEvent, query: EventQuery) -> bool:
    text = query.text.lower()
    if text and text not in event.title.lower() and text not in event.id.lower():
        return False
    if query.assignee_id and event.assignee_id != query.assignee_id:
        return False
    if query.urgency is not None and event.urgency != query.urgency:
        return False
    return True


def filter_events(events: Iterable[CalendarEvent], scope: AccessScope, query: EventQuery | None = None) -> List[CalendarEvent]:
    """Return the visible subset of ``events`` in their original order."""

    query = query or EventQuery()
    return [event for event in events if passes_scope(event, scope) and passes_query(event, query)]


__all__ = ["filter_events", "passes_query", "passes_scope"]
