"""In-memory event store."""

from __future__ import annotations

import uuid
from typing import Dict, List, Protocol

from campaign_calendar.core.exceptions import NotFoundError
from campaign_calendar.models.event import CalendarEvent, EventCreateRequest


class EventStore(Protocol):
    async def list_events(self) -> List[CalendarEvent]: ...

    async def create_event(self, payload: EventCreateRequest, *, event_id: str | None = None) -> CalendarEvent: ...

    async def delete_event(self, event_id: str) -> None: ...

    async def delete_all(self) -> int: ...


class InMemoryEventStore:
    """Keeps events in insertion order; events are never edited, only deleted."""

    def __init__(self) -> None:
        self._events: Dict[str, CalendarEvent] = {}

    async def list_events(self) -> List[CalendarEvent]:
        return list(self._events.values())

    async def create_event(self, payload: EventCreateRequest, *, event_id: str | None = None) -> CalendarEvent:
        event = CalendarEvent(id=event_id or uuid.uuid4().hex, **payload.model_dump())
        self._events[event.id] = event
        return event

    async def delete_event(self, event_id: str) -> None:
        if self._events.pop(event_id, None) is None:
            raise NotFoundError(f"Event '{event_id}' not found")

    async def delete_all(self) -> int:
        count = len(self._events)
        self._events.clear()
        return count


__all__ = ["EventStore", "InMemoryEventStore"]
