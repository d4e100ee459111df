"""Populate an empty directory and event store with the default data set."""

from __future__ import annotations

import logging
from datetime import date
from typing import Dict, Optional

from campaign_calendar.constants import DEFAULT_DEPARTMENTS, DEFAULT_EVENTS, DEFAULT_USERS
from campaign_calendar.models.event import EventCreateRequest
from campaign_calendar.storage.directory import Directory
from campaign_calendar.storage.events import EventStore

logger = logging.getLogger(__name__)


async def seed_defaults(directory: Directory, events: EventStore, *, today: Optional[date] = None) -> Dict[str, int]:
    """Fill each empty collection; collections that already hold data are left alone.

    Seeded events are placed in the month of ``today`` and do not trigger
    assignment notifications.
    """

    today = today or date.today()
    counts = {"users": 0, "departments": 0, "events": 0}

    if not await directory.list_users():
        for record in DEFAULT_USERS:
            await directory.create_user(record["name"], record["email"], record["avatar"], user_id=record["id"])
            counts["users"] += 1

    if not await directory.list_departments():
        for record in DEFAULT_DEPARTMENTS:
            await directory.create_department(record["name"], department_id=record["id"])
            counts["departments"] += 1

    if not await events.list_events():
        for record in DEFAULT_EVENTS:
            payload = EventCreateRequest(
                title=record["title"],
                date=today.replace(day=int(record["day"])),
                urgency=record["urgency"],
                assignee_id=record["assignee_id"],
                department_id=record["department_id"],
            )
            await events.create_event(payload, event_id=str(record["id"]))
            counts["events"] += 1

    logger.info("Seeded defaults: %s", counts)
    return counts


__all__ = ["seed_defaults"]
