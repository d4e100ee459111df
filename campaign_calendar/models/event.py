from __future__ import annotations

import datetime as dt
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class UrgencyLevel(str, Enum):
    VERY_HIGH = "Very High"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class CalendarEvent(BaseModel):
    id: str
    title: str
    date: dt.date
    urgency: UrgencyLevel
    description: Optional[str] = None
    assignee_id: Optional[str] = None
    department_id: Optional[str] = None


class EventCreateRequest(BaseModel):
    title: str = Field(..., min_length=1)
    date: dt.date
    urgency: UrgencyLevel
    description: Optional[str] = None
    assignee_id: Optional[str] = None
    department_id: Optional[str] = None


class EventQuery(BaseModel):
    """Search and filter terms applied on top of the caller's scope."""

    text: str = ""
    assignee_id: Optional[str] = None
    urgency: Optional[UrgencyLevel] = None


class EventView(CalendarEvent):
    assignee_name: str
    department_name: str
