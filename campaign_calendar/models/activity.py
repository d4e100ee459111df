from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class NotificationChannel(str, Enum):
    EMAIL = "email"
    SYSTEM = "system"


class Notification(BaseModel):
    id: str
    title: str
    message: str
    timestamp: datetime = Field(default_factory=_utcnow)
    read: bool = False
    channel: NotificationChannel = NotificationChannel.SYSTEM


class AuditLogEntry(BaseModel):
    id: str
    message: str
    timestamp: datetime = Field(default_factory=_utcnow)
