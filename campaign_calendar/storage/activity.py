"""Append-only notification and activity log stores."""

from __future__ import annotations

import uuid
from typing import Generic, List, TypeVar

from campaign_calendar.models.activity import AuditLogEntry, Notification, NotificationChannel

T = TypeVar("T")


class AppendOnlyLog(Generic[T]):
    """Unbounded append-only sequence listed newest-first."""

    def __init__(self) -> None:
        self._entries: List[T] = []

    async def append(self, entry: T) -> T:
        self._entries.append(entry)
        return entry

    async def list_all(self) -> List[T]:
        return list(reversed(self._entries))

    async def clear_all(self) -> int:
        count = len(self._entries)
        self._entries.clear()
        return count

    def __len__(self) -> int:
        return len(self._entries)


class ActivityRecorder:
    """Holds the notification and activity log sequences.

    Clearing is not role-aware; callers gate it to the designer role.
    """

    def __init__(self) -> None:
        self.notifications: AppendOnlyLog[Notification] = AppendOnlyLog()
        self.logs: AppendOnlyLog[AuditLogEntry] = AppendOnlyLog()

    async def record_notification(
        self,
        title: str,
        message: str,
        channel: NotificationChannel = NotificationChannel.SYSTEM,
    ) -> Notification:
        notification = Notification(id=uuid.uuid4().hex, title=title, message=message, channel=channel)
        return await self.notifications.append(notification)

    async def record_log(self, message: str) -> AuditLogEntry:
        return await self.logs.append(AuditLogEntry(id=uuid.uuid4().hex, message=message))

    async def mark_all_read(self) -> int:
        changed = 0
        for notification in await self.notifications.list_all():
            if not notification.read:
                notification.read = True
                changed += 1
        return changed


__all__ = ["ActivityRecorder", "AppendOnlyLog"]
