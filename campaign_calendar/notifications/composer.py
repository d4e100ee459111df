"""Deterministic message templates for assignment notifications."""

from __future__ import annotations

from datetime import date
from typing import Optional

from campaign_calendar.constants import TURKISH_MONTHS, URGENCY_LABELS
from campaign_calendar.models.delivery import ComposedMessage
from campaign_calendar.models.directory import User
from campaign_calendar.models.event import CalendarEvent


def format_due_date(value: date) -> str:
    return f"{value.day} {TURKISH_MONTHS[value.month]} {value.year}"


def reference_code(event_id: str, length: int = 6) -> str:
    return event_id[:length].upper()


def compose_assignment_text(event: CalendarEvent, department_name: Optional[str] = None) -> str:
    label = URGENCY_LABELS[event.urgency.value]
    text = (
        f'{format_due_date(event.date)} tarihindeki "{event.title}" kampanyası için görevlendirildiniz.\n'
        f"Aciliyet: {label}"
    )
    if event.description:
        text += f"\n\nAçıklama:\n{event.description}"
    if department_name:
        text += f"\n\nTalep Eden Birim: {department_name}"
    return text


def compose_message(
    event: CalendarEvent,
    assignee: User,
    *,
    department_name: Optional[str] = None,
    reference_length: int = 6,
) -> ComposedMessage:
    return ComposedMessage(
        recipient=str(assignee.email),
        recipient_name=assignee.name,
        title=event.title,
        subject=f"Görev Ataması: {event.title}",
        body=compose_assignment_text(event, department_name),
        reference_code=reference_code(event.id, reference_length),
    )


def notification_text(assignee: User, event: CalendarEvent) -> str:
    return f'{assignee.name} kişisine "{event.title}" görevi atandı.'


def activity_log_text(assignee: User, event: CalendarEvent) -> str:
    return f"{event.title} kampanyası için {assignee.name} kişiye görev ataması yapıldı (ID: {event.id})"


__all__ = [
    "activity_log_text",
    "compose_assignment_text",
    "compose_message",
    "format_due_date",
    "notification_text",
    "reference_code",
]
