from .access import AccessMap, AccessProfile, AccessRole, AccessScope
from .activity import AuditLogEntry, Notification, NotificationChannel
from .delivery import AssignmentReport, ComposedMessage, DeliveryOutcome, StepResult
from .directory import Department, DepartmentCreateRequest, User, UserCreateRequest
from .event import CalendarEvent, EventCreateRequest, EventQuery, EventView, UrgencyLevel
from .toast import ToastKind, ToastMessage

__all__ = [
    "AccessMap",
    "AccessProfile",
    "AccessRole",
    "AccessScope",
    "AssignmentReport",
    "AuditLogEntry",
    "CalendarEvent",
    "ComposedMessage",
    "DeliveryOutcome",
    "Department",
    "DepartmentCreateRequest",
    "EventCreateRequest",
    "EventQuery",
    "EventView",
    "Notification",
    "NotificationChannel",
    "StepResult",
    "ToastKind",
    "ToastMessage",
    "UrgencyLevel",
    "User",
    "UserCreateRequest",
]
