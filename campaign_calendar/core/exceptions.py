"""Custom exception hierarchy for the campaign calendar."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from fastapi import status


class ApplicationError(Exception):
    """Base application error with HTTP semantics."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    code: str = "application_error"

    def __init__(self, message: str, *, status_code: int | None = None, code: str | None = None) -> None:
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code
        self.message = message


class NotFoundError(ApplicationError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"


class ValidationError(ApplicationError):
    """Raised when a request is well-formed but refers to something unusable."""

    status_code = 422
    code = "validation_error"


class ForbiddenError(ApplicationError):
    """Raised when the caller's resolved role may not perform an operation."""

    status_code = status.HTTP_403_FORBIDDEN
    code = "forbidden"


class UpstreamWriteError(ApplicationError):
    status_code = status.HTTP_502_BAD_GATEWAY
    code = "upstream_write_failed"


@dataclass
class CalendarError(Exception):
    """Base class for domain errors with structured payloads."""

    error_code: str
    message: str
    details: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        base = f"[{self.error_code}] {self.message}"
        if self.details:
            return f"{base} :: {self.details}"
        return base


class DeliveryFailureError(CalendarError):
    """Raised when the primary delivery channel rejects or cannot send a message."""


class DirectoryWriteError(CalendarError):
    """Raised when a user, department or access-map write fails."""


class EventWriteError(CalendarError):
    """Raised when the event store fails to create or delete events."""
