"""Helpers shared by services that write to external collaborators."""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, Type, TypeVar

from campaign_calendar.core.exceptions import (
    ApplicationError,
    CalendarError,
    ForbiddenError,
    UpstreamWriteError,
)
from campaign_calendar.models.access import AccessScope
from campaign_calendar.storage.toasts import ToastBoard

logger = logging.getLogger(__name__)

T = TypeVar("T")


def require_designer(scope: AccessScope, action: str) -> None:
    if not scope.is_designer:
        raise ForbiddenError(f"Role '{scope.role.value}' may not {action}")


async def guarded_write(
    action: Callable[[], Awaitable[T]],
    *,
    error_type: Type[CalendarError],
    error_code: str,
    toasts: ToastBoard,
    failure_message: str,
) -> T:
    """Run a collaborator write, reporting failures as a toast.

    Application errors (missing records and similar) pass through untouched.
    Anything else is wrapped in ``error_type`` and surfaced as HTTP 502. No
    state is rolled back.
    """

    try:
        return await action()
    except ApplicationError:
        raise
    except Exception as exc:
        wrapped = error_type(error_code=error_code, message=failure_message, details={"reason": str(exc)})
        logger.error("%s", wrapped)
        toasts.info(failure_message)
        raise UpstreamWriteError(failure_message) from wrapped


__all__ = ["guarded_write", "require_designer"]
