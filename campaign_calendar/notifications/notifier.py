"""Assignment notification pipeline.

Assigning an event to a user runs a fixed sequence of steps:

1. compose the outbound message,
2. append the activity log entry and the user-facing notification,
3. try the primary delivery channel,
4. on failure, wait a short presentation delay and hand a pre-filled mail
   link to the fallback launcher.

Each step reports a ``StepResult``; a failed step is logged and carried in
the ``AssignmentReport`` without aborting the following steps. Bookkeeping
always happens before delivery so the record survives a delivery failure.
Nothing here is retried and nothing raises back to the caller.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from opentelemetry import trace

from campaign_calendar.constants import MSG_ASSIGNMENT_TITLE, MSG_EMAIL_FALLBACK, MSG_EMAIL_SENT
from campaign_calendar.integrations.base import DeliveryChannel
from campaign_calendar.models.activity import NotificationChannel
from campaign_calendar.models.delivery import AssignmentReport, ComposedMessage, DeliveryOutcome, StepResult
from campaign_calendar.models.directory import User
from campaign_calendar.models.event import CalendarEvent
from campaign_calendar.notifications.composer import activity_log_text, compose_message, notification_text
from campaign_calendar.notifications.fallback import FallbackLauncher, LoggingLauncher, build_fallback_uri
from campaign_calendar.storage.activity import ActivityRecorder
from campaign_calendar.storage.toasts import ToastBoard
from campaign_calendar.utils.monitoring import observe_assignment, observe_delivery_failure

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

Sleep = Callable[[float], Awaitable[None]]


class AssignmentNotifier:
    """Run the side effects of assigning an event to a user."""

    def __init__(
        self,
        *,
        recorder: ActivityRecorder,
        channel: DeliveryChannel,
        toasts: ToastBoard,
        launcher: Optional[FallbackLauncher] = None,
        fallback_delay: float = 1.0,
        reference_length: int = 6,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self.recorder = recorder
        self.channel = channel
        self.toasts = toasts
        self.launcher = launcher or LoggingLauncher()
        self.fallback_delay = fallback_delay
        self.reference_length = reference_length
        self._sleep = sleep

    async def notify_assignment(
        self,
        event: CalendarEvent,
        assignee: User,
        *,
        department_name: Optional[str] = None,
    ) -> AssignmentReport:
        with tracer.start_as_current_span("notify_assignment") as span:
            span.set_attribute("event.id", event.id)
            span.set_attribute("assignee.id", assignee.id)

            message = compose_message(
                event,
                assignee,
                department_name=department_name,
                reference_length=self.reference_length,
            )
            steps = [StepResult(name="compose", ok=True)]

            steps.append(
                await self._run_step(
                    "record_notification",
                    lambda: self.recorder.record_notification(
                        MSG_ASSIGNMENT_TITLE,
                        notification_text(assignee, event),
                        NotificationChannel.EMAIL,
                    ),
                )
            )
            steps.append(
                await self._run_step(
                    "record_audit",
                    lambda: self.recorder.record_log(activity_log_text(assignee, event)),
                )
            )

            delivery = await self._deliver(message)
            steps.append(delivery)

            if delivery.ok:
                self.toasts.success(MSG_EMAIL_SENT)
                report = AssignmentReport(
                    event_id=event.id,
                    assignee_id=assignee.id,
                    outcome=DeliveryOutcome.DELIVERED,
                    reference_code=message.reference_code,
                    steps=steps,
                )
            else:
                self.toasts.info(MSG_EMAIL_FALLBACK)
                uri = await self._hand_off(message, steps)
                report = AssignmentReport(
                    event_id=event.id,
                    assignee_id=assignee.id,
                    outcome=DeliveryOutcome.FALLBACK_HANDOFF,
                    reference_code=message.reference_code,
                    steps=steps,
                    fallback_uri=uri,
                )

            span.set_attribute("assignment.outcome", report.outcome.value)
            observe_assignment(report.outcome.value)
            return report

    async def _deliver(self, message: ComposedMessage) -> StepResult:
        with tracer.start_as_current_span("delivery.send") as span:
            span.set_attribute("delivery.channel", self.channel.name)
            try:
                await self.channel.send(
                    message.recipient,
                    message.subject,
                    message.body,
                    {
                        "recipient_name": message.recipient_name,
                        "title": message.title,
                        "ref_id": f"#{message.reference_code}",
                    },
                )
            except Exception as exc:
                span.record_exception(exc)
                observe_delivery_failure(self.channel.name)
                logger.warning("Primary delivery via %s failed for %s: %s", self.channel.name, message.recipient, exc)
                return StepResult(name="deliver", ok=False, error=str(exc))
        return StepResult(name="deliver", ok=True)

    async def _hand_off(self, message: ComposedMessage, steps: list) -> str:
        await self._sleep(self.fallback_delay)
        uri = build_fallback_uri(message)
        steps.append(await self._run_step("fallback", lambda: self.launcher.launch(uri)))
        return uri

    async def _run_step(self, name: str, action: Callable[[], Awaitable[object]]) -> StepResult:
        try:
            await action()
        except Exception as exc:
            logger.error("Assignment step '%s' failed: %s", name, exc)
            return StepResult(name=name, ok=False, error=str(exc))
        return StepResult(name=name, ok=True)


__all__ = ["AssignmentNotifier"]
