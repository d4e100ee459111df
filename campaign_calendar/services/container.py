"""Wiring of the stores and services used by the API."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from campaign_calendar.core.config import Settings, settings
from campaign_calendar.integrations.base import DeliveryChannel
from campaign_calendar.integrations.emailjs import EmailJSChannel
from campaign_calendar.models.access import AccessMap
from campaign_calendar.notifications.fallback import FallbackLauncher, LoggingLauncher
from campaign_calendar.notifications.notifier import AssignmentNotifier, Sleep
from campaign_calendar.services.campaigns import CampaignService
from campaign_calendar.services.directory import DirectoryService
from campaign_calendar.storage.activity import ActivityRecorder
from campaign_calendar.storage.directory import InMemoryDirectory
from campaign_calendar.storage.events import InMemoryEventStore
from campaign_calendar.storage.toasts import ToastBoard

logger = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    config: Settings
    directory: InMemoryDirectory
    events: InMemoryEventStore
    recorder: ActivityRecorder
    toasts: ToastBoard
    notifier: AssignmentNotifier
    campaigns: CampaignService
    directory_service: DirectoryService

    @classmethod
    def build(
        cls,
        config: Optional[Settings] = None,
        *,
        channel: Optional[DeliveryChannel] = None,
        launcher: Optional[FallbackLauncher] = None,
        sleep: Sleep = asyncio.sleep,
    ) -> "ServiceContainer":
        config = config or settings
        if channel is None and not config.emailjs_configured:
            logger.warning("EmailJS is not configured; every assignment will use the mail fallback")
        directory = InMemoryDirectory(
            AccessMap(
                designer_address=config.DESIGNER_ADDRESS,
                department_addresses=dict(config.DEPARTMENT_ADDRESSES),
            )
        )
        events = InMemoryEventStore()
        recorder = ActivityRecorder()
        toasts = ToastBoard(ttl_seconds=config.TOAST_TTL_SECONDS)
        notifier = AssignmentNotifier(
            recorder=recorder,
            channel=channel or EmailJSChannel(config),
            toasts=toasts,
            launcher=launcher or LoggingLauncher(),
            fallback_delay=config.FALLBACK_DELAY_SECONDS,
            reference_length=config.REFERENCE_CODE_LENGTH,
            sleep=sleep,
        )
        return cls(
            config=config,
            directory=directory,
            events=events,
            recorder=recorder,
            toasts=toasts,
            notifier=notifier,
            campaigns=CampaignService(directory=directory, events=events, notifier=notifier, toasts=toasts),
            directory_service=DirectoryService(directory=directory, toasts=toasts),
        )


__all__ = ["ServiceContainer"]
