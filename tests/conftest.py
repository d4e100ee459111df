from __future__ import annotations

from typing import Any, Dict, List

import pytest

from campaign_calendar.core.config import Settings
from campaign_calendar.core.exceptions import DeliveryFailureError
from campaign_calendar.integrations.base import DeliveryChannel
from campaign_calendar.services.container import ServiceContainer


class StubChannel(DeliveryChannel):
    name = "email"

    def __init__(self, fail: bool = False, recorder=None) -> None:
        self.fail = fail
        self.recorder = recorder
        self.calls: List[Dict[str, Any]] = []

    async def send(self, recipient_address, subject, body, metadata):
        call = {
            "recipient": recipient_address,
            "subject": subject,
            "body": body,
            "metadata": metadata,
        }
        if self.recorder is not None:
            call["notifications_before_send"] = len(self.recorder.notifications)
            call["logs_before_send"] = len(self.recorder.logs)
        self.calls.append(call)
        if self.fail:
            raise DeliveryFailureError(error_code="CHANNEL_REJECTED", message="blocked by firewall")


class StubLauncher:
    def __init__(self) -> None:
        self.launched: List[str] = []

    async def launch(self, uri: str) -> None:
        self.launched.append(uri)


class FakeSleep:
    def __init__(self) -> None:
        self.delays: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


DESIGNER = "10.0.0.1"
DEPT_A_USER = "10.0.0.2"
OUTSIDER = "10.0.0.9"


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        DESIGNER_ADDRESS=DESIGNER,
        DEPARTMENT_ADDRESSES={DEPT_A_USER: "dept-A"},
        EMAILJS_SERVICE_ID=None,
        EMAILJS_TEMPLATE_ID=None,
        EMAILJS_PUBLIC_KEY=None,
        FALLBACK_DELAY_SECONDS=1.0,
        SEED_ON_STARTUP=False,
    )


@pytest.fixture
def launcher() -> StubLauncher:
    return StubLauncher()


@pytest.fixture
def fake_sleep() -> FakeSleep:
    return FakeSleep()


@pytest.fixture
def failing_channel() -> StubChannel:
    return StubChannel(fail=True)


@pytest.fixture
def container(test_settings, failing_channel, launcher, fake_sleep) -> ServiceContainer:
    built = ServiceContainer.build(test_settings, channel=failing_channel, launcher=launcher, sleep=fake_sleep)
    failing_channel.recorder = built.recorder
    return built
