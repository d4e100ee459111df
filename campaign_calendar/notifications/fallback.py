"""Local fallback for assignment notifications: a pre-filled mail link."""

from __future__ import annotations

import logging
from typing import List, Protocol
from urllib.parse import quote

from campaign_calendar.models.delivery import ComposedMessage

logger = logging.getLogger(__name__)

# Characters left unescaped by ECMAScript encodeURIComponent.
_URI_COMPONENT_SAFE = "-_.!~*'()"
_SIGNATURE = "İyi çalışmalar."
_SEPARATOR = "----------------"


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def build_fallback_subject(message: ComposedMessage) -> str:
    return f"ACİL: Görev Ataması: {message.title} [#{message.reference_code}]"


def build_fallback_body(message: ComposedMessage) -> str:
    return (
        f"Sayın {message.recipient_name},\n\n"
        f"{message.body}\n\n"
        f"{_SIGNATURE}\n\n"
        f"{_SEPARATOR}\n"
        f"Ref ID: #{message.reference_code}"
    )


def build_fallback_uri(message: ComposedMessage) -> str:
    """Return a ``mailto:`` URI carrying the full message and priority hints."""

    subject = encode_uri_component(build_fallback_subject(message))
    body = encode_uri_component(build_fallback_body(message))
    return f"mailto:{message.recipient}?subject={subject}&body={body}&importance=High&X-Priority=1"


class FallbackLauncher(Protocol):
    async def launch(self, uri: str) -> None: ...


class LoggingLauncher:
    """Hands the link to the client by logging it and keeping the recent ones.

    The API returns the link in the assignment report; the browser opens it.
    """

    def __init__(self, history_size: int = 50) -> None:
        self.history_size = history_size
        self.launched: List[str] = []

    async def launch(self, uri: str) -> None:
        logger.info("Fallback mail handoff prepared: %s", uri.split("?", 1)[0])
        self.launched.append(uri)
        if len(self.launched) > self.history_size:
            self.launched = self.launched[-self.history_size :]


__all__ = [
    "FallbackLauncher",
    "LoggingLauncher",
    "build_fallback_body",
    "build_fallback_subject",
    "build_fallback_uri",
    "encode_uri_component",
]
