"""EmailJS transactional email integration."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from campaign_calendar.core.config import Settings, settings
from campaign_calendar.core.exceptions import DeliveryFailureError
from campaign_calendar.integrations.base import DeliveryChannel

logger = logging.getLogger(__name__)


class EmailJSChannel(DeliveryChannel):
    name = "email"

    def __init__(self, config: Optional[Settings] = None, *, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        config = config or settings
        self.api_url = str(config.EMAILJS_API_URL)
        self.service_id = config.EMAILJS_SERVICE_ID
        self.template_id = config.EMAILJS_TEMPLATE_ID
        self.public_key = config.EMAILJS_PUBLIC_KEY
        self.private_key = config.EMAILJS_PRIVATE_KEY
        self.timeout = config.EMAIL_TIMEOUT_SECONDS
        self._transport = transport

    @property
    def configured(self) -> bool:
        return bool(self.service_id and self.template_id and self.public_key)

    async def send(self, recipient_address: str, subject: str, body: str, metadata: Dict[str, Any]) -> None:
        if not self.configured:
            raise DeliveryFailureError(
                error_code="CHANNEL_NOT_CONFIGURED",
                message="EmailJS credentials missing; cannot send email.",
            )

        payload: Dict[str, Any] = {
            "service_id": self.service_id,
            "template_id": self.template_id,
            "user_id": self.public_key,
            "template_params": {
                "to_email": recipient_address,
                "email": recipient_address,
                "to_name": metadata.get("recipient_name", ""),
                "name": metadata.get("recipient_name", ""),
                "title": metadata.get("title", subject),
                "subject": subject,
                "message": body,
                "ref_id": metadata.get("ref_id", ""),
            },
        }
        if self.private_key:
            payload["accessToken"] = self.private_key

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(self.api_url, json=payload)
        except httpx.HTTPError as exc:
            raise DeliveryFailureError(
                error_code="CHANNEL_UNREACHABLE",
                message=f"EmailJS request failed: {exc}",
            ) from exc

        if response.status_code != httpx.codes.OK:
            raise DeliveryFailureError(
                error_code="CHANNEL_REJECTED",
                message="EmailJS rejected the message.",
                details={"status": response.status_code, "body": response.text[:200]},
            )
        logger.info("Email delivered to %s via EmailJS", recipient_address)


__all__ = ["EmailJSChannel"]
