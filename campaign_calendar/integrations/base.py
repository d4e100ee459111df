"""Base delivery channel abstraction."""

from __future__ import annotations

from typing import Any, Dict


class DeliveryChannel:
    """Common interface for outbound message channels.

    ``send`` returns on success and raises on any rejection; callers treat
    every exception as a delivery failure.
    """

    name: str = "channel"

    async def send(self, recipient_address: str, subject: str, body: str, metadata: Dict[str, Any]) -> None:
        raise NotImplementedError
