"""Transient user-visible messages that dismiss themselves after a TTL."""

from __future__ import annotations

import time
import uuid
from typing import List, Tuple

from campaign_calendar.models.toast import ToastKind, ToastMessage


class ToastBoard:
    def __init__(self, ttl_seconds: float = 4.0) -> None:
        self.ttl_seconds = ttl_seconds
        self._items: List[Tuple[float, ToastMessage]] = []

    def push(self, message: str, kind: ToastKind = ToastKind.INFO) -> ToastMessage:
        toast = ToastMessage(id=uuid.uuid4().hex[:9], message=message, kind=kind)
        self._prune()
        self._items.append((time.monotonic(), toast))
        return toast

    def success(self, message: str) -> ToastMessage:
        return self.push(message, ToastKind.SUCCESS)

    def info(self, message: str) -> ToastMessage:
        return self.push(message, ToastKind.INFO)

    def active(self) -> List[ToastMessage]:
        self._prune()
        return [toast for _, toast in self._items]

    def dismiss(self, toast_id: str) -> bool:
        before = len(self._items)
        self._items = [(created, toast) for created, toast in self._items if toast.id != toast_id]
        return len(self._items) != before

    def _prune(self) -> None:
        cutoff = time.monotonic() - self.ttl_seconds
        self._items = [(created, toast) for created, toast in self._items if created >= cutoff]


__all__ = ["ToastBoard"]
