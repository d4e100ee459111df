from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field


class ToastKind(str, Enum):
    SUCCESS = "success"
    INFO = "info"


class ToastMessage(BaseModel):
    id: str
    message: str
    kind: ToastKind = ToastKind.INFO
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
