"""Outcome models for the assignment notification pipeline."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class DeliveryOutcome(str, Enum):
    DELIVERED = "delivered"
    FALLBACK_HANDOFF = "fallback_handoff"


class ComposedMessage(BaseModel):
    recipient: str
    recipient_name: str
    title: str
    subject: str
    body: str
    reference_code: str


class StepResult(BaseModel):
    name: str
    ok: bool
    error: Optional[str] = None


class AssignmentReport(BaseModel):
    event_id: str
    assignee_id: str
    outcome: DeliveryOutcome
    reference_code: str
    steps: List[StepResult] = Field(default_factory=list)
    fallback_uri: Optional[str] = None

    def step(self, name: str) -> Optional[StepResult]:
        for result in self.steps:
            if result.name == name:
                return result
        return None
