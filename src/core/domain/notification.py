"""Record of a delivered notification.

Notifications return this instead of printing, so callers (and tests) can
inspect exactly what was sent and where.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class SentMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    channel: str = Field(..., min_length=1, description="Transport used, e.g. 'email' or 'slack'.")
    recipient: str = Field(..., min_length=1, description="Address or chat id the message went to.")
    title: str = Field(..., description="Original notification title.")
    body: str = Field(..., description="Payload as actually delivered.")
