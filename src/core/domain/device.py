"""State held by a Bridge implementation (a device).

Volume is clamped on every write, including plain attribute assignment,
because the model validates assignments. Channel is stored exactly as given:
it has no floor and can go negative. The asymmetry is kept on purpose.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

MIN_VOLUME = 0
MAX_VOLUME = 100


def clamp_volume(percent: int) -> int:
    """Constrain `percent` into [MIN_VOLUME, MAX_VOLUME]."""

    return max(MIN_VOLUME, min(MAX_VOLUME, percent))


class DeviceState(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    enabled: bool = Field(default=False, description="Whether the device is powered on.")
    volume: int = Field(default=30, description="Volume percentage, always in [0, 100].")
    channel: int = Field(default=1, description="Current channel; unbounded.")

    @field_validator("volume")
    @classmethod
    def _clamp(cls, value: int) -> int:
        return clamp_volume(value)
