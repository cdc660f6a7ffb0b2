"""Shared state handling for concrete devices.

Radio and TV behave identically except for how they introduce themselves,
so the state bookkeeping lives here once and each device only supplies its
`kind` label.
"""

from __future__ import annotations

from loguru import logger

from core.config import AppSettings
from core.domain.device import DeviceState
from core.interfaces.device import Device

_RULE = "-" * 36


class StatefulDevice(Device):
    """A `Device` backed by a `DeviceState` model."""

    kind = "device"

    def __init__(self, settings: AppSettings | None = None) -> None:
        settings = settings or AppSettings()
        self._state = DeviceState(
            volume=settings.default_volume,
            channel=settings.default_channel,
        )

    def is_enabled(self) -> bool:
        return self._state.enabled

    def enable(self) -> None:
        self._state.enabled = True

    def disable(self) -> None:
        self._state.enabled = False

    def get_volume(self) -> int:
        return self._state.volume

    def set_volume(self, percent: int) -> None:
        # DeviceState clamps on assignment.
        self._state.volume = percent
        if self._state.volume != percent:
            logger.debug("{}: volume {} clamped to {}", self.kind, percent, self._state.volume)

    def get_channel(self) -> int:
        return self._state.channel

    def set_channel(self, channel: int) -> None:
        self._state.channel = channel

    def describe(self) -> str:
        status = "enabled" if self._state.enabled else "disabled"
        return "\n".join(
            [
                _RULE,
                f"| I'm {self.kind}.",
                f"| I'm {status}",
                f"| Current volume is {self._state.volume}%",
                f"| Current channel is {self._state.channel}",
                _RULE,
            ]
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(enabled={self._state.enabled}, volume={self._state.volume}, channel={self._state.channel})"
