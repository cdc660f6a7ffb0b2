"""Remote controls (Bridge abstraction side).

A remote does no real work: every control is translated into primitive
`Device` calls. The remote holds a plain reference to its device and never
owns it, so several remotes may drive the same device (last write wins, no
locking; single-threaded use only) and dropping a remote leaves the device
untouched.

`AdvancedRemote` is the refined abstraction. It embeds a `BasicRemote`
instead of inheriting from it, so the device binding is defined in exactly
one place, and adds `mute`.
"""

from __future__ import annotations

from loguru import logger

from core.config import AppSettings
from core.interfaces.device import Device, Remote


class BasicRemote(Remote):
    def __init__(self, device: Device, settings: AppSettings | None = None) -> None:
        self._device = device
        self._settings = settings or AppSettings()

    @property
    def device(self) -> Device:
        return self._device

    def power(self) -> None:
        logger.debug("Remote: power toggle")
        if self._device.is_enabled():
            self._device.disable()
        else:
            self._device.enable()

    def volume_down(self) -> None:
        logger.debug("Remote: volume down")
        self._device.set_volume(self._device.get_volume() - self._settings.volume_step)

    def volume_up(self) -> None:
        logger.debug("Remote: volume up")
        self._device.set_volume(self._device.get_volume() + self._settings.volume_step)

    def channel_down(self) -> None:
        logger.debug("Remote: channel down")
        self._device.set_channel(self._device.get_channel() - self._settings.channel_step)

    def channel_up(self) -> None:
        logger.debug("Remote: channel up")
        self._device.set_channel(self._device.get_channel() + self._settings.channel_step)


class AdvancedRemote(Remote):
    def __init__(self, device: Device, settings: AppSettings | None = None) -> None:
        self._basic = BasicRemote(device, settings)

    @property
    def device(self) -> Device:
        return self._basic.device

    def power(self) -> None:
        self._basic.power()

    def volume_down(self) -> None:
        self._basic.volume_down()

    def volume_up(self) -> None:
        self._basic.volume_up()

    def channel_down(self) -> None:
        self._basic.channel_down()

    def channel_up(self) -> None:
        self._basic.channel_up()

    def mute(self) -> None:
        logger.debug("Remote: mute")
        self._basic.device.set_volume(0)
