import gc

import pytest

from adapters.devices import Radio, Tv
from core.config import AppSettings
from core.interfaces import Remote
from core.services import AdvancedRemote, BasicRemote


@pytest.fixture(params=[Radio, Tv], ids=["radio", "tv"])
def device(request):
    return request.param()


@pytest.mark.parametrize("remote_cls", [BasicRemote, AdvancedRemote])
def test_power_toggles_exactly_once(device, remote_cls):
    remote = remote_cls(device)

    remote.power()
    assert device.is_enabled() is True

    remote.power()
    assert device.is_enabled() is False


def test_volume_up_three_times(device):
    remote = BasicRemote(device)

    for _ in range(3):
        remote.volume_up()

    assert device.get_volume() == 60


def test_volume_up_clamps_at_the_top(device):
    remote = BasicRemote(device)
    device.set_volume(95)

    remote.volume_up()
    assert device.get_volume() == 100

    remote.volume_up()
    assert device.get_volume() == 100


def test_volume_down_clamps_at_the_bottom(device):
    remote = BasicRemote(device)
    device.set_volume(5)

    remote.volume_down()

    assert device.get_volume() == 0


def test_channel_up_and_down(device):
    remote = BasicRemote(device)

    remote.channel_up()
    remote.channel_up()
    assert device.get_channel() == 3

    for _ in range(5):
        remote.channel_down()
    # No floor on channels.
    assert device.get_channel() == -2


def test_basic_then_advanced_scenario(device):
    BasicRemote(device).power()
    assert device.is_enabled() is True

    advanced = AdvancedRemote(device)
    advanced.mute()

    assert device.get_volume() == 0
    assert device.get_channel() == 1
    assert device.is_enabled() is True


def test_advanced_remote_delegates_base_controls(device):
    remote = AdvancedRemote(device)

    remote.volume_up()
    remote.channel_up()
    remote.volume_down()
    remote.channel_down()
    remote.volume_down()

    assert device.get_volume() == 20
    assert device.get_channel() == 1


def test_mute_bypasses_step_arithmetic(device):
    remote = AdvancedRemote(device)
    device.set_volume(87)

    remote.mute()

    assert device.get_volume() == 0


def test_remotes_share_one_device():
    tv = Tv()
    first = BasicRemote(tv)
    second = AdvancedRemote(tv)

    first.volume_up()
    second.volume_up()
    second.mute()
    first.volume_up()

    assert tv.get_volume() == 10
    assert first.device is tv
    assert second.device is tv


def test_dropping_remote_keeps_device():
    radio = Radio()
    remote = AdvancedRemote(radio)
    remote.power()

    del remote
    gc.collect()

    assert radio.is_enabled() is True
    assert radio.get_volume() == 30


def test_steps_follow_settings(device):
    remote = BasicRemote(device, AppSettings(volume_step=25, channel_step=10))

    remote.volume_up()
    remote.channel_up()

    assert device.get_volume() == 55
    assert device.get_channel() == 11


def test_remotes_satisfy_remote_contract(device):
    assert isinstance(BasicRemote(device), Remote)
    assert isinstance(AdvancedRemote(device), Remote)


def test_controls_are_logged(device, log_records):
    AdvancedRemote(device).mute()

    assert ("DEBUG", "Remote: mute") in log_records
