"""Concrete devices (Bridge implementations).

Why a package:
- One module per device, all implementing `core.interfaces.device.Device`.
- New devices plug into every existing remote without touching them.
"""

from adapters.devices.base import StatefulDevice
from adapters.devices.radio import Radio
from adapters.devices.tv import Tv

__all__ = [
    "Radio",
    "StatefulDevice",
    "Tv",
]
