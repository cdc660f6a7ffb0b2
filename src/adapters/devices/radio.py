"""Device: radio."""

from __future__ import annotations

from adapters.devices.base import StatefulDevice


class Radio(StatefulDevice):
    kind = "radio"
