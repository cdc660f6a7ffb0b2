"""Device: TV set."""

from __future__ import annotations

from adapters.devices.base import StatefulDevice


class Tv(StatefulDevice):
    kind = "TV set"
