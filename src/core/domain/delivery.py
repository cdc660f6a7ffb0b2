"""Delivery types understood by the transport factory method."""

from __future__ import annotations

from enum import Enum


class DeliveryType(str, Enum):
    """Ways a delivery can travel."""

    ROAD = "road"
    AIR = "air"
