"""Factory method: pick a `Transport` from a `DeliveryType`.

Why a factory function:
- Client code asks for "a road delivery" and gets something that plans it;
  it never names `Truck` or `Air`. New transports only touch `_TRANSPORTS`.
"""

from __future__ import annotations

from core.domain.delivery import DeliveryType
from core.errors import UnknownDeliveryTypeError
from core.interfaces.transport import Transport


class Truck(Transport):
    def plan_delivery(self) -> str:
        return "Inside Road Transport"

    def transport_type(self) -> DeliveryType:
        return DeliveryType.ROAD


class Air(Transport):
    def plan_delivery(self) -> str:
        return "Inside Air Transport"

    def transport_type(self) -> DeliveryType:
        return DeliveryType.AIR


_TRANSPORTS: dict[DeliveryType, type[Transport]] = {
    DeliveryType.ROAD: Truck,
    DeliveryType.AIR: Air,
}


def schedule_delivery(delivery_type: DeliveryType | str) -> Transport:
    """Return a fresh transport for `delivery_type` (enum or its value)."""

    try:
        kind = DeliveryType(delivery_type)
    except ValueError as exc:
        raise UnknownDeliveryTypeError(delivery_type) from exc
    return _TRANSPORTS[kind]()
