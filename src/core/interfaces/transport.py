"""Transport contract produced by the delivery factory method."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.delivery import DeliveryType


@runtime_checkable
class Transport(Protocol):
    def plan_delivery(self) -> str: ...

    def transport_type(self) -> DeliveryType: ...
