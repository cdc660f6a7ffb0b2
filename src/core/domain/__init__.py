"""Domain models and entities.

Why:
- Pure data structures (Pydantic v2) live here.
- The domain knows nothing about devices' concrete classes or transports:
  only the concepts each pattern manipulates.
"""

from core.domain.delivery import DeliveryType
from core.domain.device import DeviceState, clamp_volume
from core.domain.house import House
from core.domain.models import Circle, CopyUnsupported, Rectangle, SealedShape, Shape
from core.domain.notification import SentMessage

__all__ = [
    "Circle",
    "CopyUnsupported",
    "DeliveryType",
    "DeviceState",
    "House",
    "Rectangle",
    "SealedShape",
    "SentMessage",
    "Shape",
    "clamp_volume",
]
