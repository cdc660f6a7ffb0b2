"""Core interfaces/abstractions.

Why:
- Defines contracts (Protocol) implemented by concrete adapters and services.
- Inverts dependencies: the core depends on abstractions, never on `Radio`
  or `SlackApi` directly.
"""

from core.interfaces.device import Device, Remote
from core.interfaces.furniture import Chair, CoffeeTable, FurnitureFactory, Sofa
from core.interfaces.notification import Notification
from core.interfaces.prototype import Prototype
from core.interfaces.transport import Transport

__all__ = [
    "Chair",
    "CoffeeTable",
    "Device",
    "FurnitureFactory",
    "Notification",
    "Prototype",
    "Remote",
    "Sofa",
    "Transport",
]
