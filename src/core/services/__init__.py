"""Behaviour composed over the core contracts."""

from core.services.delivery import Air, Truck, schedule_delivery
from core.services.furniture import ModernFurnitureFactory, VictorianFurnitureFactory
from core.services.house_builder import HouseBuilder
from core.services.remote import AdvancedRemote, BasicRemote
from core.services.scope import ProcessScope

__all__ = [
    "AdvancedRemote",
    "Air",
    "BasicRemote",
    "HouseBuilder",
    "ModernFurnitureFactory",
    "ProcessScope",
    "Truck",
    "VictorianFurnitureFactory",
    "schedule_delivery",
]
