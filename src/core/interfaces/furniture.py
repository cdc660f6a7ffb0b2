"""Furniture family contracts (Abstract Factory).

Why a factory per family:
- A Victorian chair should never end up next to a modern sofa. Each factory
  builds a whole matching family, and client code only sees these contracts.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Chair(Protocol):
    style: str

    def has_legs(self) -> bool: ...

    def sit_on(self) -> str: ...


@runtime_checkable
class CoffeeTable(Protocol):
    style: str

    def has_legs(self) -> bool: ...

    def change_color(self) -> str: ...


@runtime_checkable
class Sofa(Protocol):
    style: str

    def size(self) -> int: ...


@runtime_checkable
class FurnitureFactory(Protocol):
    def create_chair(self) -> Chair: ...

    def create_coffee_table(self) -> CoffeeTable: ...

    def create_sofa(self) -> Sofa: ...
