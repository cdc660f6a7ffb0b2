"""Abstract factory: matching furniture families."""

from __future__ import annotations

from dataclasses import dataclass

from core.interfaces.furniture import Chair, CoffeeTable, FurnitureFactory, Sofa


@dataclass(frozen=True)
class StyledChair(Chair):
    style: str

    def has_legs(self) -> bool:
        return True

    def sit_on(self) -> str:
        return f"Sitting on a {self.style} chair"


@dataclass(frozen=True)
class StyledCoffeeTable(CoffeeTable):
    style: str
    color: str

    def has_legs(self) -> bool:
        return True

    def change_color(self) -> str:
        return f"{self.style} coffee table painted {self.color}"


@dataclass(frozen=True)
class StyledSofa(Sofa):
    style: str
    seats: int

    def size(self) -> int:
        return self.seats


class VictorianFurnitureFactory(FurnitureFactory):
    style = "victorian"

    def create_chair(self) -> Chair:
        return StyledChair(style=self.style)

    def create_coffee_table(self) -> CoffeeTable:
        return StyledCoffeeTable(style=self.style, color="mahogany")

    def create_sofa(self) -> Sofa:
        return StyledSofa(style=self.style, seats=3)


class ModernFurnitureFactory(FurnitureFactory):
    style = "modern"

    def create_chair(self) -> Chair:
        return StyledChair(style=self.style)

    def create_coffee_table(self) -> CoffeeTable:
        return StyledCoffeeTable(style=self.style, color="white")

    def create_sofa(self) -> Sofa:
        return StyledSofa(style=self.style, seats=2)
