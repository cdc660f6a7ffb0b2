"""House: the product assembled by the Builder example.

Why a builder for five fields:
- A constructor with many positional flags is easy to call wrong
  (`House(4, 2, 2, False, True)`). The builder names every step and refuses
  to build until every part is set.
- The product stays an ordinary mutable model once built.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class House(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    window: int = Field(..., ge=0, description="Number of windows.")
    door: int = Field(..., ge=0, description="Number of doors.")
    room: int = Field(..., ge=0, description="Number of rooms.")
    has_garden: bool = Field(..., description="Whether the house has a garden.")
    has_swimming_pool: bool = Field(..., description="Whether the house has a pool.")

    @classmethod
    def build(cls, **parts: object) -> House:
        """One-shot helper: feed every part through a `HouseBuilder`."""

        # Local import: the builder lives in services and depends on this model.
        from core.services.house_builder import HouseBuilder  # noqa: PLC0415

        builder = HouseBuilder()
        for name, value in parts.items():
            builder.set(name, value)
        return builder.build()
