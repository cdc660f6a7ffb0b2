"""Prototype domain models (Pydantic v2).

Why Prototype:
- Copying an object from the outside means knowing its concrete class and
  walking every field. The pattern hands that job to the object itself: each
  type declares `clone()` and builds its own duplicate.
- Callers can duplicate any `Prototype` without importing its class.

Why Pydantic here:
- Field writes are validated (`validate_assignment`), so a copy can be
  mutated freely without ever holding ill-typed values.
- All fields are scalars, so building a new instance from the current
  values already gives a fully independent object.

Trade-off:
- Cloning objects with circular references needs extra care. None of these
  shapes have references, so a field-for-field rebuild is enough.
"""

from __future__ import annotations

from typing import ClassVar

from loguru import logger
from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class CopyUnsupported(BaseModel):
    """Result of asking a non-copyable object for a clone.

    It is falsy, so `if copy := shape.clone():` reads naturally.
    """

    model_config = ConfigDict(frozen=True)

    type_name: str = Field(
        ...,
        min_length=1,
        description="Class name of the object that refused to be copied.",
    )
    reason: str = Field(
        default="copying is not supported for this type",
        description="Human readable explanation of the refusal.",
    )

    def __bool__(self) -> bool:
        return False


class Shape(BaseModel):
    """A positioned, colored shape: the base prototype.

    `copy_supported` gates `clone()`. Types that must not be duplicated turn
    it off and get a `CopyUnsupported` back instead of an exception.
    """

    model_config = ConfigDict(validate_assignment=True)

    copy_supported: ClassVar[bool] = True

    x: int = Field(default=0, description="Horizontal coordinate.")
    y: int = Field(default=0, description="Vertical coordinate.")
    color: str = Field(default="", description="Category tag, e.g. 'red'.")

    def clone(self) -> Shape | CopyUnsupported:
        if not self.copy_supported:
            return self._refuse_copy()
        return Shape(x=self.x, y=self.y, color=self.color)

    def _refuse_copy(self) -> CopyUnsupported:
        name = type(self).__name__
        logger.warning("Clone refused: {} does not support copying", name)
        return CopyUnsupported(type_name=name)


class Rectangle(Shape):
    width: int = Field(default=0, ge=0, description="Horizontal extent.")
    height: int = Field(default=0, ge=0, description="Vertical extent.")

    def clone(self) -> Rectangle | CopyUnsupported:
        if not self.copy_supported:
            return self._refuse_copy()
        return Rectangle(
            x=self.x,
            y=self.y,
            color=self.color,
            width=self.width,
            height=self.height,
        )


class Circle(Shape):
    radius: int = Field(default=0, ge=0, description="Distance from center to edge.")

    def clone(self) -> Circle | CopyUnsupported:
        if not self.copy_supported:
            return self._refuse_copy()
        return Circle(x=self.x, y=self.y, color=self.color, radius=self.radius)


class SealedShape(Shape):
    """A shape whose type forbids duplication."""

    copy_supported: ClassVar[bool] = False
