"""Step-by-step construction of a `House`."""

from __future__ import annotations

from typing import Any

from core.domain.house import House
from core.errors import IncompleteBuildError

_PARTS: tuple[str, ...] = tuple(House.model_fields)


class HouseBuilder:
    """Fluent builder: every setter returns the builder itself.

    ```
    house = HouseBuilder().window(4).door(2).room(2).has_garden(False).has_swimming_pool(False).build()
    ```

    Nothing is validated until `build()`, which names every part still
    missing instead of failing on the first one.
    """

    def __init__(self) -> None:
        self._parts: dict[str, Any] = {}

    def set(self, name: str, value: Any) -> HouseBuilder:
        if name not in _PARTS:
            raise AttributeError(f"House has no part named {name!r}")
        self._parts[name] = value
        return self

    def window(self, count: int) -> HouseBuilder:
        return self.set("window", count)

    def door(self, count: int) -> HouseBuilder:
        return self.set("door", count)

    def room(self, count: int) -> HouseBuilder:
        return self.set("room", count)

    def has_garden(self, value: bool) -> HouseBuilder:
        return self.set("has_garden", value)

    def has_swimming_pool(self, value: bool) -> HouseBuilder:
        return self.set("has_swimming_pool", value)

    def missing(self) -> list[str]:
        return [name for name in _PARTS if name not in self._parts]

    def build(self) -> House:
        missing = self.missing()
        if missing:
            raise IncompleteBuildError(missing)
        return House(**self._parts)
