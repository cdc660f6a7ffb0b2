"""Prototype contract.

Why Protocol:
- Any object with a `clone()` method is a prototype; no base class needed.
- Client code can duplicate objects without importing their concrete type.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Prototype(Protocol):
    def clone(self) -> object:
        """Return an independent duplicate, or `CopyUnsupported` if refused."""

        ...
