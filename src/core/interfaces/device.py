"""Bridge contracts: devices (implementation side) and remotes (abstraction side).

Why two hierarchies:
- Remotes and devices vary independently. Adding a new device never touches
  the remotes and vice versa; the reference a remote holds to its device is
  the "bridge" between both.
- A remote only talks to its device through the methods declared on
  `Device`, so any device works with any remote.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Device(Protocol):
    """Low-level operations every device supports.

    Rules:
    - `set_volume` clamps into [0, 100]; it never rejects a value.
    - `set_channel` stores the value unmodified, negatives included.
    """

    def is_enabled(self) -> bool: ...

    def enable(self) -> None: ...

    def disable(self) -> None: ...

    def get_volume(self) -> int: ...

    def set_volume(self, percent: int) -> None: ...

    def get_channel(self) -> int: ...

    def set_channel(self, channel: int) -> None: ...

    def describe(self) -> str:
        """Human readable status block."""

        ...


@runtime_checkable
class Remote(Protocol):
    """High-level controls built on top of a `Device`."""

    def power(self) -> None: ...

    def volume_down(self) -> None: ...

    def volume_up(self) -> None: ...

    def channel_down(self) -> None: ...

    def channel_up(self) -> None: ...
