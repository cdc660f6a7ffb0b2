"""Process-scoped shared instances (Singleton, without the global).

The classic Singleton hides one instance behind a class-level lazy cache.
Here the cache is an ordinary object: build one `ProcessScope` at startup
and pass it to whoever needs shared instances. Tests get a fresh scope each,
and nothing is reachable through module globals.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Hashable, TypeVar

from loguru import logger

from core.config import AppSettings

T = TypeVar("T")


@dataclass
class ProcessScope:
    settings: AppSettings
    _instances: dict[Hashable, Any] = field(default_factory=dict, init=False, repr=False)

    @classmethod
    def create(cls, settings: AppSettings | None = None) -> ProcessScope:
        return cls(settings=settings or AppSettings())

    def get_or_create(self, key: Hashable, factory: Callable[[], T]) -> T:
        """Return the instance stored under `key`, building it on first use.

        The first factory wins: later calls with a different factory get the
        instance that already exists.
        """

        if key not in self._instances:
            logger.debug("Scope: creating shared instance for {!r}", key)
            self._instances[key] = factory()
        return self._instances[key]

    def __contains__(self, key: object) -> bool:
        return key in self._instances

    def reset(self) -> None:
        self._instances.clear()
