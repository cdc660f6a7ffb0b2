"""Notification contract (Adapter target).

Client code only knows `Notification.send`. Services with a different shape
(e.g. a chat API that needs a login and a chat id) are wrapped by an adapter
that implements this contract.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.notification import SentMessage


@runtime_checkable
class Notification(Protocol):
    def send(self, title: str, message: str) -> SentMessage:
        """Deliver a notification and return what was actually sent."""

        ...
