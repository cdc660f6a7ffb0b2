"""Notification: email (already speaks the client's interface)."""

from __future__ import annotations

from loguru import logger

from core.domain.notification import SentMessage
from core.interfaces.notification import Notification


class EmailNotification(Notification):
    def __init__(self, admin_email: str) -> None:
        self._admin_email = admin_email

    def send(self, title: str, message: str) -> SentMessage:
        logger.debug("Email to {!r} titled {!r}", self._admin_email, title)
        return SentMessage(
            channel="email",
            recipient=self._admin_email,
            title=title,
            body=message,
        )
