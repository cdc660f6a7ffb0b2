"""Notification channels (Adapter example).

Each module implements `core.interfaces.notification.Notification`, either
directly (email) or by adapting a foreign API (Slack).
"""

from adapters.notifications.email import EmailNotification
from adapters.notifications.slack import SlackApi, SlackNotification, SlackPost

__all__ = [
    "EmailNotification",
    "SlackApi",
    "SlackNotification",
    "SlackPost",
]
