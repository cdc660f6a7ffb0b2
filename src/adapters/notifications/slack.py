"""Notification: Slack, through an adapter.

`SlackApi` stands in for a third-party client whose shape we do not control:
it wants a login first and posts plain text into a chat id. It knows nothing
about titles or the `Notification` contract.

`SlackNotification` is the adapter: it wraps the API, converts the
title/message pair into Slack's format and performs the login dance, so the
same client code that sends emails can post to Slack unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from loguru import logger

from core.domain.notification import SentMessage
from core.interfaces.notification import Notification


@dataclass
class SlackPost:
    chat_id: str
    text: str


@dataclass
class SlackApi:
    """Incompatible service: records logins and posts instead of calling out."""

    login: str
    api_key: str
    logged_in: bool = False
    posted: list[SlackPost] = field(default_factory=list)

    def log_in(self) -> None:
        logger.debug("Slack: logged in as {!r}", self.login)
        self.logged_in = True

    def send_message(self, chat_id: str, message: str) -> SlackPost:
        post = SlackPost(chat_id=chat_id, text=message)
        self.posted.append(post)
        logger.debug("Slack: posted into {!r}", chat_id)
        return post


def format_slack_message(title: str, message: str) -> str:
    return f"#{title} # {message}"


class SlackNotification(Notification):
    def __init__(self, slack: SlackApi, chat_id: str) -> None:
        self._slack = slack
        self._chat_id = chat_id

    def send(self, title: str, message: str) -> SentMessage:
        text = format_slack_message(title, message)
        self._slack.log_in()
        post = self._slack.send_message(self._chat_id, text)
        return SentMessage(
            channel="slack",
            recipient=post.chat_id,
            title=title,
            body=post.text,
        )
