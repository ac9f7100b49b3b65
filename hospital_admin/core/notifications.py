"""Notification sinks for controller feedback.

A controller never shows anything itself; it reports success and failure
to the sink it was constructed with:

- ``MessagesNotificationSink``: Django messages framework (HTML pages)
- ``CollectingNotificationSink``: keeps notifications in memory (API responses)
"""

from __future__ import annotations

from dataclasses import dataclass

from django.contrib import messages

SUCCESS = 'success'
ERROR = 'error'


@dataclass(frozen=True)
class Notification:
    level: str
    title: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {'level': self.level, 'title': self.title, 'message': self.message}


class NotificationSink:
    """Base sink; subclasses implement ``notify``."""

    def notify(self, notification: Notification) -> None:
        raise NotImplementedError

    def success(self, message: str) -> None:
        self.notify(Notification(SUCCESS, 'Success', message))

    def error(self, message: str) -> None:
        self.notify(Notification(ERROR, 'Error', message))


class CollectingNotificationSink(NotificationSink):
    def __init__(self):
        self.notifications: list[Notification] = []

    def notify(self, notification):
        self.notifications.append(notification)

    @property
    def errors(self) -> list[Notification]:
        return [n for n in self.notifications if n.level == ERROR]


class MessagesNotificationSink(NotificationSink):
    """Forwards notifications to ``django.contrib.messages`` for the request."""

    _levels = {
        SUCCESS: messages.SUCCESS,
        ERROR: messages.ERROR,
    }

    def __init__(self, request):
        self.request = request

    def notify(self, notification):
        messages.add_message(
            self.request,
            self._levels.get(notification.level, messages.INFO),
            notification.message,
        )
