"""Notification sink abstractions."""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Protocol

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    """Outcome message for the user interface."""

    event: str
    success: bool
    message: str
    payload: dict[str, object] = field(default_factory=dict)

    def as_dict(self) -> dict[str, object]:
        return {
            "event": self.event,
            "success": self.success,
            "message": self.message,
            "payload": dict(self.payload),
        }


class NotificationSink(Protocol):
    """Receiver of human-readable outcome messages."""

    async def notify(self, notification: Notification) -> None:
        """Deliver a notification."""


class InMemoryNotificationSink(NotificationSink):
    """Keeps the most recent notifications for the UI to read back."""

    def __init__(self, limit: int = 50) -> None:
        self._items: deque[Notification] = deque(maxlen=limit)

    async def notify(self, notification: Notification) -> None:
        """Store a notification, dropping the oldest beyond the limit."""
        self._items.append(notification)

    def recent(self) -> list[Notification]:
        """Return stored notifications, oldest first."""
        return list(self._items)

    def latest(self) -> Notification | None:
        return self._items[-1] if self._items else None


@dataclass
class FanOutNotificationSink(NotificationSink):
    """Delivers each notification to several sinks."""

    sinks: list[NotificationSink]

    async def notify(self, notification: Notification) -> None:
        """Deliver to every sink; one failing sink does not stop the others."""
        for sink in self.sinks:
            try:
                await sink.notify(notification)
            except Exception:
                _logger.exception(
                    "Failed to deliver notification",
                    extra={"event": notification.event},
                )
