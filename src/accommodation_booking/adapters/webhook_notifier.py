"""Webhook notification adapter."""

from dataclasses import dataclass

import httpx

from accommodation_booking.services.notifications import Notification


@dataclass
class HttpxWebhookNotifier:
    """Posts notifications to a UI collaborator over HTTP."""

    url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, url: str) -> "HttpxWebhookNotifier":
        """Create a notifier with a managed httpx session."""
        return cls(url=url, http_client=httpx.AsyncClient())

    async def notify(self, notification: Notification) -> None:
        """Send the notification as a JSON body."""
        response = await self.http_client.post(
            self.url, json=notification.as_dict(), timeout=10
        )
        response.raise_for_status()

    async def close(self) -> None:
        """Close the underlying HTTP client session."""
        await self.http_client.aclose()
