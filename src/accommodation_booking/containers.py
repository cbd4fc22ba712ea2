"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from accommodation_booking.adapters.memory_booking_repository import (
    InMemoryBookingRepository,
)
from accommodation_booking.adapters.memory_property_repository import (
    InMemoryPropertyRepository,
)
from accommodation_booking.adapters.webhook_notifier import HttpxWebhookNotifier
from accommodation_booking.config import Settings
from accommodation_booking.domain.models import AppState
from accommodation_booking.services.bookings import BookingLedger
from accommodation_booking.services.controller import SessionController
from accommodation_booking.services.fees import FeePolicy
from accommodation_booking.services.notifications import (
    FanOutNotificationSink,
    InMemoryNotificationSink,
    NotificationSink,
)
from accommodation_booking.services.properties import PropertyRegistry
from accommodation_booking.services.sessions import SessionContext


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    notifications: InMemoryNotificationSink
    controller: SessionController
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    state = AppState()
    fee_policy = FeePolicy(
        first_check_in_fee=resolved_settings.first_check_in_fee,
        subsequent_check_in_fee=resolved_settings.subsequent_check_in_fee,
        first_reservation_fee_hint=resolved_settings.first_reservation_fee_hint,
        subsequent_reservation_fee_hint=(
            resolved_settings.subsequent_reservation_fee_hint
        ),
    )
    property_registry = PropertyRegistry(
        InMemoryPropertyRepository(), owner_id=resolved_settings.owner_id
    )
    ledger = BookingLedger(
        repository=InMemoryBookingRepository(),
        properties=property_registry,
        fee_policy=fee_policy,
        deny_pending_only=resolved_settings.deny_pending_only,
    )
    notifications = InMemoryNotificationSink(
        limit=resolved_settings.notification_history_limit
    )
    notifier: NotificationSink = notifications
    webhook_notifier: HttpxWebhookNotifier | None = None
    if resolved_settings.notification_webhook_url:
        webhook_notifier = HttpxWebhookNotifier.create(
            resolved_settings.notification_webhook_url
        )
        notifier = FanOutNotificationSink([notifications, webhook_notifier])
    controller = SessionController(
        state=state,
        sessions=SessionContext(state),
        properties=property_registry,
        ledger=ledger,
        fee_policy=fee_policy,
        notifier=notifier,
        reservation_delay_seconds=resolved_settings.reservation_delay_seconds,
    )

    async def close_resources() -> None:
        if webhook_notifier is not None:
            await webhook_notifier.close()

    return AppContainer(
        settings=resolved_settings,
        notifications=notifications,
        controller=controller,
        close_resources=close_resources,
    )
