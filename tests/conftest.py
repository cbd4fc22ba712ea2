"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from accommodation_booking.adapters.memory_booking_repository import (
    InMemoryBookingRepository,
)
from accommodation_booking.adapters.memory_property_repository import (
    InMemoryPropertyRepository,
)
from accommodation_booking.config import Settings
from accommodation_booking.containers import AppContainer, build_container
from accommodation_booking.domain.models import (
    AppState,
    NewProperty,
    PhotoResource,
)
from accommodation_booking.services.bookings import BookingLedger
from accommodation_booking.services.controller import SessionController
from accommodation_booking.services.fees import FeePolicy
from accommodation_booking.services.notifications import (
    Notification,
    NotificationSink,
)
from accommodation_booking.services.properties import PropertyRegistry
from accommodation_booking.services.sessions import SessionContext


@dataclass
class RecordingNotificationSink(NotificationSink):
    """Notification sink that keeps every notification it receives."""

    notifications: list[Notification] = field(default_factory=list)

    async def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)

    def events(self) -> list[tuple[str, bool]]:
        return [(item.event, item.success) for item in self.notifications]


class FailingNotificationSink(NotificationSink):
    """Notification sink whose delivery always fails."""

    async def notify(self, notification: Notification) -> None:
        raise RuntimeError("sink offline")


def make_photo(content: bytes = b"fake-image-bytes") -> PhotoResource:
    return PhotoResource(content=content, content_type="image/jpeg", filename="a.jpg")


def make_listing(name: str = "Flat A", price: float = 100, **kwargs) -> NewProperty:
    return NewProperty(name=name, price=price, photo=make_photo(), **kwargs)


def make_registry() -> PropertyRegistry:
    return PropertyRegistry(InMemoryPropertyRepository())


def make_ledger(
    registry: PropertyRegistry | None = None, deny_pending_only: bool = False
) -> BookingLedger:
    return BookingLedger(
        repository=InMemoryBookingRepository(),
        properties=registry or make_registry(),
        deny_pending_only=deny_pending_only,
    )


def make_controller(
    notifier: NotificationSink | None = None, deny_pending_only: bool = False
) -> SessionController:
    state = AppState()
    registry = make_registry()
    fee_policy = FeePolicy()
    return SessionController(
        state=state,
        sessions=SessionContext(state),
        properties=registry,
        ledger=BookingLedger(
            repository=InMemoryBookingRepository(),
            properties=registry,
            fee_policy=fee_policy,
            deny_pending_only=deny_pending_only,
        ),
        fee_policy=fee_policy,
        notifier=notifier or RecordingNotificationSink(),
        reservation_delay_seconds=0,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", reservation_delay_seconds=0)


@pytest.fixture
def sink() -> RecordingNotificationSink:
    return RecordingNotificationSink()


@pytest.fixture
def controller(sink: RecordingNotificationSink) -> SessionController:
    return make_controller(notifier=sink)


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)
