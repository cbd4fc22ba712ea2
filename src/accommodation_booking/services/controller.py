"""Session controller that owns the application state.

Every user action goes through the controller. It checks the caller's role,
performs the change on the registry or ledger, reports the outcome to the
notification sink and returns either a fresh snapshot or a failure reason.
"""

import asyncio
import logging
from dataclasses import dataclass, field

from accommodation_booking.domain.errors import BookingAppError, ValidationError
from accommodation_booking.domain.models import (
    AppState,
    Booking,
    CheckedInRecord,
    NewProperty,
    Property,
    Role,
    SessionUser,
)
from accommodation_booking.services.bookings import BookingLedger
from accommodation_booking.services.fees import FeePolicy
from accommodation_booking.services.notifications import (
    Notification,
    NotificationSink,
)
from accommodation_booking.services.properties import PropertyRegistry
from accommodation_booking.services.sessions import SessionContext

_logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 5


@dataclass(frozen=True)
class AppSnapshot:
    """Read-only view of the session state after an operation."""

    user: SessionUser | None
    selected_role: Role | None
    show_welcome: bool
    loading: bool
    properties: list[Property]
    bookings: list[Booking]
    checked_in: list[CheckedInRecord]
    reservation_fee_hint: int
    check_in_fee: int | None
    ratings: dict[int, int]


@dataclass(frozen=True)
class FailureReason:
    """Why an operation was rejected."""

    kind: str
    message: str
    details: dict[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a controller operation."""

    snapshot: AppSnapshot | None = None
    failure: FailureReason | None = None
    value: object | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


@dataclass
class SessionController:
    """Single owner of the session state and entry point for every action.

    Registry and ledger mutations run under ``_lock``. The mutations themselves
    never await, so with one event loop the lock is uncontended; it marks the
    transaction boundary a multi-session deployment needs around ``reserve``,
    ``approve``, ``deny``, ``check_in`` and ``add_property``.
    """

    state: AppState
    sessions: SessionContext
    properties: PropertyRegistry
    ledger: BookingLedger
    fee_policy: FeePolicy
    notifier: NotificationSink
    reservation_delay_seconds: float = 1.0
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False, repr=False)
    _reservations_in_flight: int = field(default=0, init=False, repr=False)

    async def select_role(self, role: Role) -> OperationResult:
        """Handle the role choice on the welcome screen."""
        self.sessions.select_role(role)
        return self._success()

    async def login(
        self, username: str, password: str, role: Role | None
    ) -> OperationResult:
        try:
            user = self.sessions.login(username, password, role)
        except BookingAppError as exc:
            return await self._failure("login", exc)
        return self._success(user)

    async def logout(self) -> OperationResult:
        self.sessions.logout()
        return self._success()

    async def add_property(self, attributes: NewProperty) -> OperationResult:
        """List a new property on behalf of the owner."""
        try:
            self.sessions.require_role(Role.OWNER)
            async with self._lock:
                listing = self.properties.add_property(attributes)
        except BookingAppError as exc:
            return await self._failure("add_property", exc)
        await self._emit(
            Notification(
                event="add_property",
                success=True,
                message="Property added successfully!",
                payload={"property_id": listing.id},
            )
        )
        return self._success(listing)

    async def reserve(self, property_id: int) -> OperationResult:
        """Reserve a room; the confirmation follows a short cosmetic delay."""
        try:
            self.sessions.require_role(Role.STUDENT)
            async with self._lock:
                booking = self.ledger.reserve(property_id)
        except BookingAppError as exc:
            return await self._failure("reserve", exc)

        self._reservations_in_flight += 1
        self.state.loading = True
        try:
            await asyncio.sleep(self.reservation_delay_seconds)
            hint = self.fee_policy.next_reservation_fee_hint(
                self.state.reservation_fee_hint
            )
            self.state.reservation_fee_hint = hint
        finally:
            self._reservations_in_flight -= 1
            self.state.loading = self._reservations_in_flight > 0

        await self._emit(
            Notification(
                event="reserve",
                success=True,
                message="Room reserved! Please wait for owner approval.",
                payload={
                    "booking_id": booking.id,
                    "property_id": booking.property_id,
                    "reservation_fee_hint": self.state.reservation_fee_hint,
                },
            )
        )
        return self._success(booking)

    async def reserve_at(self, index: int) -> OperationResult:
        """Reserve the property shown at ``index`` in the listing."""
        try:
            self.sessions.require_role(Role.STUDENT)
            listing = self.properties.property_at(index)
        except BookingAppError as exc:
            return await self._failure("reserve", exc)
        return await self.reserve(listing.id)

    async def approve(self, booking_id: int) -> OperationResult:
        try:
            self.sessions.require_role(Role.OWNER)
            async with self._lock:
                booking = self.ledger.approve(booking_id)
        except BookingAppError as exc:
            return await self._failure("approve", exc)
        await self._emit(
            Notification(
                event="approve",
                success=True,
                message="Booking approved!",
                payload={"booking_id": booking.id},
            )
        )
        return self._success(booking)

    async def deny(self, booking_id: int) -> OperationResult:
        """Deny a booking; denying an unknown id changes nothing."""
        try:
            self.sessions.require_role(Role.OWNER)
            async with self._lock:
                removed = self.ledger.deny(booking_id)
        except BookingAppError as exc:
            return await self._failure("deny", exc)
        await self._emit(
            Notification(
                event="deny",
                success=True,
                message="Booking denied!",
                payload={"booking_id": booking_id, "removed": removed is not None},
            )
        )
        return self._success(removed)

    async def check_in(self, booking_id: int) -> OperationResult:
        try:
            self.sessions.require_role(Role.STUDENT)
            async with self._lock:
                record = self.ledger.check_in(booking_id)
        except BookingAppError as exc:
            return await self._failure("check_in", exc)
        self.state.check_in_fee = record.fee
        await self._emit(
            Notification(
                event="check_in",
                success=True,
                message=f"Checked in successfully! Your agent fee is ${record.fee}",
                payload={
                    "booking_id": record.id,
                    "property_id": record.property_id,
                    "fee": record.fee,
                },
            )
        )
        return self._success(record)

    async def rate_property(self, property_id: int, stars: int) -> OperationResult:
        """Store a student's 1-5 star rating, replacing any earlier one."""
        try:
            self.sessions.require_role(Role.STUDENT)
            if not MIN_RATING <= stars <= MAX_RATING:
                raise ValidationError(
                    f"Rating must be between {MIN_RATING} and {MAX_RATING} stars.",
                    details={"stars": stars},
                )
            self.properties.get_property(property_id)
        except BookingAppError as exc:
            return await self._failure("rate_property", exc)
        self.state.ratings[property_id] = stars
        return self._success(stars)

    def snapshot(self) -> AppSnapshot:
        """Return the current state."""
        return AppSnapshot(
            user=self.state.user,
            selected_role=self.state.selected_role,
            show_welcome=self.state.show_welcome,
            loading=self.state.loading,
            properties=self.properties.list_properties(),
            bookings=self.ledger.list_bookings(),
            checked_in=self.ledger.checked_in_records(),
            reservation_fee_hint=self.state.reservation_fee_hint,
            check_in_fee=self.state.check_in_fee,
            ratings=dict(self.state.ratings),
        )

    def _success(self, value: object | None = None) -> OperationResult:
        return OperationResult(snapshot=self.snapshot(), value=value)

    async def _failure(self, event: str, exc: BookingAppError) -> OperationResult:
        _logger.info("%s rejected: kind=%s message=%s", event, exc.kind, exc.message)
        await self._emit(
            Notification(
                event=event,
                success=False,
                message=exc.message,
                payload={"kind": exc.kind, **exc.details},
            )
        )
        return OperationResult(
            failure=FailureReason(
                kind=exc.kind, message=exc.message, details=dict(exc.details)
            )
        )

    async def _emit(self, notification: Notification) -> None:
        try:
            await self.notifier.notify(notification)
        except Exception:
            _logger.exception(
                "Failed to deliver notification", extra={"event": notification.event}
            )
