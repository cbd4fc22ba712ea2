"""Booking ledger and its lifecycle state machine.

A booking moves ``PENDING -> APPROVED -> CHECKED_IN``. Denial removes the
booking from the ledger instead of tagging it, and every successful check-in
appends a ``CheckedInRecord`` to an append-only log.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Protocol

from accommodation_booking.domain.errors import NotFoundError, PreconditionError
from accommodation_booking.domain.models import (
    Booking,
    BookingStatus,
    CheckedInRecord,
)
from accommodation_booking.services.fees import FeePolicy
from accommodation_booking.services.properties import PropertyRegistry

_logger = logging.getLogger(__name__)


class BookingRepository(Protocol):
    """Storage interface for bookings and the checked-in log."""

    def list_all(self) -> list[Booking]:
        """Return all bookings in creation order."""

    def get(self, booking_id: int) -> Booking | None:
        """Return a booking by id, if present."""

    def add(self, booking: Booking) -> None:
        """Append a new booking."""

    def update(self, booking: Booking) -> None:
        """Replace the stored booking with the same id."""

    def remove(self, booking_id: int) -> Booking | None:
        """Remove a booking and return it, if present."""

    def list_checked_in(self) -> list[CheckedInRecord]:
        """Return checked-in records in the order they were made."""

    def add_checked_in(self, record: CheckedInRecord) -> None:
        """Append a checked-in record."""


@dataclass
class BookingLedger:
    """Authoritative collection of bookings."""

    repository: BookingRepository
    properties: PropertyRegistry
    fee_policy: FeePolicy = field(default_factory=FeePolicy)
    deny_pending_only: bool = False
    _last_issued_id: int = field(default=0, init=False, repr=False)

    def reserve(self, property_id: int) -> Booking:
        """Create a pending booking for an existing property."""
        self.properties.get_property(property_id)
        booking = Booking(id=self._next_id(), property_id=property_id)
        self.repository.add(booking)
        self._last_issued_id = booking.id
        self.properties.attach_booking(property_id, booking.id)
        _logger.info(
            "Booking reserved: id=%s property_id=%s", booking.id, property_id
        )
        return booking

    def approve(self, booking_id: int) -> Booking:
        """Mark a booking as approved."""
        booking = self._require(booking_id)
        if booking.approved:
            return booking
        approved = replace(booking, approved=True)
        self.repository.update(approved)
        _logger.info("Booking approved: id=%s", booking_id)
        return approved

    def deny(self, booking_id: int) -> Booking | None:
        """Remove a booking if present.

        Returns the removed booking, or None when nothing had that id.
        """
        booking = self.repository.get(booking_id)
        if booking is None:
            return None
        if self.deny_pending_only and booking.status is not BookingStatus.PENDING:
            raise PreconditionError(
                f"Booking {booking_id} is no longer pending.",
                details={"booking_id": booking_id, "status": booking.status.value},
            )
        removed = self.repository.remove(booking_id)
        self.properties.detach_booking(booking.property_id, booking_id)
        _logger.info("Booking denied: id=%s", booking_id)
        return removed

    def check_in(self, booking_id: int) -> CheckedInRecord:
        """Check a guest in on an approved booking and charge the agent fee."""
        booking = self._require(booking_id)
        if not booking.approved:
            raise PreconditionError(
                "Booking not approved or does not exist.",
                details={"booking_id": booking_id},
            )
        if booking.checked_in:
            raise PreconditionError(
                f"Booking {booking_id} is already checked in.",
                details={"booking_id": booking_id},
            )
        prior = len(self.repository.list_checked_in())
        record = CheckedInRecord(
            id=booking.id,
            property_id=booking.property_id,
            fee=self.fee_policy.compute_check_in_fee(prior),
        )
        self.repository.update(replace(booking, checked_in=True))
        self.repository.add_checked_in(record)
        _logger.info("Booking checked in: id=%s fee=%s", booking_id, record.fee)
        return record

    def list_bookings(self) -> list[Booking]:
        return self.repository.list_all()

    def pending(self) -> list[Booking]:
        """Return bookings waiting for the owner's decision."""
        return [
            booking for booking in self.repository.list_all() if not booking.approved
        ]

    def awaiting_check_in(self) -> list[Booking]:
        """Return approved bookings the student has not checked in yet."""
        return [
            booking
            for booking in self.repository.list_all()
            if booking.status is BookingStatus.APPROVED
        ]

    def checked_in_records(self) -> list[CheckedInRecord]:
        return self.repository.list_checked_in()

    def _require(self, booking_id: int) -> Booking:
        booking = self.repository.get(booking_id)
        if booking is None:
            raise NotFoundError(
                "Booking not approved or does not exist.",
                details={"booking_id": booking_id},
            )
        return booking

    def _next_id(self) -> int:
        bookings = self.repository.list_all()
        highest = max((booking.id for booking in bookings), default=0)
        return max(len(bookings), highest, self._last_issued_id) + 1
