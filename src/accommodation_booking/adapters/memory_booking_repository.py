"""In-memory booking repository."""

from accommodation_booking.domain.models import Booking, CheckedInRecord
from accommodation_booking.services.bookings import BookingRepository


class InMemoryBookingRepository(BookingRepository):
    """Booking storage that lives for the lifetime of the process."""

    def __init__(self) -> None:
        self._bookings: dict[int, Booking] = {}
        self._checked_in: list[CheckedInRecord] = []

    def list_all(self) -> list[Booking]:
        return list(self._bookings.values())

    def get(self, booking_id: int) -> Booking | None:
        return self._bookings.get(booking_id)

    def add(self, booking: Booking) -> None:
        if booking.id in self._bookings:
            raise RuntimeError(f"Booking {booking.id} already exists")
        self._bookings[booking.id] = booking

    def update(self, booking: Booking) -> None:
        if booking.id not in self._bookings:
            raise RuntimeError(f"Booking {booking.id} does not exist")
        self._bookings[booking.id] = booking

    def remove(self, booking_id: int) -> Booking | None:
        return self._bookings.pop(booking_id, None)

    def list_checked_in(self) -> list[CheckedInRecord]:
        return list(self._checked_in)

    def add_checked_in(self, record: CheckedInRecord) -> None:
        self._checked_in.append(record)
