"""Domain models for properties, bookings and sessions."""

from dataclasses import dataclass, field
from enum import Enum


class Role(Enum):
    """Roles a session can act under."""

    STUDENT = "student"
    OWNER = "owner"


class BookingStatus(Enum):
    """Lifecycle states of a booking still held by the ledger."""

    PENDING = "pending"
    APPROVED = "approved"
    CHECKED_IN = "checked_in"


@dataclass(frozen=True)
class PhotoResource:
    """Opaque handle to an uploaded property photo."""

    content: bytes
    content_type: str = "image/jpeg"
    filename: str | None = None


@dataclass(frozen=True)
class NewProperty:
    """Form values supplied by the owner when listing a property."""

    name: str | None = None
    price: float | None = None
    amenities: str | None = None
    capacity: int | None = None
    photo: PhotoResource | None = None


@dataclass(frozen=True)
class Property:
    """A listed property."""

    id: int
    name: str
    price: float
    amenities: str
    capacity: int
    photo: PhotoResource
    owner_id: int
    booking_ids: tuple[int, ...] = ()


@dataclass(frozen=True)
class Booking:
    """A reservation request against a property."""

    id: int
    property_id: int
    approved: bool = False
    checked_in: bool = False

    @property
    def status(self) -> BookingStatus:
        if self.checked_in:
            return BookingStatus.CHECKED_IN
        if self.approved:
            return BookingStatus.APPROVED
        return BookingStatus.PENDING


@dataclass(frozen=True)
class CheckedInRecord:
    """Read-only projection of a completed check-in."""

    id: int
    property_id: int
    fee: int


@dataclass(frozen=True)
class SessionUser:
    """The logged-in user."""

    username: str
    role: Role


@dataclass
class AppState:
    """Mutable state of a single browser-style session."""

    user: SessionUser | None = None
    selected_role: Role | None = None
    show_welcome: bool = True
    loading: bool = False
    reservation_fee_hint: int = 0
    check_in_fee: int | None = None
    ratings: dict[int, int] = field(default_factory=dict)
