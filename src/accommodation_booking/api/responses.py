"""Response helpers shared by the API routers."""

from fastapi import HTTPException, status

from accommodation_booking.domain.models import (
    Booking,
    CheckedInRecord,
    Property,
    SessionUser,
)
from accommodation_booking.services.controller import AppSnapshot, OperationResult
from accommodation_booking.services.notifications import Notification

_STATUS_BY_KIND = {
    "validation": 422,
    "not_found": status.HTTP_404_NOT_FOUND,
    "precondition": status.HTTP_409_CONFLICT,
    "authorization": status.HTTP_403_FORBIDDEN,
}


def raise_for_failure(result: OperationResult) -> None:
    """Translate a failed operation into an HTTP error."""
    if result.failure is None:
        return
    raise HTTPException(
        status_code=_STATUS_BY_KIND.get(
            result.failure.kind, status.HTTP_400_BAD_REQUEST
        ),
        detail={
            "kind": result.failure.kind,
            "message": result.failure.message,
            "details": result.failure.details,
        },
    )


def user_dict(user: SessionUser | None) -> dict[str, object] | None:
    if user is None:
        return None
    return {"username": user.username, "role": user.role.value}


def property_dict(
    listing: Property, rating: int | None = None
) -> dict[str, object]:
    return {
        "id": listing.id,
        "name": listing.name,
        "price": listing.price,
        "amenities": listing.amenities,
        "capacity": listing.capacity,
        "owner_id": listing.owner_id,
        "booking_ids": list(listing.booking_ids),
        "photo": {
            "content_type": listing.photo.content_type,
            "filename": listing.photo.filename,
            "size": len(listing.photo.content),
        },
        "rating": rating,
    }


def booking_dict(booking: Booking) -> dict[str, object]:
    return {
        "id": booking.id,
        "property_id": booking.property_id,
        "approved": booking.approved,
        "checked_in": booking.checked_in,
        "status": booking.status.value,
    }


def checked_in_dict(record: CheckedInRecord) -> dict[str, object]:
    return {"id": record.id, "property_id": record.property_id, "fee": record.fee}


def notification_dict(notification: Notification) -> dict[str, object]:
    return notification.as_dict()


def snapshot_dict(snapshot: AppSnapshot) -> dict[str, object]:
    """Serialize the full session state."""
    return {
        "user": user_dict(snapshot.user),
        "selected_role": snapshot.selected_role.value
        if snapshot.selected_role
        else None,
        "show_welcome": snapshot.show_welcome,
        "loading": snapshot.loading,
        "properties": [
            property_dict(listing, snapshot.ratings.get(listing.id))
            for listing in snapshot.properties
        ],
        "bookings": [booking_dict(booking) for booking in snapshot.bookings],
        "checked_in": [checked_in_dict(record) for record in snapshot.checked_in],
        "reservation_fee_hint": snapshot.reservation_fee_hint,
        "check_in_fee": snapshot.check_in_fee,
    }
