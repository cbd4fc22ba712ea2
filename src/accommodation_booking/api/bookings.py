"""Property and booking endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from accommodation_booking.api.models import PropertyCreate, RatingRequest
from accommodation_booking.api.responses import (
    booking_dict,
    checked_in_dict,
    property_dict,
    raise_for_failure,
)

if TYPE_CHECKING:
    from accommodation_booking.containers import AppContainer

router = APIRouter(tags=["bookings"])


@router.get("/properties")
async def list_properties(request: Request) -> dict[str, object]:
    """Return all listed properties with the student's ratings."""
    container: AppContainer = request.app.state.container
    snapshot = container.controller.snapshot()
    return {
        "properties": [
            property_dict(listing, snapshot.ratings.get(listing.id))
            for listing in snapshot.properties
        ]
    }


@router.post("/properties", status_code=201)
async def add_property(payload: PropertyCreate, request: Request) -> dict[str, object]:
    """List a new property (owner only)."""
    container: AppContainer = request.app.state.container
    result = await container.controller.add_property(payload.to_domain())
    raise_for_failure(result)
    return {"property": property_dict(result.value)}


@router.post("/properties/{property_id}/reserve", status_code=201)
async def reserve(property_id: int, request: Request) -> dict[str, object]:
    """Reserve a room in a property (student only)."""
    container: AppContainer = request.app.state.container
    result = await container.controller.reserve(property_id)
    raise_for_failure(result)
    return {
        "booking": booking_dict(result.value),
        "reservation_fee_hint": result.snapshot.reservation_fee_hint,
    }


@router.post("/properties/{property_id}/rating")
async def rate_property(
    property_id: int, payload: RatingRequest, request: Request
) -> dict[str, object]:
    """Rate a property from 1 to 5 stars (student only)."""
    container: AppContainer = request.app.state.container
    result = await container.controller.rate_property(property_id, payload.stars)
    raise_for_failure(result)
    return {"property_id": property_id, "stars": payload.stars}


@router.get("/bookings/pending")
async def pending_bookings(request: Request) -> dict[str, object]:
    """Return bookings waiting for the owner's decision."""
    container: AppContainer = request.app.state.container
    bookings = container.controller.ledger.pending()
    return {"bookings": [booking_dict(booking) for booking in bookings]}


@router.get("/bookings/check-in")
async def bookings_awaiting_check_in(request: Request) -> dict[str, object]:
    """Return approved bookings the student can check in to."""
    container: AppContainer = request.app.state.container
    bookings = container.controller.ledger.awaiting_check_in()
    return {"bookings": [booking_dict(booking) for booking in bookings]}


@router.get("/bookings/checked-in")
async def checked_in_bookings(request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    records = container.controller.ledger.checked_in_records()
    return {"bookings": [checked_in_dict(record) for record in records]}


@router.post("/bookings/{booking_id}/approve")
async def approve(booking_id: int, request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    result = await container.controller.approve(booking_id)
    raise_for_failure(result)
    return {"booking": booking_dict(result.value)}


@router.post("/bookings/{booking_id}/deny")
async def deny(booking_id: int, request: Request) -> dict[str, object]:
    """Deny a booking; unknown ids are accepted and change nothing."""
    container: AppContainer = request.app.state.container
    result = await container.controller.deny(booking_id)
    raise_for_failure(result)
    return {"booking_id": booking_id, "removed": result.value is not None}


@router.post("/bookings/{booking_id}/check-in")
async def check_in(booking_id: int, request: Request) -> dict[str, object]:
    """Check in to an approved booking and report the agent fee."""
    container: AppContainer = request.app.state.container
    result = await container.controller.check_in(booking_id)
    raise_for_failure(result)
    return {"checked_in": checked_in_dict(result.value)}
