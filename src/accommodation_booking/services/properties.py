"""Property registry."""

import logging
import math
from dataclasses import dataclass, replace
from typing import Protocol

from accommodation_booking.domain.errors import NotFoundError, ValidationError
from accommodation_booking.domain.models import NewProperty, Property

_logger = logging.getLogger(__name__)

DEFAULT_AMENITIES = "N/A"
DEFAULT_CAPACITY = 1


class PropertyRepository(Protocol):
    """Storage interface for listed properties."""

    def count(self) -> int:
        """Return how many properties exist."""

    def add(self, listing: Property) -> None:
        """Store a new property."""

    def get(self, property_id: int) -> Property | None:
        """Return a property by id, if present."""

    def list_all(self) -> list[Property]:
        """Return all properties in creation order."""

    def update(self, listing: Property) -> None:
        """Replace the stored property with the same id."""


@dataclass
class PropertyRegistry:
    """Catalog of properties listed by the owner."""

    repository: PropertyRepository
    owner_id: int = 1

    def add_property(self, attributes: NewProperty) -> Property:
        """Validate form values and list a new property."""
        name = (attributes.name or "").strip()
        has_photo = attributes.photo is not None and bool(attributes.photo.content)
        missing = [
            label
            for label, present in (
                ("name", bool(name)),
                ("price", bool(attributes.price)),
                ("photo", has_photo),
            )
            if not present
        ]
        if missing:
            raise ValidationError(
                "Property name, price, and photo are required.",
                details={"missing": missing},
            )
        if not attributes.photo.content_type.startswith("image/"):
            raise ValidationError(
                "Photo must be an image.",
                details={"content_type": attributes.photo.content_type},
            )
        price = attributes.price
        if price is None or not (math.isfinite(price) and price > 0):
            raise ValidationError(
                "Price must be a positive number.",
                details={"price": str(price)},
            )
        capacity = attributes.capacity or DEFAULT_CAPACITY
        if capacity < 1:
            raise ValidationError(
                "Capacity must be a positive integer.",
                details={"capacity": attributes.capacity},
            )
        amenities = (attributes.amenities or "").strip() or DEFAULT_AMENITIES

        listing = Property(
            id=self.repository.count() + 1,
            name=name,
            price=price,
            amenities=amenities,
            capacity=capacity,
            photo=attributes.photo,
            owner_id=self.owner_id,
        )
        self.repository.add(listing)
        _logger.info("Property listed: id=%s name=%s", listing.id, listing.name)
        return listing

    def list_properties(self) -> list[Property]:
        """Return all properties in creation order."""
        return self.repository.list_all()

    def get_property(self, property_id: int) -> Property:
        """Return a property or raise NotFoundError."""
        listing = self.repository.get(property_id)
        if listing is None:
            raise NotFoundError(
                f"Property {property_id} does not exist.",
                details={"property_id": property_id},
            )
        return listing

    def property_at(self, index: int) -> Property:
        """Return the property at a position in the listing."""
        listings = self.repository.list_all()
        if not 0 <= index < len(listings):
            raise NotFoundError(
                f"No property at position {index}.", details={"index": index}
            )
        return listings[index]

    def attach_booking(self, property_id: int, booking_id: int) -> Property:
        """Record a booking id against its property."""
        listing = self.get_property(property_id)
        updated = replace(listing, booking_ids=(*listing.booking_ids, booking_id))
        self.repository.update(updated)
        return updated

    def detach_booking(self, property_id: int, booking_id: int) -> Property | None:
        """Drop a booking id from its property, if the property still exists."""
        listing = self.repository.get(property_id)
        if listing is None:
            return None
        updated = replace(
            listing,
            booking_ids=tuple(bid for bid in listing.booking_ids if bid != booking_id),
        )
        self.repository.update(updated)
        return updated
