"""In-memory property repository."""

from accommodation_booking.domain.models import Property
from accommodation_booking.services.properties import PropertyRepository


class InMemoryPropertyRepository(PropertyRepository):
    """Property storage that lives for the lifetime of the process."""

    def __init__(self) -> None:
        self._properties: dict[int, Property] = {}

    def count(self) -> int:
        return len(self._properties)

    def add(self, listing: Property) -> None:
        if listing.id in self._properties:
            raise RuntimeError(f"Property {listing.id} already exists")
        self._properties[listing.id] = listing

    def get(self, property_id: int) -> Property | None:
        return self._properties.get(property_id)

    def list_all(self) -> list[Property]:
        return list(self._properties.values())

    def update(self, listing: Property) -> None:
        if listing.id not in self._properties:
            raise RuntimeError(f"Property {listing.id} does not exist")
        self._properties[listing.id] = listing
