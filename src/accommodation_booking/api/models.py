"""Pydantic models for API payloads."""

from pydantic import Base64Bytes, BaseModel

from accommodation_booking.domain.models import NewProperty, PhotoResource


class RoleSelection(BaseModel):
    """Role picked on the welcome screen."""

    role: str


class LoginRequest(BaseModel):
    """Login form payload."""

    username: str = ""
    password: str = ""
    role: str | None = None


class PropertyCreate(BaseModel):
    """Add-property form payload; the photo is sent base64 encoded."""

    name: str | None = None
    price: float | None = None
    amenities: str | None = None
    capacity: int | None = None
    photo: Base64Bytes | None = None
    photo_content_type: str = "image/jpeg"
    photo_filename: str | None = None

    def to_domain(self) -> NewProperty:
        photo = None
        if self.photo:
            photo = PhotoResource(
                content=self.photo,
                content_type=self.photo_content_type,
                filename=self.photo_filename,
            )
        return NewProperty(
            name=self.name,
            price=self.price,
            amenities=self.amenities,
            capacity=self.capacity,
            photo=photo,
        )


class RatingRequest(BaseModel):
    """Star rating for a property."""

    stars: int
