"""ASGI entrypoint for the accommodation booking API."""

from accommodation_booking.api.app import create_app
from accommodation_booking.containers import build_container

app = create_app(build_container())
