"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from accommodation_booking.domain.models import Role

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = _ENVIRONMENT
    owner_id: int = 1
    reservation_delay_seconds: float = 1.0
    first_check_in_fee: int = 10
    subsequent_check_in_fee: int = 5
    first_reservation_fee_hint: int = 10
    subsequent_reservation_fee_hint: int = 5
    deny_pending_only: bool = False
    notification_webhook_url: str | None = None
    notification_history_limit: int = 50

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_role(raw: str | None) -> Role | None:
    """Parse a role from user input."""
    if raw is None:
        return None
    cleaned = raw.strip().lower()
    if cleaned in {"owner", "house owner", "house_owner"}:
        return Role.OWNER
    if cleaned == "student":
        return Role.STUDENT
    return None
