"""Session and role context."""

import logging
from dataclasses import dataclass

from accommodation_booking.domain.errors import AuthorizationError, ValidationError
from accommodation_booking.domain.models import AppState, Role, SessionUser

_logger = logging.getLogger(__name__)


@dataclass
class SessionContext:
    """Tracks who is logged in and which role they act under."""

    state: AppState

    def select_role(self, role: Role) -> None:
        """Record the role picked on the welcome screen and move on to login."""
        self.state.selected_role = role
        self.state.show_welcome = False

    def login(self, username: str, password: str, role: Role | None) -> SessionUser:
        """Start a session; the role given here overrides the welcome choice."""
        username = (username or "").strip()
        missing = [
            label
            for label, value in (
                ("username", username),
                ("password", password),
                ("role", role),
            )
            if not value
        ]
        if missing:
            raise ValidationError(
                "Username, password, and role are required.",
                details={"missing": missing},
            )
        user = SessionUser(username=username, role=role)
        self.state.user = user
        self.state.selected_role = None
        self.state.show_welcome = False
        _logger.info("Session started: username=%s role=%s", username, role.value)
        return user

    def logout(self) -> None:
        """Clear the session unconditionally."""
        if self.state.user is not None:
            _logger.info("Session ended: username=%s", self.state.user.username)
        self.state.user = None

    @property
    def current_user(self) -> SessionUser | None:
        return self.state.user

    def require_role(self, role: Role) -> SessionUser:
        """Return the active user or raise if they may not act as ``role``."""
        user = self.state.user
        if user is None:
            raise AuthorizationError(
                "You must be logged in.", details={"required_role": role.value}
            )
        if user.role is not role:
            raise AuthorizationError(
                f"Only a {role.value} can do that.",
                details={"required_role": role.value, "role": user.role.value},
            )
        return user
