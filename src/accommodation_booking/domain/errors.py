"""Errors raised by the booking core.

Every error carries a ``kind`` that the controller copies into the failure
reason it returns, and that the HTTP layer maps to a status code.
"""


class BookingAppError(Exception):
    """Base class for recoverable booking errors."""

    kind = "error"

    def __init__(self, message: str, details: dict[str, object] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(BookingAppError):
    """Input is missing or malformed."""

    kind = "validation"


class NotFoundError(BookingAppError):
    """A referenced booking or property does not exist."""

    kind = "not_found"


class PreconditionError(BookingAppError):
    """The entity exists but is not in a state that allows the operation."""

    kind = "precondition"


class AuthorizationError(BookingAppError):
    """No active session, or the session role may not perform the operation."""

    kind = "authorization"
