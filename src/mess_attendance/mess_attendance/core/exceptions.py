class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when admin credentials or the kiosk PIN are wrong."""


class AuthorizationError(DomainError):
    """Raised when a device is not allowed to submit punches."""


class NotFoundError(DomainError):
    """Raised when the referenced employee does not exist."""


class AlreadyCompletedError(DomainError):
    """Raised on a punch after the day's record is already closed."""


class ConflictError(DomainError):
    """Raised when a write loses against a concurrent or duplicate write."""


class StoreUnavailableError(DomainError):
    """Raised when the database cannot be reached or a query fails."""


class OutsideGeofenceError(AuthorizationError):
    """Raised when a punch comes from outside the configured site radius."""
