class DomainError(Exception):
    """Base exception for business rule violations."""


class StoreUnavailable(DomainError):
    """Raised when the data file cannot be read or written."""


class NotFound(DomainError):
    """Raised when a referenced class or student does not exist."""


class InvalidOperation(DomainError):
    """Raised when input is invalid or a change would break dataset invariants."""


class EmptyReport(DomainError):
    """Raised when there is nothing to export."""
