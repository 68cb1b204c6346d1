class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class DuplicateIdError(DomainError):
    """Raised when an employee id is already taken."""


class NotFoundError(DomainError):
    """Raised when an employee or attendance record does not exist."""


class ExportError(DomainError):
    """Raised when the export file cannot be written."""


class AuthorizationError(DomainError):
    """Raised when the admin credential is missing or wrong."""
