class DomainError(Exception):
    """Base exception for business rule violations."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""
