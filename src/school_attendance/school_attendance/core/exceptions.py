class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid.

    Unknown user and wrong password carry the same message.
    """


class AuthorizationError(DomainError):
    """Raised when an identity lacks permission for an action."""


class StorageError(DomainError):
    """Raised when the datastore rejects or fails an operation."""
