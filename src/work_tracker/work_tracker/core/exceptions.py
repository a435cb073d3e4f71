class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a referenced report or profile does not exist."""


class StoreError(DomainError):
    """Raised when the underlying database operation fails."""


class ExportError(DomainError):
    """Raised when a spreadsheet or PDF cannot be rendered."""
