class DomainError(Exception):
    """Base exception for record lifecycle failures."""


class ValidationError(DomainError):
    """Raised when client input is malformed or missing required fields."""


class NotFoundError(DomainError):
    """Raised when a well-formed id matches no row."""


class StoreError(DomainError):
    """Raised when the backing store fails to execute a statement."""


class ConfigurationError(DomainError):
    """Raised when the store backend cannot be resolved from settings."""
