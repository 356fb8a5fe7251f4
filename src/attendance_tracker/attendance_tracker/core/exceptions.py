class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ConfigurationError(DomainError):
    """Raised at startup when required settings are missing or invalid."""


class AuthError(DomainError):
    """Raised when the authorization exchange or stored credential fails."""


class CacheMissError(DomainError):
    """Raised when the cached roster payload is absent or corrupt."""


class TransportError(DomainError):
    """Raised when a remote read of the roster sheet fails."""
