"""Custom exception hierarchy for property-registry."""


class RegistryError(Exception):
    """Base exception for all property-registry errors."""

    kind = "RegistryError"


class AccessDeniedError(RegistryError):
    """Raised when the calling principal lacks a required permission."""

    kind = "AccessDenied"


class UnauthorizedError(AccessDeniedError):
    """Raised when the caller is neither authorized nor the record owner."""

    kind = "Unauthorized"


class AdminOnlyError(AccessDeniedError):
    """Raised when a non-admin principal tries to change the access list."""

    kind = "AdminOnly"


class RecordNotFoundError(RegistryError):
    """Raised when no property record exists for a location."""

    kind = "NotFound"


class InvalidRecordStateError(RegistryError):
    """Raised when a record is in an invalid state for the operation."""

    kind = "InvalidState"


class AlreadyExistsError(InvalidRecordStateError):
    """Raised when registering a location that already has a record."""

    kind = "AlreadyExists"


class AlreadyPricedError(InvalidRecordStateError):
    """Raised when creating a transaction record for an already priced property."""

    kind = "AlreadyPriced"


class InvalidArgumentError(RegistryError, ValueError):
    """Raised when an operation argument is out of range."""

    kind = "InvalidArgument"


class ConfigurationError(RegistryError):
    """Raised when configuration is invalid or missing."""

    kind = "Configuration"


class SinkError(RegistryError):
    """Raised when a sink operation fails."""

    kind = "Sink"
