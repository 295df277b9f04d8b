"""Custom exception hierarchy for estate-sim."""


class EstateSimError(Exception):
    """Base exception for all estate-sim errors."""


class EntityNotFoundError(EstateSimError):
    """Raised when a referenced user or property does not exist."""


class InvalidEntityStateError(EstateSimError):
    """Raised when an entity is in an invalid state for the operation."""


class ConfigurationError(EstateSimError):
    """Raised when configuration is invalid or missing."""
