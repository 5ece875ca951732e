"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the HTTP and CLI layers can catch them uniformly and map them to a
status code or a user-friendly message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Malformed or missing input. Nothing was changed."""


class NotFoundError(DomainException):
    """A referenced entity does not exist."""


class CapacityError(DomainException):
    """A lesson does not have enough seats left for the requested quantity."""

    def __init__(self, topic: str, requested: int, available: int) -> None:
        self.topic = topic
        self.requested = requested
        self.available = available
        super().__init__(
            f"Not enough space for {topic} "
            f"(requested {requested}, only {available} left, short by {requested - available})"
        )


class StorageError(DomainException):
    """The underlying store failed. Safe for the caller to retry."""


class AuthenticationError(DomainException):
    """Admin credentials did not match."""


class AuthorizationError(DomainException):
    """The admin key was missing or wrong."""
