"""Domain-level exceptions.

All errors raised by the catalog are subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
A missing product on lookup is NOT an error: repositories return None.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A field value or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A write targeted an entity that does not exist."""


class StorageUnavailableError(DomainException):
    """The backing store cannot be read or written."""


class ConfigError(DomainException):
    """A configuration value is missing or invalid."""
