"""Domain-level exceptions.

Every rejected input is expressed as a subclass of DomainException so the
CLI layer can catch them uniformly and display user-friendly messages.
Arithmetic edge cases (zero panel length, full wastage, unknown unit pairs)
are never errors; they resolve to zero or identity values.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """An input value, unit, type or field name was rejected."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
