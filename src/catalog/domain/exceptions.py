"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
The message of every exception is the status text shown to the user.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class DuplicateNameError(ValidationError):
    """Another product already uses the requested name."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class PersistenceError(DomainException):
    """The underlying store failed to carry out a statement."""


class InsertFailedError(PersistenceError):
    """An insert statement reported zero affected rows."""
