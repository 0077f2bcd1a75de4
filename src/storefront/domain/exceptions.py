"""Domain-level exceptions.

All rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input was rejected by a business rule."""


class InvalidOrder(ValidationError):
    """An order failed its policy's validation step."""


class UnsupportedOperation(DomainException):
    """The operation is not defined for this kind of component."""


class CloneFailure(DomainException):
    """A prototype could not produce an independent copy of itself."""
