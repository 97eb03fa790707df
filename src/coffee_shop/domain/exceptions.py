"""Domain-level exceptions.

Misuse of the drink model is expressed as a subclass of DomainException
so the CLI layer can catch it uniformly and display a friendly message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A request the drink cannot honour.

    Raised for programming errors rather than user actions: a shot count
    or step that is not an integer, a negative shot count handed to
    ``Drink.create()``, or a shot direction that is not a ShotDirection.
    User actions such as removing a shot from an empty drink are clamped
    instead.
    """
