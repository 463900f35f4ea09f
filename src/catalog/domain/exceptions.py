"""Domain-level exceptions.

Every rejected catalog operation is expressed as a subclass of
DomainException so the CLI layer can catch them uniformly and show the
message to the user.  Discount *parsing* never raises; its outcomes are
plain values (see ``catalog.domain.service.discount_parser``).
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist or is not owned by the caller."""
