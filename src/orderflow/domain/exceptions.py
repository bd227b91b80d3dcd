"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Callers that need to tell failures apart (e.g. an HTTP layer mapping
not-found to 404) match on the three families below, never on messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class IllegalTransitionError(DomainException):
    """The order status machine does not allow the requested change."""

    def __init__(self, current: str, requested: str, reason: str) -> None:
        self.current = current
        self.requested = requested
        super().__init__(reason)


# --- Not found ----------------------------------------------------------------


class AccountNotFoundError(EntityNotFoundError):
    pass


class ProductNotFoundError(EntityNotFoundError):
    pass


class OrderNotFoundError(EntityNotFoundError):
    pass


class CouponNotFoundError(EntityNotFoundError):
    """A non-empty coupon code did not match any stored coupon."""


# --- Validation ---------------------------------------------------------------


class InvalidShippingDateError(ValidationError):
    pass


class InvalidStatusError(ValidationError):
    """Requested status is blank or outside the configured vocabulary."""


class InactiveCouponError(ValidationError):
    pass
