"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the HTTP and CLI layers can catch them uniformly and translate them into
status codes or user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidRequestError(ValidationError):
    """Input is missing or malformed; the caller can fix it."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist or is not visible to the caller."""


class InsufficientStockError(ValidationError):
    """Not enough stock to cover the requested quantity.

    ``available_stock`` lets the caller retry with a smaller quantity.
    """

    def __init__(self, available_stock: int, message: str = "Insufficient stock") -> None:
        super().__init__(message)
        self.available_stock = available_stock


class InvalidStatusError(ValidationError):
    """A status value outside the declared set was supplied."""

    def __init__(self, status: str, valid_statuses: list[str]) -> None:
        super().__init__(f"Invalid status {status!r}")
        self.status = status
        self.valid_statuses = valid_statuses


class ConflictError(DomainException):
    """The operation lost a race or clashes with the current state."""


class StockConflictError(ConflictError):
    """The conditional stock decrement failed after the stock was read."""


class IllegalTransitionError(ConflictError):
    """The requested status change is not allowed from the current status."""

    def __init__(self, current: str, requested: str, allowed: list[str]) -> None:
        super().__init__(
            f"Cannot move order from {current} to {requested}"
        )
        self.current = current
        self.requested = requested
        self.allowed = allowed


class ProductInUseError(ConflictError):
    """The product is referenced by orders and cannot be removed."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product #{product_id} has orders and cannot be deleted")
        self.product_id = product_id


class DuplicateEmailError(InvalidRequestError):
    """Another user already registered this email address."""

    def __init__(self, email: str) -> None:
        super().__init__(f"Email {email} is already registered")
        self.email = email
