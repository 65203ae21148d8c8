"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from orderflow.domain.exceptions import ValidationError

CENT = Decimal("0.01")
# Largest amount the price and total columns (12 digits, 2 after the point) hold.
MAX_AMOUNT = Decimal("9999999999.99")


@dataclass(frozen=True)
class Money:
    """A non-negative amount in the store's single currency.

    Kept as a Decimal so ``price * quantity`` is exact; the JSON layer
    converts to a float only at the boundary.  Amounts built through
    ``Money.of()`` are rounded to whole cents, which is also what the
    database column holds.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < 0:
            raise ValidationError(f"Money amount cannot be negative, got {self.amount}")
        if self.amount > MAX_AMOUNT:
            raise ValidationError(f"Money amount cannot exceed {MAX_AMOUNT}")

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int) or isinstance(factor, bool):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor)

    @property
    def is_positive(self) -> bool:
        return self.amount > 0

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    def __float__(self) -> float:
        return float(self.amount)

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Coerce user input (string, number) to cents; bools are refused."""
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            value = Decimal(str(amount).strip())
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        if value.is_finite() and abs(value) <= MAX_AMOUNT:
            value = value.quantize(CENT, rounding=ROUND_HALF_UP)
        return Money(value)


@dataclass(frozen=True)
class Quantity:
    """Number of units on an order: a plain int greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be greater than 0")

    def __str__(self) -> str:
        return str(self.value)
