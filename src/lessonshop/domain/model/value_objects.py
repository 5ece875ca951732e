"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from lessonshop.domain.exceptions import ValidationError

_IDENTIFIER_RE = re.compile(r"^[0-9a-f]{32}$")


def is_valid_identifier(value: object) -> bool:
    """True if *value* looks like an identifier issued by the stores."""
    return isinstance(value, str) and bool(_IDENTIFIER_RE.match(value))


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount.

    Uses Decimal to avoid floating-point rounding errors in order totals.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor)

    def __str__(self) -> str:
        return f"{self.amount:.2f}"

    def to_number(self) -> int | float:
        """JSON-friendly representation: ints stay ints."""
        if self.amount == self.amount.to_integral_value():
            return int(self.amount)
        return float(self.amount)

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Coerce to Decimal safely. Booleans are not prices."""
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot book zero or negative seats.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)
