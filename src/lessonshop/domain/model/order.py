"""Order aggregate.

An Order is created exactly once, after every line has been reserved,
and is never changed afterwards. Its lines keep the lesson id plus a
snapshot of the topic and price, so the order stays readable after the
lesson is edited or deleted.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from enum import Enum

from lessonshop.domain.exceptions import ValidationError
from lessonshop.domain.model.value_objects import Money, Quantity


class PaymentStatus(Enum):
    PAID = "paid"
    FAILED = "failed"


@dataclass(frozen=True)
class PaymentOutcome:
    """Result of classifying the payment method of an order."""

    method: str
    success: bool
    message: str
    card_last4: str | None = None
    card_brand: str | None = None

    @property
    def status(self) -> PaymentStatus:
        return PaymentStatus.PAID if self.success else PaymentStatus.FAILED


@dataclass(frozen=True)
class Customer:
    """Contact and address details. Every field is required."""

    first_name: str
    last_name: str
    address: str
    city: str
    country: str
    postcode: str
    phone: str
    email: str

    @staticmethod
    def create(**raw: object) -> Customer:
        values: dict[str, str] = {}
        for f in fields(Customer):
            value = raw.get(f.name)
            # JSON clients often send postcodes and phone numbers as numbers.
            if isinstance(value, int) and not isinstance(value, bool):
                value = str(value)
            if not isinstance(value, str) or not value.strip():
                raise ValidationError("missing required fields")
            values[f.name] = value.strip()
        return Customer(**values)


@dataclass(frozen=True)
class OrderLine:
    lesson_id: str
    topic: str  # snapshot at order time
    quantity: Quantity
    unit_price: Money  # snapshot at order time

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MAX_LINE_ITEMS = 50


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders. The ``__init__`` is
    intentionally simple so the repository can reconstitute persisted
    orders without re-validating.
    """

    id: str | None
    customer: Customer
    lines: list[OrderLine]
    payment: PaymentOutcome
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        customer: Customer,
        lines: list[OrderLine],
        payment: PaymentOutcome,
    ) -> Order:
        if not lines:
            raise ValidationError("Order must contain at least one item")
        if len(lines) > MAX_LINE_ITEMS:
            raise ValidationError(f"Maximum {MAX_LINE_ITEMS} items per order")
        return Order(id=None, customer=customer, lines=list(lines), payment=payment)

    @property
    def total(self) -> Money:
        result = Money.zero()
        for line in self.lines:
            result = result + line.line_total
        return result

    @property
    def payment_status(self) -> PaymentStatus:
        return self.payment.status
