"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the HTTP/CLI layers and the application layer
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class OrderLineSpec:
    """Input: one line of an order (lesson id + seats wanted)."""

    lesson_id: Any
    quantity: Any


@dataclass(frozen=True)
class OrderRequest:
    """Input: an order exactly as the customer submitted it.

    Fields are left untyped on purpose: the handler owns validation and
    its ordering, so nothing is rejected before it gets here.
    """

    first_name: Any = None
    last_name: Any = None
    address: Any = None
    city: Any = None
    country: Any = None
    postcode: Any = None
    phone: Any = None
    email: Any = None
    lines: list[OrderLineSpec] | None = None
    payment_method: Any = None
    card_last4: Any = None
    card_brand: Any = None

    @staticmethod
    def from_parallel_arrays(
        lesson_ids: Any,
        quantities: Any,
        **fields: Any,
    ) -> OrderRequest:
        """Pair the ``lessonIDs`` / ``quantities`` wire arrays into line specs.

        Missing or mismatched arrays produce ``lines=None`` and are
        rejected by the handler as invalid line items.
        """
        lines: list[OrderLineSpec] | None = None
        if (
            isinstance(lesson_ids, list)
            and isinstance(quantities, list)
            and len(lesson_ids) == len(quantities)
        ):
            lines = [OrderLineSpec(lid, qty) for lid, qty in zip(lesson_ids, quantities)]
        return OrderRequest(lines=lines, **fields)


@dataclass(frozen=True)
class PlacedOrderDTO:
    """Output: result of a successful order placement."""

    order_id: str
    payment_status: str
    payment_message: str
    total: str


@dataclass(frozen=True)
class LessonDTO:
    id: str
    topic: str
    location: str
    price: int | float
    space: int
    image: str | None


@dataclass(frozen=True)
class OrderLineDTO:
    lesson_id: str
    topic: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    customer: dict[str, str]
    items: list[OrderLineDTO]
    total: str
    payment_method: str
    payment_status: str
    payment_message: str
    created_at: str
    card_last4: str | None = None
    card_brand: str | None = None
