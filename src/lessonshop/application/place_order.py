"""Application service: Place Order use case.

Validation happens in a fixed order and fails fast:

1. customer fields
2. line items (shape, ids, quantities)
3. per line, in input order: lesson exists, lesson has enough seats

Payment is classified before anything is written. Seats are then taken
and the order inserted inside one unit of work; if anything fails after
the first seat is taken, every seat taken for this order is given back
before the error surfaces.
"""

from __future__ import annotations

from loguru import logger

from lessonshop.application.dto import OrderLineSpec, OrderRequest, PlacedOrderDTO
from lessonshop.domain.exceptions import (
    CapacityError,
    DomainException,
    NotFoundError,
    StorageError,
    ValidationError,
)
from lessonshop.domain.model.order import MAX_LINE_ITEMS, Customer, Order, OrderLine
from lessonshop.domain.model.value_objects import Quantity, is_valid_identifier
from lessonshop.domain.repository.unit_of_work import AbstractUnitOfWork
from lessonshop.domain.service.inventory_reservation_service import (
    InventoryReservationService,
)
from lessonshop.domain.service.payment import classify_payment


class PlaceOrderHandler:

    def __init__(self, uow: AbstractUnitOfWork) -> None:
        self._uow = uow

    def handle(self, request: OrderRequest) -> PlacedOrderDTO:
        customer = Customer.create(
            first_name=request.first_name,
            last_name=request.last_name,
            address=request.address,
            city=request.city,
            country=request.country,
            postcode=request.postcode,
            phone=request.phone,
            email=request.email,
        )
        lines = self._validate_lines(request.lines)
        payment = classify_payment(
            request.payment_method, request.card_last4, request.card_brand
        )

        with self._uow as uow:
            svc = InventoryReservationService(uow.lessons)
            try:
                reservations = svc.reserve(lines)
            except (NotFoundError, CapacityError) as exc:
                logger.info("Order rejected: {}", exc)
                raise

            try:
                order = Order.create(
                    customer=customer,
                    lines=[
                        OrderLine(
                            lesson_id=r.lesson.id,  # type: ignore[arg-type]
                            topic=r.lesson.topic,
                            quantity=Quantity(r.quantity),
                            unit_price=r.lesson.price,
                        )
                        for r in reservations
                    ],
                    payment=payment,
                )
                order_id = uow.orders.add(order)
            except DomainException:
                svc.release(reservations)
                raise
            except Exception as exc:
                svc.release(reservations)
                raise StorageError("Could not save order") from exc

        logger.info(
            "Order {} placed: {} line(s), total {}, payment {}",
            order_id,
            len(order.lines),
            order.total,
            payment.status.value,
        )
        return PlacedOrderDTO(
            order_id=order_id,
            payment_status=payment.status.value,
            payment_message=payment.message,
            total=str(order.total),
        )

    @staticmethod
    def _validate_lines(specs: list[OrderLineSpec] | None) -> list[tuple[str, int]]:
        if not specs or len(specs) > MAX_LINE_ITEMS:
            raise ValidationError("invalid line items")

        lines: list[tuple[str, int]] = []
        for spec in specs:
            qty = spec.quantity
            if not is_valid_identifier(spec.lesson_id):
                raise ValidationError("invalid line items")
            if isinstance(qty, bool) or not isinstance(qty, int) or qty <= 0:
                raise ValidationError("invalid line items")
            lines.append((spec.lesson_id, qty))
        return lines
