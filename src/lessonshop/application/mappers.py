"""Domain -> DTO mapping shared by the use cases."""

from __future__ import annotations

from dataclasses import asdict

from lessonshop.application.dto import LessonDTO, OrderDTO, OrderLineDTO
from lessonshop.domain.model.lesson import Lesson
from lessonshop.domain.model.order import Order


def lesson_to_dto(lesson: Lesson) -> LessonDTO:
    return LessonDTO(
        id=lesson.id,  # type: ignore[arg-type]
        topic=lesson.topic,
        location=lesson.location,
        price=lesson.price.to_number(),
        space=lesson.capacity,
        image=lesson.image,
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        customer=asdict(order.customer),
        items=[
            OrderLineDTO(
                lesson_id=line.lesson_id,
                topic=line.topic,
                quantity=line.quantity.value,
                unit_price=str(line.unit_price),
                line_total=str(line.line_total),
            )
            for line in order.lines
        ],
        total=str(order.total),
        payment_method=order.payment.method,
        payment_status=order.payment_status.value,
        payment_message=order.payment.message,
        created_at=order.created_at.isoformat(),
        card_last4=order.payment.card_last4,
        card_brand=order.payment.card_brand,
    )
