"""JSON-collection-backed implementation of OrderRepository.

Orders are stored with the ``lessonIDs`` / ``quantities`` arrays clients
already read, plus an ``items`` list carrying the topic and price
snapshot of each line.
"""

from __future__ import annotations

from datetime import datetime

from lessonshop.domain.model.order import Customer, Order, OrderLine, PaymentOutcome
from lessonshop.domain.model.value_objects import Money, Quantity
from lessonshop.domain.repository.order_repository import OrderRepository
from lessonshop.infrastructure.persistence.json_collection import Document, JsonCollection

_CUSTOMER_FIELDS = {
    "first_name": "firstName",
    "last_name": "lastName",
    "address": "address",
    "city": "city",
    "country": "country",
    "postcode": "postcode",
    "phone": "phone",
    "email": "email",
}


class JsonOrderRepository(OrderRepository):

    def __init__(self, collection: JsonCollection) -> None:
        self._collection = collection

    # --- OrderRepository interface --------------------------------------------

    def add(self, order: Order) -> str:
        order.id = self._collection.insert_one(self._to_raw(order))
        return order.id

    def get_by_id(self, order_id: str) -> Order | None:
        raw = self._collection.find_one({"_id": order_id})
        return self._to_domain(raw) if raw is not None else None

    def list_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._collection.find()]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> Document:
        raw: Document = {
            wire: getattr(order.customer, attr) for attr, wire in _CUSTOMER_FIELDS.items()
        }
        raw.update(
            {
                "lessonIDs": [line.lesson_id for line in order.lines],
                "quantities": [line.quantity.value for line in order.lines],
                "items": [
                    {
                        "lessonId": line.lesson_id,
                        "topic": line.topic,
                        "quantity": line.quantity.value,
                        "unitPrice": str(line.unit_price.amount),
                    }
                    for line in order.lines
                ],
                "total": str(order.total.amount),
                "paymentMethod": order.payment.method,
                "paymentStatus": order.payment_status.value,
                "paymentMessage": order.payment.message,
                "cardLast4": order.payment.card_last4,
                "cardBrand": order.payment.card_brand,
                "createdAt": order.created_at.isoformat(),
            }
        )
        if order.id is not None:
            raw["_id"] = order.id
        return raw

    @staticmethod
    def _to_domain(raw: Document) -> Order:
        customer = Customer(
            **{attr: raw[wire] for attr, wire in _CUSTOMER_FIELDS.items()}
        )
        lines = [
            OrderLine(
                lesson_id=i["lessonId"],
                topic=i["topic"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money.of(i["unitPrice"]),
            )
            for i in raw["items"]
        ]
        payment = PaymentOutcome(
            method=raw["paymentMethod"],
            success=raw["paymentStatus"] == "paid",
            message=raw["paymentMessage"],
            card_last4=raw.get("cardLast4"),
            card_brand=raw.get("cardBrand"),
        )
        return Order(
            id=raw["_id"],
            customer=customer,
            lines=lines,
            payment=payment,
            created_at=datetime.fromisoformat(raw["createdAt"]),
        )
