"""Request bodies and response shapes of the HTTP API.

Request fields are typed ``Any`` so malformed values reach the
application handlers, which own validation and its ordering.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from lessonshop.application.dto import LessonDTO, OrderDTO, OrderRequest


class LoginRequest(BaseModel):
    username: Any = None
    password: Any = None


class LessonBody(BaseModel):
    topic: Any = None
    location: Any = None
    price: Any = None
    space: Any = None
    image: Any = None


class OrderBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    first_name: Any = Field(None, alias="firstName")
    last_name: Any = Field(None, alias="lastName")
    address: Any = None
    city: Any = None
    country: Any = None
    postcode: Any = None
    phone: Any = None
    email: Any = None
    lesson_ids: Any = Field(None, alias="lessonIDs")
    quantities: Any = None
    payment_method: Any = Field(None, alias="paymentMethod")
    card_last4: Any = Field(None, alias="cardLast4")
    card_brand: Any = Field(None, alias="cardBrand")

    def to_request(self) -> OrderRequest:
        fields = self.model_dump(exclude={"lesson_ids", "quantities"})
        return OrderRequest.from_parallel_arrays(self.lesson_ids, self.quantities, **fields)


def lesson_json(dto: LessonDTO) -> dict[str, Any]:
    return {
        "_id": dto.id,
        "topic": dto.topic,
        "location": dto.location,
        "price": dto.price,
        "space": dto.space,
        "image": dto.image,
    }


def order_json(dto: OrderDTO) -> dict[str, Any]:
    c = dto.customer
    return {
        "_id": dto.id,
        "firstName": c["first_name"],
        "lastName": c["last_name"],
        "address": c["address"],
        "city": c["city"],
        "country": c["country"],
        "postcode": c["postcode"],
        "phone": c["phone"],
        "email": c["email"],
        "lessonIDs": [item.lesson_id for item in dto.items],
        "quantities": [item.quantity for item in dto.items],
        "items": [
            {
                "lessonId": item.lesson_id,
                "topic": item.topic,
                "quantity": item.quantity,
                "unitPrice": item.unit_price,
                "lineTotal": item.line_total,
            }
            for item in dto.items
        ],
        "total": dto.total,
        "paymentMethod": dto.payment_method,
        "paymentStatus": dto.payment_status,
        "paymentMessage": dto.payment_message,
        "cardLast4": dto.card_last4,
        "cardBrand": dto.card_brand,
        "createdAt": dto.created_at,
    }
