"""Order endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request, status

from lessonshop.application.list_orders import ListOrdersHandler
from lessonshop.application.place_order import PlaceOrderHandler
from lessonshop.application.show_order import ShowOrderHandler
from lessonshop.infrastructure import bootstrap
from lessonshop.infrastructure.http.schemas import OrderBody, order_json

router = APIRouter()


@router.post("/orders", status_code=status.HTTP_201_CREATED)
def place_order(body: OrderBody, request: Request):
    handler = PlaceOrderHandler(bootstrap.unit_of_work(request.app.state.store))
    result = handler.handle(body.to_request())
    return {
        "message": "Order placed",
        "insertedId": result.order_id,
        "paymentStatus": result.payment_status,
        "paymentMessage": result.payment_message,
    }


@router.get("/orders")
def list_orders(request: Request):
    handler = ListOrdersHandler(bootstrap.order_repository(request.app.state.store))
    return [order_json(dto) for dto in handler.handle()]


@router.get("/orders/{order_id}")
def get_order(order_id: str, request: Request):
    handler = ShowOrderHandler(bootstrap.order_repository(request.app.state.store))
    return order_json(handler.handle(order_id))
