"""Application service: Show Order use case (query)."""

from __future__ import annotations

from lessonshop.application.dto import OrderDTO
from lessonshop.application.mappers import order_to_dto
from lessonshop.domain.exceptions import NotFoundError, ValidationError
from lessonshop.domain.model.value_objects import is_valid_identifier
from lessonshop.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> OrderDTO:
        if not is_valid_identifier(order_id):
            raise ValidationError("invalid order id")
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order not found: {order_id}")
        return order_to_dto(order)
