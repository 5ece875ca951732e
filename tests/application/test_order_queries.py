"""Tests for the order query use cases."""

import pytest

from lessonshop.application.dto import OrderLineSpec, OrderRequest
from lessonshop.application.list_orders import ListOrdersHandler
from lessonshop.application.place_order import PlaceOrderHandler
from lessonshop.application.show_order import ShowOrderHandler
from lessonshop.domain.exceptions import NotFoundError, ValidationError
from lessonshop.domain.model.lesson import Lesson
from lessonshop.domain.model.value_objects import Money
from tests.fakes import FakeLessonRepository, FakeUnitOfWork, new_id

CUSTOMER = dict(
    first_name="Ada",
    last_name="Lovelace",
    address="1 Analytical St",
    city="London",
    country="UK",
    postcode="NW4 4BT",
    phone="0123",
    email="ada@example.com",
)


@pytest.fixture
def placed():
    lesson = Lesson(id=new_id(), topic="Yoga", location="Hendon", price=Money.of("20"), capacity=5)
    uow = FakeUnitOfWork(lessons=FakeLessonRepository([lesson]))
    result = PlaceOrderHandler(uow).handle(
        OrderRequest(lines=[OrderLineSpec(lesson.id, 2)], payment_method="paypal", **CUSTOMER)
    )
    return uow, lesson, result


def test_list_orders(placed):
    uow, lesson, result = placed

    orders = ListOrdersHandler(uow.orders).handle()

    assert len(orders) == 1
    dto = orders[0]
    assert dto.id == result.order_id
    assert dto.customer["email"] == "ada@example.com"
    assert dto.items[0].lesson_id == lesson.id
    assert dto.items[0].line_total == "40.00"
    assert dto.total == "40.00"
    assert dto.payment_status == "paid"


def test_order_survives_lesson_deletion(placed):
    uow, lesson, result = placed
    uow.lessons.delete(lesson.id)

    dto = ShowOrderHandler(uow.orders).handle(result.order_id)

    assert dto.items[0].topic == "Yoga"


def test_show_missing_order():
    with pytest.raises(NotFoundError):
        ShowOrderHandler(FakeUnitOfWork().orders).handle(new_id())


def test_show_malformed_id():
    with pytest.raises(ValidationError):
        ShowOrderHandler(FakeUnitOfWork().orders).handle("42")
