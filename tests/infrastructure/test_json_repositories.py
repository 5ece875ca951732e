"""Tests for the JSON-backed repositories and unit of work."""

import threading

from lessonshop.domain.model.lesson import Lesson
from lessonshop.domain.model.order import Customer, Order, OrderLine, PaymentOutcome
from lessonshop.domain.model.value_objects import Money, Quantity
from lessonshop.infrastructure import bootstrap

CUSTOMER = Customer(
    first_name="Ada",
    last_name="Lovelace",
    address="1 Analytical St",
    city="London",
    country="UK",
    postcode="NW4 4BT",
    phone="0123",
    email="ada@example.com",
)


def _store(tmp_path):
    return bootstrap.document_store(tmp_path)


class TestJsonLessonRepository:

    def test_round_trip(self, tmp_path):
        repo = bootstrap.lesson_repository(_store(tmp_path))
        lesson = Lesson.create(topic="Yoga", location="Hendon", price="12.5", space=5, image="yoga.png")

        lesson_id = repo.add(lesson)

        assert repo.get_by_id(lesson_id) == lesson

    def test_stored_with_wire_field_names(self, tmp_path):
        store = _store(tmp_path)
        lesson_id = bootstrap.lesson_repository(store).add(
            Lesson.create(topic="Yoga", location="Hendon", price=20, space=5)
        )
        raw = store.collection("lessons").find_one({"_id": lesson_id})
        assert raw == {
            "_id": lesson_id,
            "topic": "Yoga",
            "location": "Hendon",
            "price": 20,
            "space": 5,
            "image": None,
        }

    def test_reserve_and_release(self, tmp_path):
        repo = bootstrap.lesson_repository(_store(tmp_path))
        lesson_id = repo.add(Lesson.create(topic="Yoga", location="Hendon", price=20, space=5))

        assert repo.reserve_seats(lesson_id, 5)
        assert not repo.reserve_seats(lesson_id, 1)
        repo.release_seats(lesson_id, 2)

        assert repo.get_by_id(lesson_id).capacity == 2

    def test_update_writes_only_named_attributes(self, tmp_path):
        repo = bootstrap.lesson_repository(_store(tmp_path))
        lesson = Lesson.create(topic="Yoga", location="Hendon", price=20, space=5)
        repo.add(lesson)
        repo.reserve_seats(lesson.id, 4)

        lesson.topic = "Judo"
        assert repo.update(lesson, ("topic",))

        stored = repo.get_by_id(lesson.id)
        assert stored.topic == "Judo"
        assert stored.capacity == 1

    def test_search_ignores_numeric_fields(self, tmp_path):
        repo = bootstrap.lesson_repository(_store(tmp_path))
        repo.add(Lesson.create(topic="Yoga", location="Hendon", price=20, space=5))
        repo.add(Lesson.create(topic="Chess", location="Room 20", price=5, space=20))

        assert [lesson.topic for lesson in repo.search("20")] == ["Chess"]
        assert [lesson.topic for lesson in repo.search("HEND")] == ["Yoga"]

    def test_search_term_is_literal(self, tmp_path):
        repo = bootstrap.lesson_repository(_store(tmp_path))
        repo.add(Lesson.create(topic="C++ basics", location="Hendon", price=20, space=5))
        repo.add(Lesson.create(topic="Cooking", location="Hendon", price=20, space=5))

        assert [lesson.topic for lesson in repo.search("c++")] == ["C++ basics"]

    def test_delete(self, tmp_path):
        repo = bootstrap.lesson_repository(_store(tmp_path))
        lesson_id = repo.add(Lesson.create(topic="Yoga", location="Hendon", price=20, space=5))
        assert repo.delete(lesson_id)
        assert not repo.delete(lesson_id)
        assert repo.get_by_id(lesson_id) is None


class TestJsonOrderRepository:

    def test_round_trip(self, tmp_path):
        repo = bootstrap.order_repository(_store(tmp_path))
        order = Order.create(
            CUSTOMER,
            [OrderLine("a" * 32, "Yoga", Quantity(2), Money.of("12.50"))],
            PaymentOutcome("card", True, "ok", card_last4="4242", card_brand="Visa"),
        )

        order_id = repo.add(order)
        loaded = repo.get_by_id(order_id)

        assert loaded == order
        assert str(loaded.total) == "25.00"

    def test_keeps_parallel_arrays_for_clients(self, tmp_path):
        store = _store(tmp_path)
        order = Order.create(
            CUSTOMER,
            [
                OrderLine("a" * 32, "Yoga", Quantity(2), Money.of("10")),
                OrderLine("b" * 32, "Chess", Quantity(1), Money.of("5")),
            ],
            PaymentOutcome("paypal", True, "ok"),
        )
        order_id = bootstrap.order_repository(store).add(order)

        raw = store.collection("orders").find_one({"_id": order_id})
        assert raw["lessonIDs"] == ["a" * 32, "b" * 32]
        assert raw["quantities"] == [2, 1]
        assert raw["paymentStatus"] == "paid"


class TestJsonUnitOfWork:

    def test_blocks_other_threads_until_exit(self, tmp_path):
        store = _store(tmp_path)
        repo = bootstrap.lesson_repository(store)
        reader_done = threading.Event()

        def read():
            repo.list_all()
            reader_done.set()

        with bootstrap.unit_of_work(store):
            reader = threading.Thread(target=read)
            reader.start()
            assert not reader_done.wait(0.2)

        reader.join(timeout=5)
        assert reader_done.is_set()
