"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

import threading
from dataclasses import replace
from uuid import uuid4

from lessonshop.domain.exceptions import StorageError
from lessonshop.domain.model.lesson import Lesson
from lessonshop.domain.model.order import Order
from lessonshop.domain.repository.lesson_repository import LessonRepository
from lessonshop.domain.repository.order_repository import OrderRepository
from lessonshop.domain.repository.unit_of_work import AbstractUnitOfWork


def new_id() -> str:
    return uuid4().hex


class FakeLessonRepository(LessonRepository):

    def __init__(self, lessons: list[Lesson] | None = None) -> None:
        self._lock = threading.Lock()
        self._store: dict[str, Lesson] = {}
        for lesson in lessons or []:
            if lesson.id is None:
                lesson.id = new_id()
            self._store[lesson.id] = replace(lesson)

    def get_by_id(self, lesson_id: str) -> Lesson | None:
        with self._lock:
            lesson = self._store.get(lesson_id)
            return replace(lesson) if lesson is not None else None

    def list_all(self) -> list[Lesson]:
        with self._lock:
            return [replace(lesson) for lesson in self._store.values()]

    def search(self, term: str) -> list[Lesson]:
        term = term.lower()
        return [
            lesson
            for lesson in self.list_all()
            if term in lesson.topic.lower() or term in lesson.location.lower()
        ]

    def add(self, lesson: Lesson) -> str:
        with self._lock:
            lesson.id = new_id()
            self._store[lesson.id] = replace(lesson)
            return lesson.id

    def update(self, lesson: Lesson, attributes: tuple[str, ...]) -> bool:
        with self._lock:
            stored = self._store.get(lesson.id)
            if stored is None:
                return False
            for name in attributes:
                setattr(stored, name, getattr(lesson, name))
            return True

    def delete(self, lesson_id: str) -> bool:
        with self._lock:
            return self._store.pop(lesson_id, None) is not None

    def reserve_seats(self, lesson_id: str, quantity: int) -> bool:
        with self._lock:
            lesson = self._store.get(lesson_id)
            if lesson is None or lesson.capacity < quantity:
                return False
            lesson.capacity -= quantity
            return True

    def release_seats(self, lesson_id: str, quantity: int) -> None:
        with self._lock:
            lesson = self._store.get(lesson_id)
            if lesson is not None:
                lesson.capacity += quantity


class FlakyReleaseLessonRepository(FakeLessonRepository):
    """Lesson store whose first seat release fails."""

    def __init__(self, lessons: list[Lesson] | None = None) -> None:
        super().__init__(lessons)
        self.failed_releases = 0

    def release_seats(self, lesson_id: str, quantity: int) -> None:
        if self.failed_releases == 0:
            self.failed_releases += 1
            raise StorageError("transient write failure")
        super().release_seats(lesson_id, quantity)


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[str, Order] = {}

    def add(self, order: Order) -> str:
        order.id = new_id()
        self._store[order.id] = order
        return order.id

    def get_by_id(self, order_id: str) -> Order | None:
        return self._store.get(order_id)

    def list_all(self) -> list[Order]:
        return list(self._store.values())


class FailingOrderRepository(FakeOrderRepository):
    """Order store whose writes always fail."""

    def add(self, order: Order) -> str:
        raise StorageError("disk full")


class FakeUnitOfWork(AbstractUnitOfWork):

    def __init__(
        self,
        lessons: FakeLessonRepository | None = None,
        orders: FakeOrderRepository | None = None,
    ) -> None:
        self._lock = threading.RLock()
        self.lessons = lessons or FakeLessonRepository()
        self.orders = orders or FakeOrderRepository()
        self.entered = 0

    def _begin(self) -> None:
        self._lock.acquire()
        self.entered += 1

    def _end(self) -> None:
        self._lock.release()
