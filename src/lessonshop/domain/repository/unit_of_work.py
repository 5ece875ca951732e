"""Unit of Work: one serialised view of the lesson and order stores.

Order placement runs inside ``with uow:`` so its read-check-decrement-insert
sequence is never interleaved with another order or observed half-done by
a catalog read on the same stores.
"""

from __future__ import annotations

import abc

from lessonshop.domain.repository.lesson_repository import LessonRepository
from lessonshop.domain.repository.order_repository import OrderRepository


class AbstractUnitOfWork(abc.ABC):
    lessons: LessonRepository
    orders: OrderRepository

    def __enter__(self) -> AbstractUnitOfWork:
        self._begin()
        return self

    def __exit__(self, *args) -> None:
        self._end()

    @abc.abstractmethod
    def _begin(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def _end(self) -> None:
        raise NotImplementedError
