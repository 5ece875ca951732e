"""Unit of work over a DocumentStore.

Holding the store lock for the whole block serialises order placement
against every other collection operation on the same store.
"""

from __future__ import annotations

from lessonshop.domain.repository.unit_of_work import AbstractUnitOfWork
from lessonshop.infrastructure.persistence.json_collection import DocumentStore
from lessonshop.infrastructure.persistence.json_lesson_repository import (
    JsonLessonRepository,
)
from lessonshop.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)


class JsonUnitOfWork(AbstractUnitOfWork):

    def __init__(self, store: DocumentStore) -> None:
        self._store = store
        self.lessons = JsonLessonRepository(store.collection("lessons"))
        self.orders = JsonOrderRepository(store.collection("orders"))

    def _begin(self) -> None:
        self._store.lock.acquire()

    def _end(self) -> None:
        self._store.lock.release()
