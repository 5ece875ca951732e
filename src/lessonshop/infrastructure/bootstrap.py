"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from lessonshop.infrastructure.persistence.json_collection import DocumentStore
from lessonshop.infrastructure.persistence.json_lesson_repository import (
    JsonLessonRepository,
)
from lessonshop.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from lessonshop.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork


def document_store(data_dir: Path | None) -> DocumentStore:
    """A store persisting under *data_dir*, or in memory when it is None."""
    return DocumentStore(data_dir)


def lesson_repository(store: DocumentStore) -> JsonLessonRepository:
    return JsonLessonRepository(store.collection("lessons"))


def order_repository(store: DocumentStore) -> JsonOrderRepository:
    return JsonOrderRepository(store.collection("orders"))


def unit_of_work(store: DocumentStore) -> JsonUnitOfWork:
    return JsonUnitOfWork(store)
