"""JSON-collection-backed implementation of LessonRepository."""

from __future__ import annotations

import re

from lessonshop.domain.model.lesson import Lesson
from lessonshop.domain.model.value_objects import Money
from lessonshop.domain.repository.lesson_repository import LessonRepository
from lessonshop.infrastructure.persistence.json_collection import Document, JsonCollection

# Domain attribute -> stored field
_FIELD_NAMES = {
    "topic": "topic",
    "location": "location",
    "price": "price",
    "capacity": "space",
    "image": "image",
}


class JsonLessonRepository(LessonRepository):

    def __init__(self, collection: JsonCollection) -> None:
        self._collection = collection

    # --- LessonRepository interface -------------------------------------------

    def get_by_id(self, lesson_id: str) -> Lesson | None:
        raw = self._collection.find_one({"_id": lesson_id})
        return self._to_domain(raw) if raw is not None else None

    def list_all(self) -> list[Lesson]:
        return [self._to_domain(raw) for raw in self._collection.find()]

    def search(self, term: str) -> list[Lesson]:
        pattern = {"$regex": re.escape(term), "$options": "i"}
        # price and space are stored as numbers, so their clauses never
        # match; kept so numeric search can be defined here later.
        flt = {
            "$or": [
                {"topic": pattern},
                {"location": pattern},
                {"price": pattern},
                {"space": pattern},
            ]
        }
        return [self._to_domain(raw) for raw in self._collection.find(flt)]

    def add(self, lesson: Lesson) -> str:
        raw = self._to_raw(lesson)
        del raw["_id"]
        lesson.id = self._collection.insert_one(raw)
        return lesson.id

    def update(self, lesson: Lesson, attributes: tuple[str, ...]) -> bool:
        raw = self._to_raw(lesson)
        changes = {_FIELD_NAMES[a]: raw[_FIELD_NAMES[a]] for a in attributes}
        return self._collection.update_one({"_id": lesson.id}, {"$set": changes}) == 1

    def delete(self, lesson_id: str) -> bool:
        return self._collection.delete_one({"_id": lesson_id}) == 1

    def reserve_seats(self, lesson_id: str, quantity: int) -> bool:
        matched = self._collection.update_one(
            {"_id": lesson_id, "space": {"$gte": quantity}},
            {"$inc": {"space": -quantity}},
        )
        return matched == 1

    def release_seats(self, lesson_id: str, quantity: int) -> None:
        self._collection.update_one({"_id": lesson_id}, {"$inc": {"space": quantity}})

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(lesson: Lesson) -> Document:
        return {
            "_id": lesson.id,
            "topic": lesson.topic,
            "location": lesson.location,
            "price": lesson.price.to_number(),
            "space": lesson.capacity,
            "image": lesson.image,
        }

    @staticmethod
    def _to_domain(raw: Document) -> Lesson:
        return Lesson(
            id=raw["_id"],
            topic=raw["topic"],
            location=raw["location"],
            price=Money.of(raw["price"]),
            capacity=raw["space"],
            image=raw.get("image"),
        )
