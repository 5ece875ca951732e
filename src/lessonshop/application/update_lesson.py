"""Application service: Update Lesson use case."""

from __future__ import annotations

from typing import Any

from loguru import logger

from lessonshop.application.dto import LessonDTO
from lessonshop.application.mappers import lesson_to_dto
from lessonshop.domain.exceptions import NotFoundError, ValidationError
from lessonshop.domain.model.value_objects import is_valid_identifier
from lessonshop.domain.repository.lesson_repository import LessonRepository


class UpdateLessonHandler:

    def __init__(self, lesson_repo: LessonRepository) -> None:
        self._lesson_repo = lesson_repo

    def handle(self, lesson_id: str, changes: dict[str, Any]) -> LessonDTO:
        """Apply a partial update to a lesson.

        Existing orders are unaffected: they captured the topic and price
        at order time.
        """
        if not is_valid_identifier(lesson_id):
            raise ValidationError("invalid lesson id")
        lesson = self._lesson_repo.get_by_id(lesson_id)
        if lesson is None:
            raise NotFoundError(f"Lesson not found: {lesson_id}")

        updated = lesson.with_changes(changes)
        attributes = tuple("capacity" if name == "space" else name for name in changes)
        if not self._lesson_repo.update(updated, attributes):
            raise NotFoundError(f"Lesson not found: {lesson_id}")
        logger.info("Lesson {} updated: {}", lesson_id, ", ".join(sorted(changes)))

        # Orders may have taken seats since the read above.
        stored = self._lesson_repo.get_by_id(lesson_id)
        return lesson_to_dto(stored if stored is not None else updated)
