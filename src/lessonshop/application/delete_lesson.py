"""Application service: Delete Lesson use case.

Orders that reference the lesson keep its id and their own snapshot;
nothing cascades.
"""

from __future__ import annotations

from loguru import logger

from lessonshop.domain.exceptions import NotFoundError, ValidationError
from lessonshop.domain.model.value_objects import is_valid_identifier
from lessonshop.domain.repository.lesson_repository import LessonRepository


class DeleteLessonHandler:

    def __init__(self, lesson_repo: LessonRepository) -> None:
        self._lesson_repo = lesson_repo

    def handle(self, lesson_id: str) -> None:
        if not is_valid_identifier(lesson_id):
            raise ValidationError("invalid lesson id")
        if not self._lesson_repo.delete(lesson_id):
            raise NotFoundError(f"Lesson not found: {lesson_id}")
        logger.info("Lesson {} deleted", lesson_id)
