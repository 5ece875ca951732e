"""Application service: Add Lesson use case."""

from __future__ import annotations

from typing import Any

from loguru import logger

from lessonshop.application.dto import LessonDTO
from lessonshop.application.mappers import lesson_to_dto
from lessonshop.domain.model.lesson import Lesson
from lessonshop.domain.repository.lesson_repository import LessonRepository


class AddLessonHandler:

    def __init__(self, lesson_repo: LessonRepository) -> None:
        self._lesson_repo = lesson_repo

    def handle(
        self,
        topic: Any,
        location: Any,
        price: Any,
        space: Any,
        image: Any = None,
    ) -> LessonDTO:
        """Add a new lesson to the catalog."""
        lesson = Lesson.create(
            topic=topic, location=location, price=price, space=space, image=image
        )
        self._lesson_repo.add(lesson)
        logger.info("Lesson {} added: {} in {}", lesson.id, lesson.topic, lesson.location)
        return lesson_to_dto(lesson)
