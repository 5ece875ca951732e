"""Application service: List / Show Lesson use cases (queries)."""

from __future__ import annotations

from lessonshop.application.dto import LessonDTO
from lessonshop.application.mappers import lesson_to_dto
from lessonshop.domain.exceptions import NotFoundError, ValidationError
from lessonshop.domain.model.value_objects import is_valid_identifier
from lessonshop.domain.repository.lesson_repository import LessonRepository


class ListLessonsHandler:

    def __init__(self, lesson_repo: LessonRepository) -> None:
        self._lesson_repo = lesson_repo

    def handle(self) -> list[LessonDTO]:
        return [lesson_to_dto(lesson) for lesson in self._lesson_repo.list_all()]


class ShowLessonHandler:

    def __init__(self, lesson_repo: LessonRepository) -> None:
        self._lesson_repo = lesson_repo

    def handle(self, lesson_id: str) -> LessonDTO:
        if not is_valid_identifier(lesson_id):
            raise ValidationError("invalid lesson id")
        lesson = self._lesson_repo.get_by_id(lesson_id)
        if lesson is None:
            raise NotFoundError(f"Lesson not found: {lesson_id}")
        return lesson_to_dto(lesson)
