"""Application service: Search Lessons use case (query)."""

from __future__ import annotations

from lessonshop.application.dto import LessonDTO
from lessonshop.application.mappers import lesson_to_dto
from lessonshop.domain.repository.lesson_repository import LessonRepository


class SearchLessonsHandler:

    def __init__(self, lesson_repo: LessonRepository) -> None:
        self._lesson_repo = lesson_repo

    def handle(self, term: str | None) -> list[LessonDTO]:
        """Case-insensitive substring search; a blank term lists everything."""
        if term is None or not term.strip():
            lessons = self._lesson_repo.list_all()
        else:
            lessons = self._lesson_repo.search(term.strip())
        return [lesson_to_dto(lesson) for lesson in lessons]
