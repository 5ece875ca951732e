"""Catalog endpoints: public reads and admin-only mutation."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status

from lessonshop.application.add_lesson import AddLessonHandler
from lessonshop.application.delete_lesson import DeleteLessonHandler
from lessonshop.application.list_lessons import ListLessonsHandler, ShowLessonHandler
from lessonshop.application.search_lessons import SearchLessonsHandler
from lessonshop.application.update_lesson import UpdateLessonHandler
from lessonshop.infrastructure import bootstrap
from lessonshop.infrastructure.http.admin import require_admin
from lessonshop.infrastructure.http.schemas import LessonBody, lesson_json
from lessonshop.infrastructure.persistence.json_lesson_repository import (
    JsonLessonRepository,
)

router = APIRouter()


def get_lesson_repository(request: Request) -> JsonLessonRepository:
    return bootstrap.lesson_repository(request.app.state.store)


@router.get("/lessons")
def list_lessons(repo: JsonLessonRepository = Depends(get_lesson_repository)):
    return [lesson_json(dto) for dto in ListLessonsHandler(repo).handle()]


@router.get("/lessons/{lesson_id}")
def get_lesson(lesson_id: str, repo: JsonLessonRepository = Depends(get_lesson_repository)):
    return lesson_json(ShowLessonHandler(repo).handle(lesson_id))


@router.get("/search")
def search_lessons(
    q: str | None = None,
    repo: JsonLessonRepository = Depends(get_lesson_repository),
):
    return [lesson_json(dto) for dto in SearchLessonsHandler(repo).handle(q)]


@router.post(
    "/lessons",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_lesson(body: LessonBody, repo: JsonLessonRepository = Depends(get_lesson_repository)):
    dto = AddLessonHandler(repo).handle(
        topic=body.topic,
        location=body.location,
        price=body.price,
        space=body.space,
        image=body.image,
    )
    return {"message": "Lesson added", "insertedId": dto.id}


@router.put("/lessons/{lesson_id}", dependencies=[Depends(require_admin)])
def update_lesson(
    lesson_id: str,
    body: LessonBody,
    repo: JsonLessonRepository = Depends(get_lesson_repository),
):
    dto = UpdateLessonHandler(repo).handle(lesson_id, body.model_dump(exclude_unset=True))
    return {"message": "Lesson updated", "lesson": lesson_json(dto)}


@router.delete("/lessons/{lesson_id}", dependencies=[Depends(require_admin)])
def delete_lesson(lesson_id: str, repo: JsonLessonRepository = Depends(get_lesson_repository)):
    DeleteLessonHandler(repo).handle(lesson_id)
    return {"message": "Lesson deleted"}
