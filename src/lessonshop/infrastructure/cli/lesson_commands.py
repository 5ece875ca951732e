"""CLI commands for the Lesson aggregate."""

from __future__ import annotations

import click

from lessonshop.application.add_lesson import AddLessonHandler
from lessonshop.application.delete_lesson import DeleteLessonHandler
from lessonshop.application.dto import LessonDTO
from lessonshop.application.list_lessons import ListLessonsHandler
from lessonshop.application.search_lessons import SearchLessonsHandler
from lessonshop.application.update_lesson import UpdateLessonHandler
from lessonshop.domain.exceptions import DomainException
from lessonshop.infrastructure import bootstrap


def _display_lessons(lessons: list[LessonDTO]) -> None:
    if not lessons:
        click.echo("No lessons found.")
        return

    click.echo(f"{'ID':<32}  {'Topic':<20} {'Location':<16} {'Price':>8} {'Space':>6}")
    click.echo("-" * 87)
    for dto in lessons:
        click.echo(
            f"{dto.id:<32}  {dto.topic:<20} {dto.location:<16} {dto.price:>8} {dto.space:>6}"
        )


@click.command("add")
@click.option("--topic", required=True, help="Lesson topic.")
@click.option("--location", required=True, help="Where the lesson takes place.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--space", required=True, type=int, help="Number of seats.")
@click.option("--image", default=None, help="Image reference, e.g. yoga.png.")
@click.pass_obj
def lesson_add(store, topic: str, location: str, price: str, space: int, image: str | None) -> None:
    """Add a new lesson to the catalog."""
    handler = AddLessonHandler(bootstrap.lesson_repository(store))

    try:
        dto = handler.handle(topic=topic, location=location, price=price, space=space, image=image)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Lesson {dto.id} '{dto.topic}' added with {dto.space} seats at {dto.price}")


@click.command("list")
@click.pass_obj
def lesson_list(store) -> None:
    """List all lessons in the catalog."""
    handler = ListLessonsHandler(bootstrap.lesson_repository(store))
    _display_lessons(handler.handle())


@click.command("search")
@click.argument("term")
@click.pass_obj
def lesson_search(store, term: str) -> None:
    """Search lessons by topic or location."""
    handler = SearchLessonsHandler(bootstrap.lesson_repository(store))
    _display_lessons(handler.handle(term))


@click.command("update")
@click.option("--id", "lesson_id", required=True, help="Lesson ID.")
@click.option("--topic", default=None, help="New topic.")
@click.option("--location", default=None, help="New location.")
@click.option("--price", default=None, help="New price.")
@click.option("--space", default=None, type=int, help="New number of seats.")
@click.option("--image", default=None, help="New image reference.")
@click.pass_obj
def lesson_update(store, lesson_id: str, **fields) -> None:
    """Update one or more fields of a lesson."""
    changes = {name: value for name, value in fields.items() if value is not None}
    handler = UpdateLessonHandler(bootstrap.lesson_repository(store))

    try:
        handler.handle(lesson_id, changes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Lesson {lesson_id} updated.")


@click.command("delete")
@click.option("--id", "lesson_id", required=True, help="Lesson ID.")
@click.pass_obj
def lesson_delete(store, lesson_id: str) -> None:
    """Remove a lesson from the catalog. Existing orders are kept."""
    handler = DeleteLessonHandler(bootstrap.lesson_repository(store))

    try:
        handler.handle(lesson_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Lesson {lesson_id} deleted.")
