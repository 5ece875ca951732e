from pathlib import Path

import click

from lessonshop.infrastructure import bootstrap
from lessonshop.infrastructure.cli.lesson_commands import (
    lesson_add,
    lesson_delete,
    lesson_list,
    lesson_search,
    lesson_update,
)
from lessonshop.infrastructure.cli.order_commands import order_list, order_place, order_show
from lessonshop.infrastructure.cli.serve_command import serve


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("data"),
    show_default=True,
    envvar="LESSONSHOP_DATA_DIR",
    help="Directory holding lessons.json and orders.json. Use one process per "
    "directory: do not point the CLI at the directory of a running server.",
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Path) -> None:
    """Lesson Shop: catalog and booking backend"""
    ctx.obj = bootstrap.document_store(data_dir)


@cli.group()
def lesson() -> None:
    """Manage the lesson catalog."""


@cli.group()
def order() -> None:
    """Place and inspect orders."""


# Register subcommands
lesson.add_command(lesson_add)
lesson.add_command(lesson_delete)
lesson.add_command(lesson_list)
lesson.add_command(lesson_search)
lesson.add_command(lesson_update)
order.add_command(order_list)
order.add_command(order_place)
order.add_command(order_show)
cli.add_command(serve)
