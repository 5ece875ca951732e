"""Tests for the click command line."""

import re

import pytest
from click.testing import CliRunner

from lessonshop.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()

    def _run(*args):
        return runner.invoke(cli, ["--data-dir", str(tmp_path), *args])

    return _run


def _add(run, topic="Yoga", space="5") -> str:
    result = run("lesson", "add", "--topic", topic, "--location", "Hendon", "--price", "20", "--space", space)
    assert result.exit_code == 0, result.output
    return re.search(r"Lesson ([0-9a-f]{32})", result.output).group(1)


CUSTOMER_ARGS = [
    "--first-name", "Ada",
    "--last-name", "Lovelace",
    "--address", "1 Analytical St",
    "--city", "London",
    "--country", "UK",
    "--postcode", "NW4 4BT",
    "--phone", "0123",
    "--email", "ada@example.com",
]


def test_lesson_list_empty(run):
    result = run("lesson", "list")
    assert result.exit_code == 0
    assert "No lessons found." in result.output


def test_add_and_list(run):
    lesson_id = _add(run)
    result = run("lesson", "list")
    assert lesson_id in result.output
    assert "Yoga" in result.output


def test_search(run):
    _add(run, topic="Yoga")
    _add(run, topic="Chess")
    result = run("lesson", "search", "ches")
    assert "Chess" in result.output
    assert "Yoga" not in result.output


def test_update_and_delete(run):
    lesson_id = _add(run)
    assert run("lesson", "update", "--id", lesson_id, "--space", "9").exit_code == 0
    assert " 9" in run("lesson", "list").output
    assert run("lesson", "delete", "--id", lesson_id).exit_code == 0
    result = run("lesson", "delete", "--id", lesson_id)
    assert result.exit_code != 0
    assert "Lesson not found" in result.output


def test_place_and_list_orders(run):
    lesson_id = _add(run, space="5")

    result = run("order", "place", *CUSTOMER_ARGS, "--items", f"{lesson_id}:3",
                 "--payment", "card", "--card-last4", "4242", "--card-brand", "Visa")

    assert result.exit_code == 0, result.output
    assert "total=60.00" in result.output
    assert "Payment: paid" in result.output
    assert "Ada Lovelace" in run("order", "list").output


def test_place_order_over_capacity(run):
    lesson_id = _add(run, space="1")
    result = run("order", "place", *CUSTOMER_ARGS, "--items", f"{lesson_id}:2")
    assert result.exit_code != 0
    assert "Not enough space for Yoga" in result.output


def test_bad_items_format(run):
    result = run("order", "place", *CUSTOMER_ARGS, "--items", "oops")
    assert result.exit_code != 0
    assert "Expected 'LessonID:Quantity'" in result.output


def test_show_order(run):
    lesson_id = _add(run, space="5")
    placed = run("order", "place", *CUSTOMER_ARGS, "--items", f"{lesson_id}:2", "--payment", "paypal")
    order_id = re.search(r"Order ([0-9a-f]{32})", placed.output).group(1)

    result = run("order", "show", "--id", order_id)

    assert result.exit_code == 0, result.output
    assert order_id in result.output
    assert "Ada Lovelace" in result.output
    assert "Yoga" in result.output
    assert "40.00" in result.output


def test_show_unknown_order(run):
    result = run("order", "show", "--id", "0" * 32)
    assert result.exit_code != 0
    assert "Order not found" in result.output


def test_show_malformed_order_id(run):
    result = run("order", "show", "--id", "nope")
    assert result.exit_code != 0
    assert "invalid order id" in result.output


def test_help_warns_against_sharing_data_dir():
    runner = CliRunner()

    def help_text(*args):
        # click rewraps help text to the terminal width
        return " ".join(runner.invoke(cli, [*args, "--help"]).output.split())

    assert "Use one process per directory" in help_text()
    assert "atomic within this one process only" in help_text("serve")
