"""Lesson aggregate.

Lessons live independently of orders. They have their own lifecycle:
the admin edits and removes them, and order placement consumes their
seats. Orders only keep the lesson id, so deleting a lesson never
touches historical orders.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from lessonshop.domain.exceptions import ValidationError
from lessonshop.domain.model.value_objects import Money

EDITABLE_FIELDS = ("topic", "location", "price", "space", "image")


@dataclass
class Lesson:
    """A bookable lesson in the catalog.

    Invariants:
    - ``topic`` and ``location`` are non-blank
    - ``capacity`` (seats left, ``space`` on the wire) is never negative
    """

    id: str | None
    topic: str
    location: str
    price: Money
    capacity: int
    image: str | None = None

    # --- Factory (used for NEW lessons only) ----------------------------------

    @staticmethod
    def create(
        topic: Any,
        location: Any,
        price: Any,
        space: Any,
        image: Any = None,
    ) -> Lesson:
        """Build a new lesson from raw admin input, enforcing all invariants."""
        return Lesson(
            id=None,
            topic=_require_text("topic", topic),
            location=_require_text("location", location),
            price=_parse_price(price),
            capacity=_parse_capacity(space),
            image=_parse_image(image),
        )

    def with_changes(self, changes: dict[str, Any]) -> Lesson:
        """Return a copy with the given raw field changes validated and applied."""
        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValidationError(f"Unknown lesson fields: {', '.join(sorted(unknown))}")
        if not changes:
            raise ValidationError("No lesson fields to update")

        parsed: dict[str, Any] = {}
        if "topic" in changes:
            parsed["topic"] = _require_text("topic", changes["topic"])
        if "location" in changes:
            parsed["location"] = _require_text("location", changes["location"])
        if "price" in changes:
            parsed["price"] = _parse_price(changes["price"])
        if "space" in changes:
            parsed["capacity"] = _parse_capacity(changes["space"])
        if "image" in changes:
            parsed["image"] = _parse_image(changes["image"])
        return replace(self, **parsed)

    def has_room_for(self, quantity: int) -> bool:
        return self.capacity >= quantity


def _require_text(name: str, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"Lesson {name} is required")
    return value.strip()


def _parse_price(value: Any) -> Money:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValidationError(f"Invalid lesson price: {value!r}")
    return Money.of(value)


def _parse_capacity(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"Lesson space must be an integer, got {value!r}")
    if value < 0:
        raise ValidationError("Lesson space cannot be negative")
    return value


def _parse_image(value: Any) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError("Lesson image must be a string reference")
    return value.strip() or None
