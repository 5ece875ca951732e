"""Domain service: Inventory Reservation.

This service coordinates the cross-aggregate operation of taking seats
from several lessons for one order. It lives in the domain layer
because the all-or-nothing rule is a core business rule, not just
orchestration.

Each line is taken with the repository's conditional decrement, which
only succeeds while the lesson still has enough seats. A line that
cannot be taken rolls back every line already taken for the same order,
so a lesson is never left partially reserved and never drops below
zero, however many orders race for it.
"""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from lessonshop.domain.exceptions import CapacityError, NotFoundError
from lessonshop.domain.model.lesson import Lesson
from lessonshop.domain.repository.lesson_repository import LessonRepository


@dataclass(frozen=True)
class Reservation:
    """Seats taken from one lesson, with the lesson as it was beforehand."""

    lesson: Lesson
    quantity: int


class InventoryReservationService:

    def __init__(self, lesson_repo: LessonRepository) -> None:
        self._lesson_repo = lesson_repo

    def reserve(self, lines: list[tuple[str, int]]) -> list[Reservation]:
        """Take seats for every ``(lesson_id, quantity)`` line, in order.

        Raises NotFoundError or CapacityError for the first line that
        cannot be satisfied, after releasing the lines already taken.
        Any other error raised while reserving is also preceded by a
        rollback.
        """
        taken: list[Reservation] = []
        try:
            for lesson_id, qty in lines:
                lesson = self._lesson_repo.get_by_id(lesson_id)
                if lesson is None:
                    raise NotFoundError(f"Lesson not found: {lesson_id}")
                if not lesson.has_room_for(qty):
                    raise CapacityError(lesson.topic, qty, lesson.capacity)

                if not self._lesson_repo.reserve_seats(lesson_id, qty):
                    # Lost the race between the read above and the decrement.
                    current = self._lesson_repo.get_by_id(lesson_id)
                    if current is None:
                        raise NotFoundError(f"Lesson not found: {lesson_id}")
                    raise CapacityError(current.topic, qty, current.capacity)

                taken.append(Reservation(lesson=lesson, quantity=qty))
        except Exception:
            self.release(taken)
            raise
        return taken

    def release(self, reservations: list[Reservation]) -> bool:
        """Give back seats, most recent reservation first.

        A line that cannot be given back is logged and skipped so the
        remaining lines are still released. Returns False if any line
        was left behind.
        """
        clean = True
        for reservation in reversed(reservations):
            logger.warning(
                "Rolling back {} seat(s) of lesson {}",
                reservation.quantity,
                reservation.lesson.id,
            )
            try:
                self._lesson_repo.release_seats(reservation.lesson.id, reservation.quantity)
            except Exception as exc:
                clean = False
                logger.opt(exception=exc).error(
                    "Could not give back {} seat(s) of lesson {}",
                    reservation.quantity,
                    reservation.lesson.id,
                )
        return clean
