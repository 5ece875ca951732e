"""Abstract repository for the Lesson aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure
layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from lessonshop.domain.model.lesson import Lesson


class LessonRepository(ABC):

    @abstractmethod
    def get_by_id(self, lesson_id: str) -> Lesson | None:
        """Return a lesson by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Lesson]:
        """Return every lesson in the catalog."""

    @abstractmethod
    def search(self, term: str) -> list[Lesson]:
        """Return lessons whose text fields contain *term*, ignoring case."""

    @abstractmethod
    def add(self, lesson: Lesson) -> str:
        """Persist a new lesson, assign its ID and return it."""

    @abstractmethod
    def update(self, lesson: Lesson, attributes: tuple[str, ...]) -> bool:
        """Write the named *attributes* of an existing lesson.

        Other attributes, capacity in particular, are left as stored.
        False if no lesson matched.
        """

    @abstractmethod
    def delete(self, lesson_id: str) -> bool:
        """Remove a lesson. False if no lesson matched."""

    @abstractmethod
    def reserve_seats(self, lesson_id: str, quantity: int) -> bool:
        """Atomically take *quantity* seats if at least that many are left.

        Returns False, changing nothing, when the lesson is missing or
        does not have enough capacity.
        """

    @abstractmethod
    def release_seats(self, lesson_id: str, quantity: int) -> None:
        """Give back seats taken by ``reserve_seats``."""
