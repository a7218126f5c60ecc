"""
Service layer for the student roster.

The roster is an ordered, in-memory list of student records seeded
with four fixed entries.  Records keep insertion order and class
identifiers are unique within a roster: adding a second record with
an existing ``classId`` is rejected and leaves the roster unchanged.

Nothing is persisted.  A ``RosterService`` lives as long as the
application that owns it.  Its coroutines never await, so on a single
event loop each call runs to completion before another request can
touch the list.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from devops_class_api.app.schemas.student import StudentCreate, StudentRead


logger = logging.getLogger(__name__)


SEED_STUDENTS = (
    {"classId": 1, "name": "Celestine Ugwu", "gender": "male"},
    {"classId": 2, "name": "Abel", "gender": "male"},
    {"classId": 3, "name": "Fred Kanwai", "gender": "male"},
    {"classId": 4, "name": "Abdulqoyum Adeola Ilori", "gender": "male"},
)


class RosterError(ValueError):
    """Base class for roster failures."""


class StudentNotFoundError(RosterError):
    def __init__(self, class_id: int) -> None:
        super().__init__(f"Student {class_id} not found")
        self.class_id = class_id


class DuplicateStudentError(RosterError):
    def __init__(self, class_id: int) -> None:
        super().__init__(f"Student with classId {class_id} already exists")
        self.class_id = class_id


class RosterService:
    """In-memory roster of students."""

    def __init__(self, seed: Optional[Iterable[dict]] = None) -> None:
        """Create a roster holding ``seed`` (the four default students if omitted)."""
        self._seed = [StudentRead.model_validate(s) for s in (SEED_STUDENTS if seed is None else seed)]
        self._students: List[StudentRead] = []
        self.reset()

    def reset(self) -> None:
        """Drop every addition and restore the seeded roster."""
        self._students = [s.model_copy() for s in self._seed]

    async def list_students(self) -> List[StudentRead]:
        """Return all students in insertion order."""
        return list(self._students)

    async def count_students(self) -> int:
        return len(self._students)

    async def get_student(self, class_id: int) -> StudentRead:
        """Return the student with ``class_id``.

        Raises ``StudentNotFoundError`` when no record matches.
        """
        for student in self._students:
            if student.class_id == class_id:
                return student
        raise StudentNotFoundError(class_id)

    async def add_student(self, data: StudentCreate) -> List[StudentRead]:
        """Append a student and return the whole updated roster.

        Raises ``DuplicateStudentError`` if the ``classId`` is taken.
        """
        if any(s.class_id == data.class_id for s in self._students):
            logger.warning("Rejected duplicate classId %s", data.class_id)
            raise DuplicateStudentError(data.class_id)
        student = StudentRead.model_validate(data.model_dump())
        self._students.append(student)
        logger.info("Added student %s (%s)", student.class_id, student.name)
        return list(self._students)
