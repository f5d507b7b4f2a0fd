"""Repository classes encapsulating student persistence.

`StudentRepository` is the capability set the service depends on. Two
adapters implement it: `SqlStudentRepository` over a SQLModel session and
`InMemoryStudentRepository` over a process-local dict. Both assign ids
themselves (database autoincrement or a counter) and never reuse them.
"""

import threading
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from sqlmodel import Session, select

from . import models


class StudentRepository(ABC):
    """CRUD operations for `Student` entities keyed by integer id."""

    @abstractmethod
    def save(self, student: models.Student) -> models.Student:
        """Persist `student` and return it with its id assigned."""

    @abstractmethod
    def find_by_id(self, student_id: int) -> Optional[models.Student]:
        """Return the student with `student_id` or `None` if absent."""

    @abstractmethod
    def find_all(self) -> List[models.Student]:
        """Return every stored student ordered by id."""

    @abstractmethod
    def exists_by_id(self, student_id: int) -> bool:
        """Return True if a student with `student_id` is stored."""

    @abstractmethod
    def delete_by_id(self, student_id: int) -> None:
        """Remove the student with `student_id`; a missing id is a no-op."""


class SqlStudentRepository(StudentRepository):
    """Database-backed repository; commits after every write."""
    def __init__(self, session: Session):
        self.session = session

    def save(self, student: models.Student) -> models.Student:
        self.session.add(student)
        self.session.commit()
        self.session.refresh(student)
        return student

    def find_by_id(self, student_id: int) -> Optional[models.Student]:
        return self.session.get(models.Student, student_id)

    def find_all(self) -> List[models.Student]:
        stmt = select(models.Student).order_by(models.Student.id)
        return list(self.session.exec(stmt).all())

    def exists_by_id(self, student_id: int) -> bool:
        stmt = select(models.Student.id).where(models.Student.id == student_id)
        return self.session.exec(stmt).first() is not None

    def delete_by_id(self, student_id: int) -> None:
        student = self.session.get(models.Student, student_id)
        if student is not None:
            self.session.delete(student)
            self.session.commit()


class InMemoryStudentRepository(StudentRepository):
    """Process-local store guarded by a lock.

    Stored entities are copies, so callers mutating a returned object do
    not change the stored record.
    """

    def __init__(self):
        self._rows: Dict[int, models.Student] = {}
        self._last_id = 0
        self._lock = threading.Lock()

    def save(self, student: models.Student) -> models.Student:
        with self._lock:
            if student.id is None:
                self._last_id += 1
                student.id = self._last_id
            else:
                self._last_id = max(self._last_id, student.id)
            self._rows[student.id] = self._copy(student)
        return student

    def find_by_id(self, student_id: int) -> Optional[models.Student]:
        with self._lock:
            row = self._rows.get(student_id)
            return self._copy(row) if row is not None else None

    def find_all(self) -> List[models.Student]:
        with self._lock:
            return [self._copy(self._rows[k]) for k in sorted(self._rows)]

    def exists_by_id(self, student_id: int) -> bool:
        with self._lock:
            return student_id in self._rows

    def delete_by_id(self, student_id: int) -> None:
        with self._lock:
            self._rows.pop(student_id, None)

    @staticmethod
    def _copy(student: models.Student) -> models.Student:
        return models.Student(id=student.id, name=student.name, age=student.age)
