"""Business logic services used by HTTP controllers.

`StudentService` coordinates a repository and the mapper. It is thin on
purpose: input is validated before it gets here, and the only rule the
service enforces is that reads and deletes refer to an existing id.
"""

import logging
from typing import List, Optional

from . import models
from .exceptions import NoSuchIdError
from .mapper import StudentMapper
from .repositories import StudentRepository
from .schemas import StudentDTO

logger = logging.getLogger(__name__)


class StudentService:
    """Create, read, list and delete students."""
    def __init__(self, repository: StudentRepository, mapper: Optional[StudentMapper] = None):
        self.repository = repository
        self.mapper = mapper or StudentMapper()

    def get_student_by_id(self, student_id: int) -> StudentDTO:
        """Return the student with `student_id`.

        Raises `NoSuchIdError` when the id is unknown.
        """
        student = self.repository.find_by_id(student_id)
        if student is None:
            logger.warning("student %s not found", student_id)
            raise NoSuchIdError(student_id)
        return self.mapper.to_dto(student)

    def get_all_students(self) -> List[StudentDTO]:
        return self.mapper.to_dto_list(self.repository.find_all())

    def add_new_student(self, name: str, age: int) -> StudentDTO:
        """Persist a new student and return it with its assigned id."""
        created = self.repository.save(models.Student(name=name, age=age))
        logger.info("created student %s", created.id)
        return self.mapper.to_dto(created)

    def delete_student_by_id(self, student_id: int) -> None:
        """Delete the student with `student_id`.

        Nothing is touched when the id is unknown; `NoSuchIdError` is raised
        instead. The existence check and the delete are separate repository
        calls.
        """
        if not self.repository.exists_by_id(student_id):
            logger.warning("cannot delete student %s: not found", student_id)
            raise NoSuchIdError(student_id)
        self.repository.delete_by_id(student_id)
        logger.info("deleted student %s", student_id)
