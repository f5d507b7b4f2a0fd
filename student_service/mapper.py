"""Conversion between `Student` entities and `StudentDTO` views."""

from typing import Iterable, List

from .models import Student
from .schemas import StudentDTO


class StudentMapper:
    """Stateless entity <-> DTO mapping."""

    def to_dto(self, entity: Student) -> StudentDTO:
        return StudentDTO(id=entity.id, name=entity.name, age=entity.age)

    def to_dto_list(self, entities: Iterable[Student]) -> List[StudentDTO]:
        """Map every entity, keeping order; always returns a new list."""
        return [self.to_dto(e) for e in entities]

    def to_entity(self, dto: StudentDTO) -> Student:
        """Build an entity from a DTO without validating it."""
        return Student(id=dto.id, name=dto.name, age=dto.age)
