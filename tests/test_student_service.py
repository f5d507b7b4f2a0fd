from unittest.mock import MagicMock

import pytest

from student_service.exceptions import NoSuchIdError
from student_service.models import Student
from student_service.repositories import InMemoryStudentRepository, StudentRepository
from student_service.services import StudentService


@pytest.fixture
def service():
    return StudentService(InMemoryStudentRepository())


def test_add_and_get_student(service):
    created = service.add_new_student("Andy", 22)
    assert created.id == 1
    assert (created.name, created.age) == ("Andy", 22)
    assert service.get_student_by_id(created.id) == created


def test_get_unknown_id_raises(service):
    with pytest.raises(NoSuchIdError) as excinfo:
        service.get_student_by_id(1)
    assert excinfo.value.student_id == 1
    assert str(excinfo.value) == "Could not find student with id 1"


def test_get_all_students(service):
    assert service.get_all_students() == []
    a = service.add_new_student("Andy", 22)
    b = service.add_new_student("Beth", 30)
    service.delete_student_by_id(a.id)
    assert service.get_all_students() == [b]


def test_delete_student(service):
    created = service.add_new_student("Andy", 22)
    service.delete_student_by_id(created.id)
    with pytest.raises(NoSuchIdError):
        service.get_student_by_id(created.id)


def test_delete_unknown_id_leaves_store_alone(service):
    kept = service.add_new_student("Andy", 22)
    with pytest.raises(NoSuchIdError) as excinfo:
        service.delete_student_by_id(5)
    assert excinfo.value.student_id == 5
    assert service.get_all_students() == [kept]


def test_delete_checks_existence_before_deleting():
    repo = MagicMock(spec=StudentRepository)
    repo.exists_by_id.return_value = False
    with pytest.raises(NoSuchIdError):
        StudentService(repo).delete_student_by_id(1)
    repo.delete_by_id.assert_not_called()

    repo.exists_by_id.return_value = True
    StudentService(repo).delete_student_by_id(1)
    repo.delete_by_id.assert_called_once_with(1)


def test_add_passes_unsaved_entity_to_repository():
    repo = MagicMock(spec=StudentRepository)
    repo.save.side_effect = lambda s: Student(id=1, name=s.name, age=s.age)
    dto = StudentService(repo).add_new_student("Andy", 22)
    saved = repo.save.call_args.args[0]
    assert saved.id is None
    assert dto.id == 1
