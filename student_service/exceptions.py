"""Domain exceptions raised by services and translated by the API.

Services raise these to signal that a request cannot be served; the
exception handlers in `main.py` turn them into HTTP responses.
"""


class StudentServiceError(Exception):
    """Base class for all domain exceptions."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NoSuchIdError(StudentServiceError):
    """Raised when no student exists for the requested id."""

    def __init__(self, student_id: int):
        self.student_id = student_id
        super().__init__(f"Could not find student with id {student_id}")
