"""Pydantic request/response schemas used by the API.

`StudentCreationIn` is the validated input of `POST /students` and
`StudentDTO` the read-only view returned to callers. Validation messages
are part of the HTTP contract: the 400 response maps each failing field
to exactly one of them.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

MIN_AGE = 17
# integer columns and path ids are bounded to a signed 32-bit range
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class StudentCreationIn(BaseModel):
    """Payload for creating a student."""
    # defaults are validated too, so an absent field reaches the validators
    name: Optional[str] = Field(default=None, validate_default=True, examples=["Andy"])
    age: Optional[int] = Field(default=None, validate_default=True, examples=[22])

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: Optional[str]) -> str:
        if not v:
            raise PydanticCustomError("not_empty", "name must not be empty")
        return v

    @field_validator("age")
    @classmethod
    def age_present_and_adult(cls, v: Optional[int]) -> int:
        if v is None:
            raise PydanticCustomError("not_null", "age must not be null")
        if v < MIN_AGE:
            raise PydanticCustomError(
                "min_age",
                "age cannot be less than {min_age} years old",
                {"min_age": MIN_AGE},
            )
        if v > INT32_MAX:
            raise PydanticCustomError(
                "max_age",
                "age must be less than or equal to {max_age}",
                {"max_age": INT32_MAX},
            )
        return v


class StudentDTO(BaseModel):
    """Read-only projection of a `Student` returned by the API."""
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    age: int
