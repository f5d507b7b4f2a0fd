"""SQLModel data models.

`Student` is the persisted entity. Ids are assigned by the database and,
thanks to SQLite's AUTOINCREMENT, are never handed out twice even after
the row holding the highest id is deleted.
"""

from typing import Optional

from sqlmodel import Field, SQLModel


class Student(SQLModel, table=True):
    """A persisted student.

    Fields:
    - `id`: primary key, `None` until the repository saves the row
    - `name`: non-empty display name
    - `age`: age in years, at least 17 when created
    """
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False)
    age: int = Field(nullable=False)
