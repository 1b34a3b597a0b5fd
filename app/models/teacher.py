"""Teacher model representing school staff members."""

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from app.models.course import Course

from sqlalchemy import Date, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import BaseModel


class Teacher(BaseModel):
    """Teacher model for storing staff members and their employment data.

    Column names follow the legacy school schema (``TeacherFName``,
    ``HireDate``...) so existing databases can be used as they are; the
    Python attributes use snake_case.

    Attributes:
        id: Primary key (``TeacherId``), assigned by the database
        first_name: Teacher's first name
        last_name: Teacher's last name
        employee_number: Externally assigned identifier, unique
        hire_date: Date the teacher was hired
        salary: Salary amount
        courses: Courses taught, ordered by course id

    Example:
        teacher = Teacher(
            first_name="Ana",
            last_name="Lee",
            employee_number="E100",
            hire_date=date(2020, 1, 10),
            salary=Decimal("50000"),
        )
    """

    __tablename__ = "teachers"

    id: Mapped[int] = mapped_column(
        "TeacherId", Integer, primary_key=True, autoincrement=True
    )
    first_name: Mapped[str] = mapped_column("TeacherFName", String(255), nullable=False)
    last_name: Mapped[str] = mapped_column("TeacherLName", String(255), nullable=False)
    employee_number: Mapped[str] = mapped_column(
        "EmployeeNumber", String(32), nullable=False, unique=True
    )
    hire_date: Mapped[date] = mapped_column(
        "HireDate", Date, nullable=False, index=True
    )
    salary: Mapped[Decimal] = mapped_column(
        "Salary", Numeric(10, 2, asdecimal=True), nullable=False
    )

    courses: Mapped[List["Course"]] = relationship(
        back_populates="teacher",
        order_by="Course.id",
        passive_deletes=True,
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __repr__(self) -> str:
        """String representation of the teacher."""
        return (
            f"Teacher(id={self.id}, name={self.full_name!r}, "
            f"employee_number={self.employee_number!r})"
        )
