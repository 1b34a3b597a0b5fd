"""Teacher schemas for API request/response models.

Field aliases keep the camelCase JSON contract of the school API
(``teacherFName``, ``hireDate``...); Python code uses the snake_case names.
"""

from datetime import date
from decimal import Decimal
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from app.models.teacher import Teacher


class TeacherPayload(BaseModel):
    """Schema for creating or updating a teacher.

    Every field is optional at the schema level: required-field checks are
    done by the service so that both the API and the HTML forms report the
    same message naming the missing field.

    Attributes:
        teacher_id: Teacher ID, must match the path ID on update.
        first_name: First name.
        last_name: Last name.
        employee_number: Unique employee number.
        hire_date: Hire date.
        salary: Salary, accepts a number or a decimal string.
    """

    teacher_id: Optional[int] = Field(default=None, alias="teacherId")
    first_name: Optional[str] = Field(
        default=None, alias="teacherFName", max_length=255
    )
    last_name: Optional[str] = Field(
        default=None, alias="teacherLName", max_length=255
    )
    employee_number: Optional[str] = Field(
        default=None, alias="employeeNumber", max_length=32
    )
    hire_date: Optional[date] = Field(default=None, alias="hireDate")
    salary: Optional[Decimal] = Field(
        default=None, ge=0, max_digits=10, decimal_places=2
    )

    model_config = {"populate_by_name": True}

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        """Treat blank strings (e.g. empty form inputs) as missing values."""
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value


class TeacherResponse(BaseModel):
    """Response schema for teacher.

    Attributes:
        teacher_id: Teacher ID.
        first_name: First name.
        last_name: Last name.
        employee_number: Employee number.
        hire_date: Hire date.
        salary: Salary, serialized as a decimal string.
        course_names: Names of the courses taught, in course order.
    """

    teacher_id: int = Field(alias="teacherId")
    first_name: str = Field(alias="teacherFName")
    last_name: str = Field(alias="teacherLName")
    employee_number: str = Field(alias="employeeNumber")
    hire_date: date = Field(alias="hireDate")
    salary: Decimal
    course_names: List[str] = Field(default_factory=list, alias="courseNames")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_teacher(
        cls, teacher: Teacher, include_courses: bool = False
    ) -> "TeacherResponse":
        """Build a response from a Teacher model.

        Args:
            teacher: Teacher instance. Its courses must already be loaded
                when ``include_courses`` is set.
            include_courses: Whether to fill ``course_names``.

        Returns:
            TeacherResponse instance.
        """
        course_names = (
            [course.course_name for course in teacher.courses]
            if include_courses
            else []
        )
        return cls(
            teacher_id=teacher.id,
            first_name=teacher.first_name,
            last_name=teacher.last_name,
            employee_number=teacher.employee_number,
            hire_date=teacher.hire_date,
            salary=teacher.salary,
            course_names=course_names,
        )


class MessageResponse(BaseModel):
    """Response schema for successful mutations."""

    message: str
    teacher_id: Optional[int] = Field(default=None, alias="teacherId")

    model_config = {"populate_by_name": True}
