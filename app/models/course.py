"""Course model for courses taught by teachers."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from app.models.teacher import Teacher

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import BaseModel


class Course(BaseModel):
    """Course model, read-only from the service's point of view.

    Each course belongs to at most one teacher. Removing the teacher leaves
    the course in place with no teacher assigned.

    Attributes:
        id: Primary key (``CourseId``)
        course_code: Short catalogue code (e.g. "http5101")
        teacher_id: Foreign key to teachers table
        course_name: Display name of the course
    """

    __tablename__ = "courses"

    id: Mapped[int] = mapped_column(
        "CourseId", Integer, primary_key=True, autoincrement=True
    )
    course_code: Mapped[Optional[str]] = mapped_column(
        "CourseCode", String(32), nullable=True
    )
    teacher_id: Mapped[Optional[int]] = mapped_column(
        "TeacherId",
        Integer,
        ForeignKey("teachers.TeacherId", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    course_name: Mapped[str] = mapped_column("CourseName", String(255), nullable=False)

    teacher: Mapped[Optional["Teacher"]] = relationship(back_populates="courses")
