"""Teacher service providing business logic for Teacher model operations.

Implements the six teacher operations used by both the JSON API and the
HTML pages: list, get, list courses, add, update and delete.
"""

import logging
from datetime import date
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import DBAPIError, IntegrityError, SQLAlchemyError
from sqlalchemy.orm import selectinload

from app.exceptions import (
    DatabaseConnectionError,
    DuplicateRecordError,
    RecordNotFoundError,
    TeacherValidationError,
)
from app.models.course import Course
from app.models.teacher import Teacher
from app.schemas.teacher import TeacherPayload
from app.services.base import BaseService

logger = logging.getLogger(__name__)

# Default value of an unset date in the legacy clients
ZERO_DATE = date.min

# (attribute, message) in the order they are checked
REQUIRED_FIELDS = (
    ("first_name", "Teacher first name is required."),
    ("last_name", "Teacher last name is required."),
    ("hire_date", "A valid hire date is required."),
    ("salary", "Salary is required."),
    ("employee_number", "Employee number is required."),
)


class TeacherService(BaseService[Teacher]):
    """Service for managing Teacher entities.

    Operations:
    - list_teachers(start, end, include_courses): Teachers, optionally
      filtered by an inclusive hire date range
    - get_teacher(id): Teacher with its courses, or RecordNotFoundError
    - get_courses(id): Course names taught by a teacher
    - add_teacher(payload): Validate, check employee number, insert
    - update_teacher(id, payload): Full-row overwrite by id
    - delete_teacher(id): Delete by id

    Usage:
        service = TeacherService(db_session)

        teacher = await service.add_teacher(
            TeacherPayload(
                first_name="Ana",
                last_name="Lee",
                employee_number="E100",
                hire_date=date(2020, 1, 10),
                salary=Decimal("50000"),
            )
        )
        courses = await service.get_courses(teacher.id)

    Attributes:
        model: Teacher model class
        db: Database session for operations
    """

    model = Teacher

    async def list_teachers(
        self,
        start: Optional[date] = None,
        end: Optional[date] = None,
        include_courses: bool = False,
    ) -> List[Teacher]:
        """List teachers ordered by id.

        The hire date filter applies only when both bounds are given; a
        single bound is ignored. Courses are not loaded unless requested.

        Args:
            start: Inclusive lower bound for the hire date.
            end: Inclusive upper bound for the hire date.
            include_courses: Eager-load each teacher's courses.

        Returns:
            List of Teacher instances.

        Raises:
            DatabaseConnectionError: If database operation fails.
        """
        try:
            stmt = select(Teacher).order_by(Teacher.id)
            if start is not None and end is not None:
                stmt = stmt.where(Teacher.hire_date.between(start, end))
            if include_courses:
                stmt = stmt.options(selectinload(Teacher.courses))
            result = await self.db.execute(stmt)
            return list(result.scalars().unique().all())
        except (DBAPIError, SQLAlchemyError) as e:
            logger.error(
                "Failed to list teachers",
                extra={"start": start, "end": end, "error": str(e)},
                exc_info=True,
            )
            raise DatabaseConnectionError(
                f"Database error during list_teachers: {str(e)}"
            ) from e

    async def get_teacher(self, teacher_id: int) -> Teacher:
        """Get a teacher together with the courses they teach.

        Args:
            teacher_id: Teacher ID.

        Returns:
            Teacher instance with ``courses`` loaded in course id order.

        Raises:
            RecordNotFoundError: If no teacher has this id.
            DatabaseConnectionError: If database operation fails.
        """
        try:
            stmt = (
                select(Teacher)
                .where(Teacher.id == teacher_id)
                .options(selectinload(Teacher.courses))
                .execution_options(populate_existing=True)
            )
            result = await self.db.execute(stmt)
            teacher = result.scalar_one_or_none()
        except (DBAPIError, SQLAlchemyError) as e:
            logger.error(
                "Failed to get teacher",
                extra={"id": teacher_id, "error": str(e)},
                exc_info=True,
            )
            raise DatabaseConnectionError(
                f"Database error during get_teacher: {str(e)}"
            ) from e

        if teacher is None:
            raise RecordNotFoundError(Teacher.__name__, teacher_id)
        return teacher

    async def get_courses(self, teacher_id: int) -> List[str]:
        """Get the names of the courses taught by a teacher.

        Args:
            teacher_id: Teacher ID.

        Returns:
            Course names in course id order; empty if there are none.

        Raises:
            DatabaseConnectionError: If database operation fails.
        """
        try:
            stmt = (
                select(Course.course_name)
                .where(Course.teacher_id == teacher_id)
                .order_by(Course.id)
            )
            result = await self.db.execute(stmt)
            return list(result.scalars().all())
        except (DBAPIError, SQLAlchemyError) as e:
            logger.error(
                "Failed to get courses for teacher",
                extra={"id": teacher_id, "error": str(e)},
                exc_info=True,
            )
            raise DatabaseConnectionError(
                f"Database error during get_courses: {str(e)}"
            ) from e

    async def add_teacher(self, payload: Optional[TeacherPayload]) -> Teacher:
        """Validate and insert a new teacher.

        Args:
            payload: Teacher data. ``teacher_id`` is ignored.

        Returns:
            Created Teacher instance.

        Raises:
            TeacherValidationError: If payload or a required field is missing.
            DuplicateRecordError: If the employee number is already taken.
            DatabaseConnectionError: If the insert fails for another reason.
        """
        if payload is None:
            raise TeacherValidationError("Teacher data is required.")
        self._validate_required(payload)

        if await self._employee_number_taken(payload.employee_number):
            raise self._duplicate(payload.employee_number)

        values = payload.model_dump(exclude={"teacher_id"})
        try:
            teacher = await self.create(**values)
        except DatabaseConnectionError as e:
            # Another request may have inserted the same number since the check
            if isinstance(e.__cause__, IntegrityError) and (
                await self._employee_number_taken(payload.employee_number)
            ):
                raise self._duplicate(payload.employee_number) from e
            raise

        logger.info(
            "Teacher added",
            extra={"id": teacher.id, "employee_number": teacher.employee_number},
        )
        return teacher

    async def update_teacher(
        self, teacher_id: int, payload: Optional[TeacherPayload]
    ) -> Teacher:
        """Overwrite every field of an existing teacher.

        Args:
            teacher_id: ID of the teacher to update.
            payload: New teacher data; its ``teacher_id`` must equal ``teacher_id``.

        Returns:
            Updated Teacher instance.

        Raises:
            TeacherValidationError: If payload is missing, the ids disagree or a
                required field is missing.
            RecordNotFoundError: If no teacher has this id.
            DuplicateRecordError: If the employee number belongs to another teacher.
            DatabaseConnectionError: If the update fails for another reason.
        """
        if payload is None or payload.teacher_id != teacher_id:
            raise TeacherValidationError(
                "Invalid teacher data or mismatched ID.", field="teacher_id"
            )
        self._validate_required(payload)

        values = payload.model_dump(exclude={"teacher_id"})
        try:
            teacher = await self.update(teacher_id, **values)
        except DatabaseConnectionError as e:
            if isinstance(e.__cause__, IntegrityError):
                raise self._duplicate(payload.employee_number) from e
            raise

        logger.info("Teacher updated", extra={"id": teacher_id})
        return teacher

    async def delete_teacher(self, teacher_id: int) -> None:
        """Delete a teacher by id.

        Args:
            teacher_id: ID of the teacher to delete.

        Raises:
            RecordNotFoundError: If no teacher has this id.
            DatabaseConnectionError: If database operation fails.
        """
        await self.delete(teacher_id)
        logger.info("Teacher deleted", extra={"id": teacher_id})

    @staticmethod
    def _validate_required(payload: TeacherPayload) -> None:
        for field, message in REQUIRED_FIELDS:
            if getattr(payload, field) is None:
                raise TeacherValidationError(message, field=field)
        if payload.hire_date == ZERO_DATE:
            raise TeacherValidationError(
                "A valid hire date is required.", field="hire_date"
            )

    async def _employee_number_taken(self, employee_number: str) -> bool:
        return await self.count(employee_number=employee_number) > 0

    @staticmethod
    def _duplicate(employee_number: str) -> DuplicateRecordError:
        return DuplicateRecordError(
            Teacher.__name__,
            f"Teacher with employee number {employee_number} already exists.",
        )
