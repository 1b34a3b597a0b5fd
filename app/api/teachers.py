"""Teachers API endpoints."""

from typing import Annotated, Optional

from fastapi import APIRouter, Body, Depends, Query

from app.schemas.teacher import MessageResponse, TeacherPayload, TeacherResponse
from app.services.teacher_service import TeacherService
from app.utils.api_helpers import OptionalDate
from app.utils.dependencies import dependencies

router = APIRouter(
    prefix="/teacher",
    tags=["Teachers"],
)


@router.get("/GetAll")
async def list_teachers(
    start: Annotated[OptionalDate, Query(description="Hired on or after")] = None,
    end: Annotated[OptionalDate, Query(description="Hired on or before")] = None,
    include_courses: bool = Query(
        default=False,
        alias="includeCourses",
        description="Fill courseNames for every teacher",
    ),
    service: TeacherService = Depends(dependencies.teacher),
) -> list[TeacherResponse]:
    """List teachers, optionally filtered by hire date.

    The date range applies only when both ``start`` and ``end`` are given;
    blank values count as missing.
    ``courseNames`` stays empty unless ``includeCourses`` is set.

    Args:
        start: Inclusive lower bound for the hire date.
        end: Inclusive upper bound for the hire date.
        include_courses: Whether to load course names.
        service: TeacherService instance.

    Returns:
        List of teachers ordered by id.
    """
    teachers = await service.list_teachers(
        start=start, end=end, include_courses=include_courses
    )
    return [
        TeacherResponse.from_teacher(t, include_courses=include_courses)
        for t in teachers
    ]


@router.get("/GetById/{teacher_id}")
async def get_teacher(
    teacher_id: int,
    service: TeacherService = Depends(dependencies.teacher),
) -> TeacherResponse:
    """Get a teacher with the names of the courses they teach.

    Args:
        teacher_id: Teacher ID.
        service: TeacherService instance.

    Returns:
        Teacher details.

    Raises:
        RecordNotFoundError: If the teacher does not exist (404).
    """
    teacher = await service.get_teacher(teacher_id)
    return TeacherResponse.from_teacher(teacher, include_courses=True)


@router.get("/GetCourses/{teacher_id}")
async def get_courses(
    teacher_id: int,
    service: TeacherService = Depends(dependencies.teacher),
) -> list[str]:
    """List the names of the courses taught by a teacher."""
    return await service.get_courses(teacher_id)


@router.post("/Add")
async def add_teacher(
    data: Optional[TeacherPayload] = Body(default=None),
    service: TeacherService = Depends(dependencies.teacher),
) -> MessageResponse:
    """Add a new teacher.

    Args:
        data: Teacher data.
        service: TeacherService instance.

    Returns:
        Confirmation message with the new teacher ID.

    Raises:
        TeacherValidationError: If a required field is missing (400).
        DuplicateRecordError: If the employee number exists (400).
        DatabaseConnectionError: If the insert fails (400).
    """
    teacher = await service.add_teacher(data)
    return MessageResponse(message="Teacher added successfully.", teacher_id=teacher.id)


@router.put("/Update/{teacher_id}")
async def update_teacher(
    teacher_id: int,
    data: Optional[TeacherPayload] = Body(default=None),
    service: TeacherService = Depends(dependencies.teacher),
) -> MessageResponse:
    """Overwrite an existing teacher.

    Args:
        teacher_id: Teacher ID, must match ``teacherId`` in the body.
        data: Complete teacher data.
        service: TeacherService instance.

    Returns:
        Confirmation message.

    Raises:
        TeacherValidationError: If the body is missing or inconsistent (400).
        RecordNotFoundError: If the teacher does not exist (404).
    """
    await service.update_teacher(teacher_id, data)
    return MessageResponse(
        message="Teacher updated successfully.", teacher_id=teacher_id
    )


@router.delete("/Delete/{teacher_id}")
async def delete_teacher(
    teacher_id: int,
    service: TeacherService = Depends(dependencies.teacher),
) -> MessageResponse:
    """Delete a teacher.

    Raises:
        RecordNotFoundError: If the teacher does not exist (404).
    """
    await service.delete_teacher(teacher_id)
    return MessageResponse(
        message="Teacher deleted successfully.", teacher_id=teacher_id
    )
