"""Server-rendered pages for browsing and editing teachers."""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, Form, Query, Request, Response, status
from fastapi.responses import RedirectResponse
from pydantic import ValidationError

from app.exceptions import (
    DatabaseConnectionError,
    DuplicateRecordError,
    RecordNotFoundError,
    TeacherValidationError,
)
from app.models.teacher import Teacher
from app.schemas.teacher import TeacherPayload
from app.services.teacher_service import TeacherService
from app.utils.api_helpers import parse_date_param, validation_message
from app.utils.dependencies import dependencies
from app.utils.templates import templates

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/teacher", tags=["pages"])

FORM_FIELDS = {
    "teacherId": "teacher_id",
    "teacherFName": "first_name",
    "teacherLName": "last_name",
    "employeeNumber": "employee_number",
    "hireDate": "hire_date",
    "salary": "salary",
}


def _not_found(request: Request, exc: RecordNotFoundError) -> Response:
    return templates.TemplateResponse(
        request=request,
        name="404.html",
        context={"message": str(exc)},
        status_code=status.HTTP_404_NOT_FOUND,
    )


def _form_from_teacher(teacher: Teacher) -> dict[str, Any]:
    return {
        "teacher_id": teacher.id,
        "first_name": teacher.first_name,
        "last_name": teacher.last_name,
        "employee_number": teacher.employee_number,
        "hire_date": teacher.hire_date.isoformat(),
        "salary": str(teacher.salary),
    }


async def _read_form(request: Request) -> dict[str, Any]:
    """Collect submitted teacher fields keyed by attribute name."""
    form = await request.form()
    return {
        attr: form.get(name)
        for name, attr in FORM_FIELDS.items()
        if form.get(name) is not None
    }


def _render_form(
    request: Request, name: str, form: dict[str, Any], error: str
) -> Response:
    return templates.TemplateResponse(
        request=request,
        name=name,
        context={"form": form, "error": error},
        status_code=status.HTTP_400_BAD_REQUEST,
    )


@router.get("/list")
async def teacher_list(
    request: Request,
    start: Optional[str] = Query(default=None),
    end: Optional[str] = Query(default=None),
    service: TeacherService = Depends(dependencies.teacher),
) -> Response:
    """Display all teachers, optionally within a hire date range.

    Args:
        request: FastAPI request object.
        start: Hired on or after (ISO date, blank ignored).
        end: Hired on or before (ISO date, blank ignored).
        service: TeacherService instance.

    Returns:
        Rendered list template.
    """
    start_date = parse_date_param(start)
    end_date = parse_date_param(end)
    teachers = await service.list_teachers(start=start_date, end=end_date)
    return templates.TemplateResponse(
        request=request,
        name="teacher/list.html",
        context={"teachers": teachers, "start": start_date, "end": end_date},
    )


@router.get("/show/{teacher_id}")
async def teacher_show(
    request: Request,
    teacher_id: int,
    service: TeacherService = Depends(dependencies.teacher),
) -> Response:
    """Display one teacher with their courses."""
    try:
        teacher = await service.get_teacher(teacher_id)
    except RecordNotFoundError as e:
        return _not_found(request, e)
    return templates.TemplateResponse(
        request=request,
        name="teacher/show.html",
        context={"teacher": teacher},
    )


@router.get("/new")
async def teacher_new(request: Request) -> Response:
    """Display an empty form for a new teacher."""
    return templates.TemplateResponse(
        request=request,
        name="teacher/new.html",
        context={"form": {}, "error": None},
    )


@router.post("/add", response_model=None)
async def teacher_add(
    request: Request,
    service: TeacherService = Depends(dependencies.teacher),
) -> Response:
    """Create a teacher from the submitted form.

    Redirects to the list on success, re-renders the form with the error
    message otherwise.
    """
    form = await _read_form(request)
    try:
        payload = TeacherPayload.model_validate(form)
        await service.add_teacher(payload)
    except ValidationError as e:
        return _render_form(request, "teacher/new.html", form, validation_message(e))
    except (
        TeacherValidationError,
        DuplicateRecordError,
        DatabaseConnectionError,
    ) as e:
        logger.info("Teacher form rejected", extra={"reason": str(e)})
        return _render_form(request, "teacher/new.html", form, str(e))

    return RedirectResponse(url="/teacher/list", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/edit/{teacher_id}")
async def teacher_edit(
    request: Request,
    teacher_id: int,
    service: TeacherService = Depends(dependencies.teacher),
) -> Response:
    """Display the edit form prefilled with the teacher's data."""
    try:
        teacher = await service.get_teacher(teacher_id)
    except RecordNotFoundError as e:
        return _not_found(request, e)
    return templates.TemplateResponse(
        request=request,
        name="teacher/edit.html",
        context={"form": _form_from_teacher(teacher), "error": None},
    )


@router.post("/update", response_model=None)
async def teacher_update(
    request: Request,
    service: TeacherService = Depends(dependencies.teacher),
) -> Response:
    """Save the edit form.

    Redirects to the teacher page on success, shows the 404 page when the
    teacher no longer exists, re-renders the form otherwise.
    """
    form = await _read_form(request)
    try:
        payload = TeacherPayload.model_validate(form)
        teacher_id = payload.teacher_id
        if teacher_id is None:
            raise TeacherValidationError(
                "Invalid teacher data or mismatched ID.", field="teacher_id"
            )
        await service.update_teacher(teacher_id, payload)
    except RecordNotFoundError as e:
        return _not_found(request, e)
    except ValidationError as e:
        return _render_form(request, "teacher/edit.html", form, validation_message(e))
    except (
        TeacherValidationError,
        DuplicateRecordError,
        DatabaseConnectionError,
    ) as e:
        logger.info("Teacher form rejected", extra={"reason": str(e)})
        return _render_form(request, "teacher/edit.html", form, str(e))

    return RedirectResponse(
        url=f"/teacher/show/{teacher_id}", status_code=status.HTTP_303_SEE_OTHER
    )


@router.get("/delete-confirm/{teacher_id}")
async def teacher_delete_confirm(
    request: Request,
    teacher_id: int,
    service: TeacherService = Depends(dependencies.teacher),
) -> Response:
    """Ask for confirmation before deleting a teacher."""
    try:
        teacher = await service.get_teacher(teacher_id)
    except RecordNotFoundError as e:
        return _not_found(request, e)
    return templates.TemplateResponse(
        request=request,
        name="teacher/delete_confirm.html",
        context={"teacher": teacher},
    )


@router.post("/delete", response_model=None)
async def teacher_delete(
    request: Request,
    teacher_id: int = Form(..., alias="teacherId"),
    service: TeacherService = Depends(dependencies.teacher),
) -> Response:
    """Delete a teacher and go back to the list."""
    try:
        await service.delete_teacher(teacher_id)
    except RecordNotFoundError as e:
        return _not_found(request, e)
    return RedirectResponse(url="/teacher/list", status_code=status.HTTP_303_SEE_OTHER)
