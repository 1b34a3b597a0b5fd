"""Integration tests for the teacher API endpoints."""

from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import status
from httpx import AsyncClient
from sqlalchemy import select

from app.exceptions import DatabaseConnectionError
from app.models.course import Course
from app.utils.dependencies import dependencies

ANA = {
    "teacherFName": "Ana",
    "teacherLName": "Lee",
    "hireDate": "2020-01-10",
    "salary": "50000",
    "employeeNumber": "E100",
}


class TestTeacherLifecycle:
    """End-to-end flow through every endpoint."""

    @pytest.mark.asyncio
    async def test_add_list_get_delete(self, client: AsyncClient):
        response = await client.post("/api/teacher/Add", json=ANA)
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["message"] == "Teacher added successfully."
        teacher_id = response.json()["teacherId"]

        response = await client.get("/api/teacher/GetAll")
        assert response.status_code == status.HTTP_200_OK
        assert [t["teacherId"] for t in response.json()] == [teacher_id]

        response = await client.get(f"/api/teacher/GetById/{teacher_id}")
        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["teacherFName"] == "Ana"
        assert body["teacherLName"] == "Lee"
        assert body["hireDate"] == "2020-01-10"
        assert Decimal(body["salary"]) == Decimal("50000")
        assert body["employeeNumber"] == "E100"
        assert body["courseNames"] == []

        response = await client.delete(f"/api/teacher/Delete/{teacher_id}")
        assert response.status_code == status.HTTP_200_OK

        response = await client.get(f"/api/teacher/GetById/{teacher_id}")
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["error"] == "Not Found"
        assert response.json()["record_id"] == teacher_id


class TestGetAll:
    @pytest.mark.asyncio
    async def test_course_names_left_empty_by_default(
        self, client: AsyncClient, make_teacher
    ):
        await make_teacher(courses=["Web Development"])

        response = await client.get("/api/teacher/GetAll")

        assert response.json()[0]["courseNames"] == []

    @pytest.mark.asyncio
    async def test_include_courses(self, client: AsyncClient, make_teacher):
        await make_teacher(courses=["Web Development", "Databases"])

        response = await client.get("/api/teacher/GetAll?includeCourses=true")

        assert response.json()[0]["courseNames"] == ["Web Development", "Databases"]

    @pytest.mark.asyncio
    async def test_filters_by_hire_date_range(self, client: AsyncClient, make_teacher):
        await make_teacher(employee_number="T1", hire_date=date(2014, 6, 10))
        await make_teacher(employee_number="T2", hire_date=date(2016, 8, 5))

        response = await client.get(
            "/api/teacher/GetAll", params={"start": "2016-01-01", "end": "2016-12-31"}
        )

        assert [t["employeeNumber"] for t in response.json()] == ["T2"]

    @pytest.mark.asyncio
    async def test_blank_bounds_return_everyone(self, client: AsyncClient, make_teacher):
        await make_teacher(employee_number="T1", hire_date=date(2014, 6, 10))
        await make_teacher(employee_number="T2", hire_date=date(2016, 8, 5))

        response = await client.get("/api/teacher/GetAll?start=&end=")

        assert response.status_code == status.HTTP_200_OK
        assert [t["employeeNumber"] for t in response.json()] == ["T1", "T2"]

    @pytest.mark.asyncio
    async def test_single_bound_is_ignored(self, client: AsyncClient, make_teacher):
        await make_teacher(employee_number="T1", hire_date=date(2014, 6, 10))
        await make_teacher(employee_number="T2", hire_date=date(2016, 8, 5))

        response = await client.get("/api/teacher/GetAll?start=2016-01-01&end=")

        assert response.status_code == status.HTTP_200_OK
        assert len(response.json()) == 2

    @pytest.mark.asyncio
    async def test_malformed_date_is_rejected(self, client: AsyncClient):
        response = await client.get("/api/teacher/GetAll?start=yesterday&end=today")

        assert response.status_code == 422
        assert response.json()["error"] == "Validation Error"
        assert response.json()["details"][0]["loc"] == ["query", "start"]


class TestGetById:
    @pytest.mark.asyncio
    async def test_returns_courses_in_order(self, client: AsyncClient, make_teacher):
        teacher = await make_teacher(courses=["Math", "Physics", "Chemistry"])

        response = await client.get(f"/api/teacher/GetById/{teacher.id}")

        assert response.json()["courseNames"] == ["Math", "Physics", "Chemistry"]

    @pytest.mark.asyncio
    async def test_unknown_id(self, client: AsyncClient):
        response = await client.get("/api/teacher/GetById/4242")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["model"] == "Teacher"


class TestGetCourses:
    @pytest.mark.asyncio
    async def test_lists_course_names(self, client: AsyncClient, make_teacher):
        teacher = await make_teacher(courses=["Math", "Physics"])

        response = await client.get(f"/api/teacher/GetCourses/{teacher.id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == ["Math", "Physics"]

    @pytest.mark.asyncio
    async def test_unknown_teacher_has_no_courses(self, client: AsyncClient):
        response = await client.get("/api/teacher/GetCourses/4242")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []


class TestAdd:
    @pytest.mark.asyncio
    async def test_duplicate_employee_number(
        self, client: AsyncClient, count_teachers
    ):
        first = await client.post("/api/teacher/Add", json=ANA)
        second = await client.post(
            "/api/teacher/Add", json={**ANA, "teacherFName": "Anna"}
        )

        assert first.status_code == status.HTTP_200_OK
        assert second.status_code == status.HTTP_400_BAD_REQUEST
        assert second.json()["error"] == "Conflict"
        assert "E100 already exists" in second.json()["message"]
        assert await count_teachers() == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "field,message",
        [
            ("teacherFName", "Teacher first name is required."),
            ("teacherLName", "Teacher last name is required."),
            ("hireDate", "A valid hire date is required."),
            ("salary", "Salary is required."),
            ("employeeNumber", "Employee number is required."),
        ],
    )
    async def test_missing_field(
        self, client: AsyncClient, count_teachers, field, message
    ):
        payload = {k: v for k, v in ANA.items() if k != field}

        response = await client.post("/api/teacher/Add", json=payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == message
        assert await count_teachers() == 0

    @pytest.mark.asyncio
    async def test_zero_hire_date(self, client: AsyncClient, count_teachers):
        response = await client.post(
            "/api/teacher/Add", json={**ANA, "hireDate": "0001-01-01T00:00:00"}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["field"] == "hire_date"
        assert await count_teachers() == 0

    @pytest.mark.asyncio
    async def test_missing_body(self, client: AsyncClient):
        response = await client.post("/api/teacher/Add")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Teacher data is required."

    @pytest.mark.asyncio
    async def test_numeric_salary_accepted(self, client: AsyncClient):
        response = await client.post("/api/teacher/Add", json={**ANA, "salary": 61.5})

        assert response.status_code == status.HTTP_200_OK

    @pytest.mark.asyncio
    async def test_database_failure_is_client_error(self, app, client: AsyncClient):
        service = MagicMock()
        service.add_teacher = AsyncMock(
            side_effect=DatabaseConnectionError("Database error during create: gone")
        )
        app.dependency_overrides[dependencies.teacher] = lambda: service

        response = await client.post("/api/teacher/Add", json=ANA)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Database error during create: gone"


class TestUpdate:
    @pytest.mark.asyncio
    async def test_overwrites_teacher(self, client: AsyncClient, make_teacher):
        teacher = await make_teacher()
        payload = {**ANA, "teacherId": teacher.id}

        response = await client.put(f"/api/teacher/Update/{teacher.id}", json=payload)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["message"] == "Teacher updated successfully."
        body = (await client.get(f"/api/teacher/GetById/{teacher.id}")).json()
        assert body["teacherFName"] == "Ana"
        assert body["employeeNumber"] == "E100"
        assert body["hireDate"] == "2020-01-10"

    @pytest.mark.asyncio
    async def test_mismatched_id(self, client: AsyncClient, make_teacher):
        teacher = await make_teacher()

        response = await client.put(
            f"/api/teacher/Update/{teacher.id}",
            json={**ANA, "teacherId": teacher.id + 1},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Invalid teacher data or mismatched ID."

    @pytest.mark.asyncio
    async def test_missing_body(self, client: AsyncClient):
        response = await client.put("/api/teacher/Update/1")

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    @pytest.mark.asyncio
    async def test_unknown_id_leaves_table_unchanged(
        self, client: AsyncClient, make_teacher
    ):
        teacher = await make_teacher()

        response = await client.put(
            "/api/teacher/Update/4242", json={**ANA, "teacherId": 4242}
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        teachers = (await client.get("/api/teacher/GetAll")).json()
        assert len(teachers) == 1
        assert teachers[0]["teacherId"] == teacher.id
        assert teachers[0]["teacherFName"] == "Alexander"

    @pytest.mark.asyncio
    async def test_duplicate_employee_number(self, client: AsyncClient, make_teacher):
        await make_teacher(employee_number="E100")
        other = await make_teacher(employee_number="E200")

        response = await client.put(
            f"/api/teacher/Update/{other.id}", json={**ANA, "teacherId": other.id}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "Conflict"


class TestDelete:
    @pytest.mark.asyncio
    async def test_delete_twice(self, client: AsyncClient, make_teacher, count_teachers):
        target = await make_teacher(employee_number="T1")
        await make_teacher(employee_number="T2")

        first = await client.delete(f"/api/teacher/Delete/{target.id}")
        second = await client.delete(f"/api/teacher/Delete/{target.id}")

        assert first.status_code == status.HTTP_200_OK
        assert first.json()["message"] == "Teacher deleted successfully."
        assert second.status_code == status.HTTP_404_NOT_FOUND
        assert await count_teachers() == 1

    @pytest.mark.asyncio
    async def test_unknown_id(self, client: AsyncClient):
        response = await client.delete("/api/teacher/Delete/4242")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio
    async def test_courses_outlive_their_teacher(
        self, client: AsyncClient, make_teacher, session_factory
    ):
        teacher = await make_teacher(courses=["Web", "DB"])

        response = await client.delete(f"/api/teacher/Delete/{teacher.id}")

        assert response.status_code == status.HTTP_200_OK
        courses = await client.get(f"/api/teacher/GetCourses/{teacher.id}")
        assert courses.json() == []
        async with session_factory() as session:
            result = await session.execute(
                select(Course.course_name, Course.teacher_id).order_by(Course.id)
            )
            assert result.all() == [("Web", None), ("DB", None)]
