"""Pytest configuration and shared fixtures."""

import os

# Point the app at an in-memory database before any app module is imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["RUN_MIGRATIONS"] = "False"
os.environ.setdefault("API_TITLE", "School Teachers Test")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from datetime import date  # noqa: E402
from decimal import Decimal  # noqa: E402
from typing import AsyncGenerator, Sequence  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

import app.models  # noqa: E402,F401
from app.application import create_app  # noqa: E402
from app.models.course import Course  # noqa: E402
from app.models.teacher import Teacher  # noqa: E402
from app.utils.db import (  # noqa: E402
    Base,
    enable_sqlite_foreign_keys,
    get_db_session,
)


@pytest.fixture
async def engine():
    """Create an in-memory SQLite engine shared by every session of a test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker:
    """Session factory bound to the test engine."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Database session for direct service and model tests."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def app(session_factory):
    """Create FastAPI application wired to the test database."""
    app = create_app()

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client for the application (lifespan is not run)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture
def make_teacher(session_factory):
    """Insert a teacher, and optionally its courses, directly in the database."""

    async def _make_teacher(
        employee_number: str = "T378",
        first_name: str = "Alexander",
        last_name: str = "Bennett",
        hire_date: date = date(2016, 8, 5),
        salary: Decimal = Decimal("55.30"),
        courses: Sequence[str] = (),
    ) -> Teacher:
        async with session_factory() as session:
            teacher = Teacher(
                first_name=first_name,
                last_name=last_name,
                employee_number=employee_number,
                hire_date=hire_date,
                salary=salary,
            )
            session.add(teacher)
            await session.flush()
            for name in courses:
                session.add(Course(course_name=name, teacher_id=teacher.id))
            await session.commit()
            return teacher

    return _make_teacher


@pytest.fixture
def count_teachers(session_factory):
    """Count rows in the teachers table using a fresh session."""
    from sqlalchemy import func, select

    async def _count() -> int:
        async with session_factory() as session:
            result = await session.execute(select(func.count(Teacher.id)))
            return result.scalar_one()

    return _count
