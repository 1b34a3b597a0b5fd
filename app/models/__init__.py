"""Data models package."""

from app.exceptions import (
    DatabaseConnectionError,
    DuplicateRecordError,
    InvalidFilterError,
    ModelError,
    RecordNotFoundError,
)
from app.models.base import BaseModel
from app.models.course import Course
from app.models.teacher import Teacher

__all__ = [
    "BaseModel",
    "ModelError",
    "RecordNotFoundError",
    "DuplicateRecordError",
    "DatabaseConnectionError",
    "InvalidFilterError",
    "Course",
    "Teacher",
]
