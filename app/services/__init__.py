"""Business logic services package."""

from app.services.base import BaseService
from app.services.teacher_service import TeacherService

__all__ = ["BaseService", "TeacherService"]
