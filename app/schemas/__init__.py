"""Pydantic schemas for API request/response models."""

from app.schemas.teacher import MessageResponse, TeacherPayload, TeacherResponse

__all__ = ["MessageResponse", "TeacherPayload", "TeacherResponse"]
