"""Application exceptions."""


class AppError(Exception):
    """Base exception for application errors."""


class ModelError(AppError):
    """Base exception for model/database operations."""


class RecordNotFoundError(ModelError):
    """Raised when a record is not found in the database."""

    def __init__(self, model_name: str, record_id: int):
        self.model_name = model_name
        self.record_id = record_id
        super().__init__(f"{model_name} with id={record_id} not found")


class DuplicateRecordError(ModelError):
    """Raised when a record clashes with an existing unique value."""

    def __init__(self, model_name: str, detail: str):
        self.model_name = model_name
        super().__init__(detail)


class DatabaseConnectionError(ModelError):
    """Raised when a database operation fails."""


class InvalidFilterError(ModelError):
    """Raised when invalid filter is provided."""


class TeacherValidationError(AppError):
    """Raised when a teacher payload is missing or inconsistent.

    Attributes:
        field: Name of the offending payload field, if any.
    """

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)
