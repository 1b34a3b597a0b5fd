"""Base service class with transaction management for database operations."""

import logging
from typing import Any, Generic, Optional, TypeVar

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import DBAPIError, IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import (
    DatabaseConnectionError,
    InvalidFilterError,
    RecordNotFoundError,
)
from app.models.base import BaseModel

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class BaseService(Generic[T]):
    """Base service class managing database transactions for model operations.

    - Write operations (create, update, delete) commit on success
    - Read operations (get_by_id, count) don't commit
    - All write errors trigger a rollback and surface as
      DatabaseConnectionError, chained to the underlying SQLAlchemy error

    Usage:
        class CourseService(BaseService[Course]):
            model = Course

        service = CourseService(db_session)
        course = await service.create(course_name="Web Development")

    Attributes:
        db: Database session for operations
        model: Model class this service manages
    """

    model: type[T]

    def __init__(self, db: AsyncSession) -> None:
        """Initialize service with database session.

        Args:
            db: Database session for operations
        """
        self.db = db

    def _check_attributes(self, keys: Any) -> None:
        for key in keys:
            if not hasattr(self.model, key):
                raise InvalidFilterError(
                    f"Invalid attribute '{key}' for model {self.model.__name__}"
                )

    async def create(self, **kwargs: Any) -> T:
        """Create a new record and commit transaction.

        Args:
            **kwargs: Model attributes

        Returns:
            Created model instance

        Raises:
            DatabaseConnectionError: If database operation fails
        """
        try:
            instance = self.model(**kwargs)
            self.db.add(instance)
            await self.db.flush()
            await self.db.refresh(instance)
            await self.db.commit()
            logger.debug(
                f"Created {self.model.__name__}",
                extra={"model": self.model.__name__, "id": instance.id},
            )
            return instance
        except IntegrityError as e:
            await self.db.rollback()
            # Callers usually turn this into a conflict response
            logger.warning(
                f"Constraint violation creating {self.model.__name__}",
                extra={"model": self.model.__name__, "error": str(e.orig)},
            )
            raise DatabaseConnectionError(
                f"Integrity constraint violation: {str(e)}"
            ) from e
        except (DBAPIError, SQLAlchemyError) as e:
            await self.db.rollback()
            logger.error(
                f"Failed to create {self.model.__name__}",
                extra={"model": self.model.__name__, "error": str(e)},
                exc_info=True,
            )
            raise DatabaseConnectionError(
                f"Database error during create: {str(e)}"
            ) from e

    async def get_by_id(self, record_id: int) -> Optional[T]:
        """Retrieve a record by its primary key ID.

        Args:
            record_id: Primary key ID

        Returns:
            Model instance or None if not found

        Raises:
            DatabaseConnectionError: If database operation fails
        """
        try:
            result = await self.db.execute(
                select(self.model).where(self.model.id == record_id)
            )
            return result.scalar_one_or_none()
        except (DBAPIError, SQLAlchemyError) as e:
            logger.error(
                f"Failed to get {self.model.__name__} by id",
                extra={"model": self.model.__name__, "id": record_id, "error": str(e)},
                exc_info=True,
            )
            raise DatabaseConnectionError(f"Database error during get: {str(e)}") from e

    async def get_by_id_or_fail(self, record_id: int) -> T:
        """Retrieve a record by ID or raise exception if not found.

        Args:
            record_id: Primary key ID

        Returns:
            Model instance

        Raises:
            RecordNotFoundError: If record not found
            DatabaseConnectionError: If database operation fails
        """
        record = await self.get_by_id(record_id)
        if record is None:
            raise RecordNotFoundError(self.model.__name__, record_id)
        return record

    async def count(self, **filters: Any) -> int:
        """Count records matching the given equality filters.

        Args:
            **filters: Attribute-value pairs to filter by

        Returns:
            Number of matching records

        Raises:
            InvalidFilterError: If invalid filter key provided
            DatabaseConnectionError: If database operation fails
        """
        self._check_attributes(filters)
        try:
            query = select(func.count(self.model.id))
            for key, value in filters.items():
                query = query.where(getattr(self.model, key) == value)
            result = await self.db.execute(query)
            return result.scalar_one()
        except (DBAPIError, SQLAlchemyError) as e:
            logger.error(
                f"Failed to count {self.model.__name__}",
                extra={
                    "model": self.model.__name__,
                    "filters": filters,
                    "error": str(e),
                },
                exc_info=True,
            )
            raise DatabaseConnectionError(
                f"Database error during count: {str(e)}"
            ) from e

    async def update(self, record_id: int, **kwargs: Any) -> T:
        """Overwrite the given attributes of a record and commit transaction.

        Issues a single UPDATE statement; zero affected rows means the record
        does not exist.

        Args:
            record_id: Primary key ID of record to update
            **kwargs: Attributes to update

        Returns:
            Updated model instance

        Raises:
            RecordNotFoundError: If record not found
            InvalidFilterError: If invalid attribute provided
            DatabaseConnectionError: If database operation fails
        """
        self._check_attributes(kwargs)
        try:
            values = {getattr(self.model, key): value for key, value in kwargs.items()}
            stmt = update(self.model).where(self.model.id == record_id).values(values)
            result = await self.db.execute(stmt)
            if result.rowcount == 0:
                raise RecordNotFoundError(self.model.__name__, record_id)
            await self.db.commit()
            record = await self.get_by_id_or_fail(record_id)
            logger.debug(
                f"Updated {self.model.__name__}",
                extra={"model": self.model.__name__, "id": record_id},
            )
            return record
        except RecordNotFoundError:
            await self.db.rollback()
            raise
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(
                f"Constraint violation updating {self.model.__name__}",
                extra={
                    "model": self.model.__name__,
                    "id": record_id,
                    "error": str(e.orig),
                },
            )
            raise DatabaseConnectionError(
                f"Integrity constraint violation: {str(e)}"
            ) from e
        except (DBAPIError, SQLAlchemyError) as e:
            await self.db.rollback()
            logger.error(
                f"Failed to update {self.model.__name__}",
                extra={
                    "model": self.model.__name__,
                    "id": record_id,
                    "error": str(e),
                },
                exc_info=True,
            )
            raise DatabaseConnectionError(
                f"Database error during update: {str(e)}"
            ) from e

    async def delete(self, record_id: int) -> None:
        """Delete a record and commit transaction.

        Args:
            record_id: Primary key ID of record to delete

        Raises:
            RecordNotFoundError: If record not found
            DatabaseConnectionError: If database operation fails
        """
        try:
            result = await self.db.execute(
                delete(self.model).where(self.model.id == record_id)
            )
            if result.rowcount == 0:
                raise RecordNotFoundError(self.model.__name__, record_id)
            await self.db.commit()
            logger.debug(
                f"Deleted {self.model.__name__}",
                extra={"model": self.model.__name__, "id": record_id},
            )
        except RecordNotFoundError:
            await self.db.rollback()
            raise
        except (DBAPIError, SQLAlchemyError) as e:
            await self.db.rollback()
            logger.error(
                f"Failed to delete {self.model.__name__}",
                extra={
                    "model": self.model.__name__,
                    "id": record_id,
                    "error": str(e),
                },
                exc_info=True,
            )
            raise DatabaseConnectionError(
                f"Database error during delete: {str(e)}"
            ) from e
