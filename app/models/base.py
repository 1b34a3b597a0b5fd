"""Base model class shared by all tables."""

from typing import Any, Dict

from sqlalchemy import inspect

from app.utils.db import Base


class BaseModel(Base):
    """Abstract base class for SQLAlchemy models.

    Every concrete model maps its primary key to an ``id`` attribute, whatever
    the underlying column is called, so services can address records
    uniformly.

    Usage:
        class Course(BaseModel):
            __tablename__ = "courses"

            id: Mapped[int] = mapped_column("CourseId", Integer, primary_key=True)
            course_name: Mapped[str] = mapped_column("CourseName", String(255))
    """

    __abstract__ = True

    def to_dict(self) -> Dict[str, Any]:
        """Convert model instance to a dictionary keyed by attribute name.

        Returns:
            Dictionary of mapped column attributes
        """
        return {
            attr.key: getattr(self, attr.key)
            for attr in inspect(self).mapper.column_attrs
        }

    def __repr__(self) -> str:
        """String representation of the model."""
        attrs = ", ".join(
            f"{key}={repr(value)}"
            for key, value in self.to_dict().items()
            if key != "id"
        )
        return f"{self.__class__.__name__}(id={self.id}, {attrs})"
