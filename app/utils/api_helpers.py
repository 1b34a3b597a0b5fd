"""Helper functions for API and page routes."""

from datetime import date
from typing import Annotated, Any, Optional

from pydantic import BeforeValidator, ValidationError


def blank_to_none(value: Any) -> Any:
    """Turn an empty or whitespace-only string into None."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


# Query date that treats "?start=" like an omitted parameter; other
# malformed values still fail validation
OptionalDate = Annotated[Optional[date], BeforeValidator(blank_to_none)]


def parse_date_param(value: Optional[str]) -> Optional[date]:
    """Parse an ISO date coming from an HTML form or query string.

    Browsers submit empty inputs as empty strings, so blank or malformed
    values are treated as absent instead of failing the request.

    Args:
        value: Raw parameter value.

    Returns:
        Parsed date or None.
    """
    if not value or not value.strip():
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        return None


def validation_message(exc: ValidationError) -> str:
    """Build a single human-readable message from a pydantic ValidationError.

    Args:
        exc: Validation error raised while parsing form data.

    Returns:
        Message such as "salary: Input should be greater than or equal to 0".
    """
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)
