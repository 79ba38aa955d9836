from datetime import date, datetime
from typing import Any, Dict, List, Union

from pydantic import ValidationError as PydanticValidationError

from condo_portal.models.errors import FieldError


def format_display_date(value: Union[date, datetime]) -> str:
    """Format a date the way the tracker displays it, e.g. "April 15, 2025".

    Args:
        value: Date or datetime to format

    Returns:
        Full month name, day without padding and four-digit year
    """
    return f"{value:%B} {value.day}, {value.year}"


def collect_field_errors(
    exc: PydanticValidationError, messages: Dict[str, str]
) -> List[FieldError]:
    """Convert a pydantic validation error into one FieldError per field.

    Args:
        exc: The pydantic error raised while validating a request body
        messages: Resident-facing message to use for each field name

    Returns:
        Field errors in the order the fields failed, one entry per field
    """
    errors: List[FieldError] = []
    seen = set()
    for error in exc.errors():
        loc = error.get("loc") or ()
        field = str(loc[0]) if loc else "body"
        if field in seen:
            continue
        seen.add(field)
        errors.append(
            FieldError(field=field, message=messages.get(field, error.get("msg", "Invalid value")))
        )
    return errors


def is_blank(value: Any) -> bool:
    """Return True for None and for strings that are empty once stripped."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()
