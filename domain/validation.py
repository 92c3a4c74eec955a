"""
Input checks shared by model validators and aggregate mutators.

Each helper raises WorkoutValidationError. Because that error is also a
ValueError, pydantic turns it into a field error when a helper runs inside
a validator, while mutators let it propagate as-is.
"""

from enum import Enum
from typing import Any, List, Optional, Type, TypeVar

from pydantic import ValidationError

from domain.exceptions import WorkoutValidationError

E = TypeVar("E", bound=Enum)
T = TypeVar("T")

WORKOUT_NAME_MAX_LENGTH = 200
WORKOUT_DESCRIPTION_MAX_LENGTH = 1000
PHASE_NAME_MAX_LENGTH = 100
PHASE_DESCRIPTION_MAX_LENGTH = 500
EXERCISE_NAME_MAX_LENGTH = 200
EXERCISE_NOTES_MAX_LENGTH = 500
SEARCH_TERM_MAX_LENGTH = 100

MIN_DURATION_MINUTES = 1
MAX_DURATION_MINUTES = 300  # 5 hours


def require_text(value: Optional[str], field_name: str, max_length: int) -> str:
    """
    Trim a required text value and check its length.

    Args:
        value: Raw input.
        field_name: Name used in the error message.
        max_length: Upper bound after trimming.

    Returns:
        The trimmed value.
    """
    if value is None or not str(value).strip():
        raise WorkoutValidationError(f"{field_name} is required")
    trimmed = str(value).strip()
    if len(trimmed) > max_length:
        raise WorkoutValidationError(
            f"{field_name} cannot exceed {max_length} characters"
        )
    return trimmed


def optional_text(value: Optional[str], field_name: str, max_length: int) -> Optional[str]:
    """Trim an optional text value; blank input becomes None."""
    if value is None:
        return None
    trimmed = str(value).strip()
    if not trimmed:
        return None
    if len(trimmed) > max_length:
        raise WorkoutValidationError(
            f"{field_name} cannot exceed {max_length} characters"
        )
    return trimmed


def require_duration_minutes(value: int, field_name: str = "Duration") -> int:
    """Check a duration override lies within the allowed bounds."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise WorkoutValidationError(f"{field_name} must be a whole number of minutes")
    if value < MIN_DURATION_MINUTES:
        raise WorkoutValidationError(f"{field_name} must be at least {MIN_DURATION_MINUTES} minute")
    if value > MAX_DURATION_MINUTES:
        raise WorkoutValidationError(
            f"{field_name} cannot exceed {MAX_DURATION_MINUTES} minutes"
        )
    return value


def clamp_duration_minutes(value: int) -> int:
    """Clamp a derived duration into the storable range."""
    return max(MIN_DURATION_MINUTES, min(MAX_DURATION_MINUTES, value))


def from_pydantic_error(message: str, error: ValidationError) -> WorkoutValidationError:
    """Convert a pydantic ValidationError into a WorkoutValidationError."""
    details = [
        f"{'.'.join(str(loc) for loc in err['loc']) or 'model'}: {err['msg']}"
        for err in error.errors()
    ]
    return WorkoutValidationError(message, errors=details)


def coerce_enum(enum_cls: Type[E], value: Any, field_name: str) -> E:
    """Convert a raw value to enum_cls, reporting unknown values as validation errors."""
    try:
        return enum_cls(value)
    except ValueError as e:
        allowed = ", ".join(member.value for member in enum_cls)
        raise WorkoutValidationError(
            f"Invalid {field_name} '{value}'. Must be one of: {allowed}"
        ) from e


def dedupe(values: List[T]) -> List[T]:
    """Drop repeated values while preserving order."""
    seen = set()
    unique = []
    for value in values:
        if value not in seen:
            seen.add(value)
            unique.append(value)
    return unique
