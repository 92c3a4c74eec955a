"""
Exercise placement within a workout phase.

A placement references an exercise-catalog entry by id and keeps a snapshot
of its display name, plus workout-specific performance parameters.
"""

import uuid
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from domain.exceptions import WorkoutValidationError
from domain.validation import (
    EXERCISE_NAME_MAX_LENGTH,
    EXERCISE_NOTES_MAX_LENGTH,
    from_pydantic_error,
    optional_text,
    require_text,
)

# Fields that update_parameters() may change
PARAMETER_FIELDS = frozenset([
    "sets",
    "reps",
    "duration_seconds",
    "weight_kg",
    "distance_meters",
    "rest_seconds",
    "notes",
])


class WorkoutExercise(BaseModel):
    """
    A catalog exercise placed in a phase with its parameters.

    At least one effort parameter (sets, reps, duration or distance) must be
    present. Each parameter is optional otherwise and its meaning depends on
    the exercise: strength work uses sets/reps/weight, timed holds use
    duration, runs use distance.

    Examples:
        >>> squat = WorkoutExercise(
        ...     exercise_id="ex-squat",
        ...     exercise_name="Back Squat",
        ...     sets=5,
        ...     reps=5,
        ...     weight_kg=100,
        ...     rest_seconds=120,
        ... )
        >>> plank = WorkoutExercise(
        ...     exercise_id="ex-plank", exercise_name="Plank", duration_seconds=60
        ... )
    """

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    exercise_id: str = Field(..., min_length=1, description="Exercise catalog id")
    exercise_name: str = Field(..., description="Catalog name at the time of placement")

    sets: Optional[int] = Field(default=None, ge=1)
    reps: Optional[int] = Field(default=None, ge=1)
    duration_seconds: Optional[int] = Field(default=None, ge=1)
    weight_kg: Optional[float] = Field(default=None, gt=0)
    distance_meters: Optional[float] = Field(default=None, gt=0)
    rest_seconds: Optional[int] = Field(default=None, ge=0)

    notes: Optional[str] = Field(default=None)
    order: int = Field(default=1, ge=1, description="1-based position within the phase")

    @field_validator("exercise_name")
    @classmethod
    def validate_exercise_name(cls, v: str) -> str:
        return require_text(v, "Exercise name", EXERCISE_NAME_MAX_LENGTH)

    @field_validator("notes")
    @classmethod
    def validate_notes(cls, v: Optional[str]) -> Optional[str]:
        return optional_text(v, "Exercise notes", EXERCISE_NOTES_MAX_LENGTH)

    @model_validator(mode="after")
    def validate_effort(self) -> "WorkoutExercise":
        """Require at least one effort parameter."""
        if (
            self.sets is None
            and self.reps is None
            and self.duration_seconds is None
            and self.distance_meters is None
        ):
            raise ValueError(
                "At least one of sets, reps, duration_seconds or distance_meters is required"
            )
        return self

    # -------------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------------

    @classmethod
    def create(cls, exercise_id: str, exercise_name: str, **parameters: Any) -> "WorkoutExercise":
        """
        Build a placement, reporting bad input as WorkoutValidationError.

        Args:
            exercise_id: Catalog exercise id.
            exercise_name: Display name snapshot.
            **parameters: Any of PARAMETER_FIELDS.
        """
        _reject_unknown(parameters)
        try:
            return cls(exercise_id=exercise_id, exercise_name=exercise_name, **parameters)
        except ValidationError as e:
            raise from_pydantic_error("Invalid exercise placement", e) from e

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def is_timed(self) -> bool:
        return self.duration_seconds is not None

    @property
    def is_distance_based(self) -> bool:
        return self.distance_meters is not None

    @property
    def is_rep_based(self) -> bool:
        return self.reps is not None

    @property
    def total_reps(self) -> Optional[int]:
        """Reps across all sets, None unless both are set."""
        if self.sets is None or self.reps is None:
            return None
        return self.sets * self.reps

    # -------------------------------------------------------------------------
    # Domain Methods
    # -------------------------------------------------------------------------

    def update_parameters(self, **changes: Any) -> bool:
        """
        Change performance parameters in place; position is untouched.

        Only the keys passed are changed, and passing None clears a value.
        The whole resulting placement is validated before anything is
        applied.

        Returns:
            True if any value changed.
        """
        _reject_unknown(changes)
        candidate_data: Dict[str, Any] = {**self.model_dump(), **changes}
        try:
            candidate = type(self).model_validate(candidate_data)
        except ValidationError as e:
            raise from_pydantic_error("Invalid exercise parameters", e) from e

        changed = False
        for name in changes:
            new_value = getattr(candidate, name)
            if getattr(self, name) != new_value:
                setattr(self, name, new_value)
                changed = True
        return changed

    def display_parameters(self) -> str:
        """Short human-readable summary of the parameters."""
        if self.duration_seconds is not None:
            minutes, seconds = divmod(self.duration_seconds, 60)
            text = f"{minutes}m{seconds}s" if seconds else f"{minutes}m"
            return f"{self.sets}x{text}" if self.sets and self.sets > 1 else text

        if self.distance_meters is not None:
            if self.distance_meters >= 1000:
                return f"{self.distance_meters / 1000:.1f}km"
            return f"{self.distance_meters:.0f}m"

        if self.sets is not None and self.reps is not None:
            result = f"{self.sets}x{self.reps}"
            if self.weight_kg is not None:
                result += f" @{self.weight_kg:g}kg"
            if self.rest_seconds is not None:
                result += f" ({self.rest_seconds}s rest)"
            return result

        if self.reps is not None:
            return f"{self.reps} reps"
        if self.sets is not None:
            return f"{self.sets} sets"
        return "No parameters"

    def __str__(self) -> str:
        return f"{self.exercise_name} {self.display_parameters()}"

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "exercise_id": "ex-bench",
                    "exercise_name": "Bench Press",
                    "sets": 4,
                    "reps": 8,
                    "weight_kg": 60,
                    "rest_seconds": 90,
                    "order": 1,
                },
                {
                    "exercise_id": "ex-run",
                    "exercise_name": "Easy Run",
                    "distance_meters": 5000,
                    "order": 2,
                },
            ]
        },
    }


def _reject_unknown(parameters: Dict[str, Any]) -> None:
    unknown = sorted(set(parameters) - PARAMETER_FIELDS)
    if unknown:
        raise WorkoutValidationError(
            f"Unknown exercise parameter(s): {', '.join(unknown)}"
        )

