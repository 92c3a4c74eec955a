"""
Workout phase - an ordered section of a workout (warm-up, main effort, ...).
"""

import uuid
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from domain.exceptions import DuplicateExerciseError, ExerciseNotFoundError
from domain.models.enums import PhaseType
from domain.models.ordering import OrderedChildren
from domain.models.workout_exercise import WorkoutExercise
from domain.services.duration_calculator import (
    default_phase_duration,
    phase_duration_minutes,
)
from domain.validation import (
    PHASE_DESCRIPTION_MAX_LENGTH,
    PHASE_NAME_MAX_LENGTH,
    optional_text,
    require_text,
)


class WorkoutPhase(BaseModel):
    """
    A phase of a workout holding an ordered list of exercise placements.

    Phases never exist on their own: they are created by Workout.add_phase()
    and removed by Workout.remove_phase(). Placements are keyed by their
    catalog exercise id, which is unique within a phase.

    The estimated duration is a roll-up: it is recalculated whenever a
    placement is added or removed, and equals the per-type default while
    the phase is empty.
    """

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    phase_type: PhaseType
    name: str
    description: Optional[str] = None
    estimated_duration_minutes: int = Field(default=0, ge=0)
    order: int = Field(default=1, ge=1, description="1-based position within the workout")
    exercises: List[WorkoutExercise] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return require_text(v, "Phase name", PHASE_NAME_MAX_LENGTH)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: Optional[str]) -> Optional[str]:
        return optional_text(v, "Phase description", PHASE_DESCRIPTION_MAX_LENGTH)

    @model_validator(mode="after")
    def validate_exercise_positions(self) -> "WorkoutPhase":
        """Reject duplicate catalog ids and gaps in placement orders."""
        exercise_ids = [e.exercise_id for e in self.exercises]
        if len(set(exercise_ids)) != len(exercise_ids):
            raise ValueError(f"Phase '{self.name}' places the same exercise twice")
        orders = sorted(e.order for e in self.exercises)
        if orders != list(range(1, len(orders) + 1)):
            raise ValueError(
                f"Exercise orders in phase '{self.name}' must be 1..{len(orders)}, got {orders}"
            )
        return self

    @property
    def placements(self) -> OrderedChildren[WorkoutExercise, str]:
        return OrderedChildren(
            self.exercises,
            key=lambda e: e.exercise_id,
            item_label="Exercise",
            duplicate_error=DuplicateExerciseError,
            not_found_error=ExerciseNotFoundError,
        )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def exercise_count(self) -> int:
        return len(self.exercises)

    @property
    def ordered_exercises(self) -> List[WorkoutExercise]:
        """Placements in execution order."""
        return self.placements.ordered()

    @property
    def is_empty(self) -> bool:
        return not self.exercises

    def get_exercise(self, exercise_id: str) -> Optional[WorkoutExercise]:
        return self.placements.find(exercise_id)

    def get_exercise_by_placement_id(self, placement_id: str) -> Optional[WorkoutExercise]:
        for exercise in self.exercises:
            if exercise.id == placement_id:
                return exercise
        return None

    def has_exercise(self, exercise_id: str) -> bool:
        return self.placements.contains(exercise_id)

    # -------------------------------------------------------------------------
    # Domain Methods
    # -------------------------------------------------------------------------

    def add_exercise(
        self, exercise_id: str, exercise_name: str, **parameters: Any
    ) -> WorkoutExercise:
        """
        Append a placement and recalculate the phase duration.

        Raises:
            DuplicateExerciseError: If the catalog exercise is already placed.
            WorkoutValidationError: If the parameters are invalid.
        """
        if self.has_exercise(exercise_id):
            raise DuplicateExerciseError(
                f"Exercise '{exercise_id}' already exists in phase '{self.name}'",
                key=exercise_id,
            )
        placement = WorkoutExercise.create(exercise_id, exercise_name, **parameters)
        self.placements.append(placement)
        self.recalculate_duration()
        return placement

    def remove_exercise(self, exercise_id: str) -> WorkoutExercise:
        """
        Remove a placement, renumber the rest and recalculate the duration.

        Raises:
            ExerciseNotFoundError: If the catalog exercise is not placed here.
        """
        removed = self.placements.remove(exercise_id)
        self.recalculate_duration()
        return removed

    def move_exercise(self, exercise_id: str, new_order: int) -> bool:
        """
        Reposition a placement. Duration is unaffected by order.

        Raises:
            ExerciseNotFoundError: If the catalog exercise is not placed here.
            InvalidOrderError: If new_order is outside [1, exercise_count].
        """
        return self.placements.move(exercise_id, new_order)

    def update_exercise_parameters(self, exercise_id: str, **changes: Any) -> bool:
        """
        Edit a placement's parameters without moving it.

        Parameter edits are not structural, so the phase duration is left
        as it is until the next add/remove.
        """
        return self.placements.get(exercise_id).update_parameters(**changes)

    def update_details(
        self, name: Optional[str] = None, description: Optional[str] = None
    ) -> bool:
        """
        Rename or re-describe the phase. An empty description clears it.

        Returns:
            True if anything changed.
        """
        new_name = require_text(name, "Phase name", PHASE_NAME_MAX_LENGTH) if name is not None else self.name
        new_description = self.description
        if description is not None:
            new_description = optional_text(description, "Phase description", PHASE_DESCRIPTION_MAX_LENGTH)

        changed = (new_name, new_description) != (self.name, self.description)
        self.name = new_name
        self.description = new_description
        return changed

    def recalculate_duration(self) -> int:
        """Refresh estimated_duration_minutes from the placements."""
        self.estimated_duration_minutes = phase_duration_minutes(self.exercises, self.phase_type)
        return self.estimated_duration_minutes

    @property
    def default_duration_minutes(self) -> int:
        return default_phase_duration(self.phase_type)

    def __str__(self) -> str:
        names = ", ".join(e.exercise_name for e in self.ordered_exercises[:3])
        if self.exercise_count > 3:
            names += f" (+{self.exercise_count - 3} more)"
        return f"{self.order}. {self.name} ({self.estimated_duration_minutes} min) [{names}]"
