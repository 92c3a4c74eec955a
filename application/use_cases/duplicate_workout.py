"""
DuplicateWorkout Use Case.

Copies any workout the actor can see into a new workout owned by the actor.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from application.exceptions import WorkoutNotFoundError
from application.ports import WorkoutRepository
from application.use_cases.workout_mutation import (
    EXPECTED_ERRORS,
    INTERNAL_ERROR,
    error_code_for,
    error_message,
    validation_errors_for,
)
from domain.models import Workout
from domain.services import ensure_can_create, ensure_can_view

logger = logging.getLogger(__name__)


@dataclass
class DuplicateWorkoutResult:
    """Result of the DuplicateWorkout use case execution."""

    success: bool
    workout: Optional[Workout] = None
    workout_id: Optional[str] = None
    source_workout_id: Optional[str] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    validation_errors: List[str] = field(default_factory=list)


class DuplicateWorkoutUseCase:
    """
    Use case for copying a workout.

    The copy is a user-created workout owned by the actor, with fresh ids
    for itself, its phases and its placements. Templates, coach workouts and
    the actor's own workouts can all be copied; another user's private
    workout cannot, because the actor cannot view it.

    Usage:
        >>> use_case = DuplicateWorkoutUseCase(workout_repo=workout_repo)
        >>> result = use_case.execute(
        ...     workout_id="template-1",
        ...     actor_id="user-123",
        ...     new_name="My Push Day",
        ... )
    """

    def __init__(self, workout_repo: WorkoutRepository) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            workout_repo: Repository for loading and storing workouts
        """
        self._workout_repo = workout_repo

    def execute(
        self,
        workout_id: str,
        actor_id: Optional[str],
        new_name: Optional[str] = None,
    ) -> DuplicateWorkoutResult:
        """
        Execute the duplicate workflow.

        Args:
            workout_id: Workout to copy
            actor_id: User who will own the copy
            new_name: Name of the copy (defaults to "<name> (Copy)")

        Returns:
            DuplicateWorkoutResult with the stored copy
        """
        try:
            source = self._workout_repo.get(workout_id)
            if source is None:
                raise WorkoutNotFoundError(workout_id)

            ensure_can_view(source, actor_id)
            ensure_can_create(actor_id)

            copy = source.duplicate(new_name or f"{source.name} (Copy)", user_id=actor_id)
            stored = self._workout_repo.add(copy)
            logger.info(f"Workout {workout_id} duplicated as {stored.id} for {actor_id}")
            return DuplicateWorkoutResult(
                success=True,
                workout=stored,
                workout_id=stored.id,
                source_workout_id=workout_id,
            )

        except EXPECTED_ERRORS as e:
            logger.warning(f"Duplicate of workout {workout_id} rejected: {e}")
            return DuplicateWorkoutResult(
                success=False,
                source_workout_id=workout_id,
                error=error_message(e),
                error_code=error_code_for(e),
                validation_errors=validation_errors_for(e),
            )

        except Exception as e:
            logger.exception(f"DuplicateWorkout use case failed: {e}")
            return DuplicateWorkoutResult(
                success=False,
                source_workout_id=workout_id,
                error=str(e),
                error_code=INTERNAL_ERROR,
            )
