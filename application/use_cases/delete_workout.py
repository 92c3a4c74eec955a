"""
DeleteWorkout Use Case.

Deletes a workout after checking the actor owns it.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from application.exceptions import WorkoutNotFoundError
from application.ports import WorkoutRepository
from application.use_cases.workout_mutation import (
    EXPECTED_ERRORS,
    INTERNAL_ERROR,
    error_code_for,
    error_message,
)
from domain.services import ensure_can_delete

logger = logging.getLogger(__name__)


@dataclass
class DeleteWorkoutResult:
    """Result of deleting a workout."""

    success: bool
    workout_id: Optional[str] = None
    error: Optional[str] = None
    error_code: Optional[str] = None


class DeleteWorkoutUseCase:
    """
    Use case for deleting workouts.

    System-wide workouts (templates, AI-generated) cannot be deleted by
    anyone through this path.
    """

    def __init__(self, workout_repo: WorkoutRepository) -> None:
        self._workout_repo = workout_repo

    def execute(self, workout_id: str, actor_id: Optional[str]) -> DeleteWorkoutResult:
        """
        Delete a workout.

        Args:
            workout_id: Workout to delete
            actor_id: User or coach requesting the deletion

        Returns:
            DeleteWorkoutResult; not_found if the workout vanished meanwhile
        """
        try:
            workout = self._workout_repo.get(workout_id)
            if workout is None:
                raise WorkoutNotFoundError(workout_id)

            ensure_can_delete(workout, actor_id)

            if not self._workout_repo.delete(workout_id):
                raise WorkoutNotFoundError(workout_id)

            logger.info(f"Workout {workout_id} deleted by {actor_id}")
            return DeleteWorkoutResult(success=True, workout_id=workout_id)

        except EXPECTED_ERRORS as e:
            logger.warning(f"Delete of workout {workout_id} rejected: {e}")
            return DeleteWorkoutResult(
                success=False,
                workout_id=workout_id,
                error=error_message(e),
                error_code=error_code_for(e),
            )

        except Exception as e:
            logger.exception(f"DeleteWorkout use case failed: {e}")
            return DeleteWorkoutResult(
                success=False, workout_id=workout_id, error=str(e), error_code=INTERNAL_ERROR
            )
