"""
UpdateWorkout Use Case.

Edits the descriptive fields of a workout and toggles whether it is active.
Structural edits (phases, placements) live in ManageWorkoutStructureUseCase.
"""

from typing import List, Optional

from application.ports import WorkoutRepository
from application.use_cases.workout_mutation import (
    WorkoutMutationResult,
    WorkoutMutationRunner,
)
from domain.models import DifficultyLevel, EquipmentType, WorkoutCategory


class UpdateWorkoutUseCase:
    """
    Use case for workout detail edits and activation.

    All operations are idempotent: repeating one returns success with
    changed=False and nothing is written.

    Usage:
        >>> use_case = UpdateWorkoutUseCase(workout_repo=workout_repo)
        >>> result = use_case.update_details(
        ...     workout_id="w-123",
        ...     actor_id="user-123",
        ...     name="Heavy Leg Day",
        ... )
        >>> use_case.deactivate("w-123", "user-123").changed
        True
    """

    def __init__(self, workout_repo: WorkoutRepository) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            workout_repo: Repository for loading and saving workouts
        """
        self._runner = WorkoutMutationRunner(workout_repo)

    def update_details(
        self,
        workout_id: str,
        actor_id: Optional[str],
        *,
        name: Optional[str] = None,
        description: Optional[str] = None,
        difficulty: Optional[DifficultyLevel] = None,
        duration_minutes: Optional[int] = None,
        category: Optional[WorkoutCategory] = None,
        required_equipment: Optional[List[EquipmentType]] = None,
    ) -> WorkoutMutationResult:
        """
        Update descriptive fields. Arguments left as None are unchanged.

        An empty description clears it; an empty equipment list clears the
        equipment.
        """

        return self._runner.run(
            workout_id,
            actor_id,
            lambda workout: workout.update_details(
                name=name,
                description=description,
                difficulty=difficulty,
                duration_minutes=duration_minutes,
                category=category,
                required_equipment=required_equipment,
            ),
            operation="update_details",
        )

    def activate(self, workout_id: str, actor_id: Optional[str]) -> WorkoutMutationResult:
        return self._runner.run(
            workout_id, actor_id, lambda workout: workout.activate(), operation="activate"
        )

    def deactivate(self, workout_id: str, actor_id: Optional[str]) -> WorkoutMutationResult:
        return self._runner.run(
            workout_id, actor_id, lambda workout: workout.deactivate(), operation="deactivate"
        )
