"""
ManageWorkoutStructure Use Case.

Phase and exercise-placement edits on an existing workout. Each operation
runs through WorkoutMutationRunner: load, check modify permission, call the
aggregate, save with the loaded version.
"""

import logging
from typing import Any, Optional

from application.ports import ExerciseCatalog, WorkoutRepository
from application.use_cases.workout_mutation import (
    WorkoutMutationResult,
    WorkoutMutationRunner,
)
from domain.exceptions import ExerciseNotFoundError
from domain.models import PhaseType, Workout

logger = logging.getLogger(__name__)


def resolve_exercise_name(catalog: ExerciseCatalog, exercise_id: str) -> str:
    """
    Look up the display name snapshot for a catalog exercise.

    Raises:
        ExerciseNotFoundError: If the catalog does not know the id
    """
    name = catalog.get_exercise_name(exercise_id)
    if not name:
        logger.debug("Exercise catalog has no entry for %s", exercise_id)
        raise ExerciseNotFoundError(
            f"Exercise '{exercise_id}' not found in catalog", key=exercise_id
        )
    return name


class ManageWorkoutStructureUseCase:
    """
    Use case for editing the phases and placements of a workout.

    Usage:
        >>> use_case = ManageWorkoutStructureUseCase(
        ...     workout_repo=workout_repo,
        ...     exercise_catalog=catalog,
        ... )
        >>> result = use_case.add_exercise(
        ...     workout_id="w-123",
        ...     actor_id="user-123",
        ...     phase_type=PhaseType.MAIN_EFFORT,
        ...     exercise_id="ex-squat",
        ...     sets=5,
        ...     reps=5,
        ... )
        >>> result.success, result.changed
        (True, True)
    """

    def __init__(
        self,
        workout_repo: WorkoutRepository,
        exercise_catalog: ExerciseCatalog,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            workout_repo: Repository for loading and saving workouts
            exercise_catalog: Lookup for exercise display names
        """
        self._runner = WorkoutMutationRunner(workout_repo)
        self._exercise_catalog = exercise_catalog

    # -------------------------------------------------------------------------
    # Phases
    # -------------------------------------------------------------------------

    def add_phase(
        self,
        workout_id: str,
        actor_id: Optional[str],
        phase_type: PhaseType,
        name: str,
        *,
        order_hint: Optional[int] = None,
        description: Optional[str] = None,
    ) -> WorkoutMutationResult:
        def mutate(workout: Workout) -> bool:
            workout.add_phase(phase_type, name, order_hint=order_hint, description=description)
            return True

        return self._runner.run(workout_id, actor_id, mutate, operation="add_phase")

    def remove_phase(
        self, workout_id: str, actor_id: Optional[str], phase_type: PhaseType
    ) -> WorkoutMutationResult:
        def mutate(workout: Workout) -> bool:
            workout.remove_phase(phase_type)
            return True

        return self._runner.run(workout_id, actor_id, mutate, operation="remove_phase")

    def move_phase(
        self,
        workout_id: str,
        actor_id: Optional[str],
        phase_type: PhaseType,
        new_order: int,
    ) -> WorkoutMutationResult:
        return self._runner.run(
            workout_id,
            actor_id,
            lambda workout: workout.move_phase(phase_type, new_order),
            operation="move_phase",
        )

    def update_phase(
        self,
        workout_id: str,
        actor_id: Optional[str],
        phase_type: PhaseType,
        *,
        name: Optional[str] = None,
        description: Optional[str] = None,
    ) -> WorkoutMutationResult:
        return self._runner.run(
            workout_id,
            actor_id,
            lambda workout: workout.update_phase(phase_type, name=name, description=description),
            operation="update_phase",
        )

    # -------------------------------------------------------------------------
    # Exercise placements
    # -------------------------------------------------------------------------

    def add_exercise(
        self,
        workout_id: str,
        actor_id: Optional[str],
        phase_type: PhaseType,
        exercise_id: str,
        **parameters: Any,
    ) -> WorkoutMutationResult:
        """
        Place a catalog exercise at the end of a phase.

        The display name is read from the catalog once, after the permission
        check, and stored on the placement.
        """

        def mutate(workout: Workout) -> bool:
            exercise_name = resolve_exercise_name(self._exercise_catalog, exercise_id)
            workout.add_exercise(phase_type, exercise_id, exercise_name, **parameters)
            return True

        return self._runner.run(workout_id, actor_id, mutate, operation="add_exercise")

    def remove_exercise(
        self,
        workout_id: str,
        actor_id: Optional[str],
        phase_type: PhaseType,
        exercise_id: str,
    ) -> WorkoutMutationResult:
        def mutate(workout: Workout) -> bool:
            workout.remove_exercise(phase_type, exercise_id)
            return True

        return self._runner.run(workout_id, actor_id, mutate, operation="remove_exercise")

    def move_exercise(
        self,
        workout_id: str,
        actor_id: Optional[str],
        phase_type: PhaseType,
        exercise_id: str,
        new_order: int,
    ) -> WorkoutMutationResult:
        return self._runner.run(
            workout_id,
            actor_id,
            lambda workout: workout.move_exercise(phase_type, exercise_id, new_order),
            operation="move_exercise",
        )

    def update_exercise(
        self,
        workout_id: str,
        actor_id: Optional[str],
        phase_type: PhaseType,
        exercise_id: str,
        **changes: Any,
    ) -> WorkoutMutationResult:
        """Edit a placement's parameters; None clears a value."""
        return self._runner.run(
            workout_id,
            actor_id,
            lambda workout: workout.update_exercise(phase_type, exercise_id, **changes),
            operation="update_exercise",
        )
