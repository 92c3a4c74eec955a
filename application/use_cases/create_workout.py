"""
CreateWorkout Use Case.

Creates a user- or coach-owned workout, optionally with its initial phases
and exercise placements, and stores it through the repository.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from application.ports import ExerciseCatalog, WorkoutRepository
from application.use_cases.manage_workout_structure import resolve_exercise_name
from application.use_cases.workout_mutation import (
    EXPECTED_ERRORS,
    INTERNAL_ERROR,
    error_code_for,
    error_message,
    validation_errors_for,
)
from domain.models import (
    DifficultyLevel,
    EquipmentType,
    PhaseType,
    Workout,
    WorkoutCategory,
)
from domain.services import ensure_can_create

logger = logging.getLogger(__name__)


@dataclass
class ExerciseDraft:
    """An exercise to place in a new phase; the name comes from the catalog."""

    exercise_id: str
    parameters: Dict[str, Any] = field(default_factory=dict)


@dataclass
class PhaseDraft:
    """A phase to create with the workout, in the order given."""

    phase_type: PhaseType
    name: str
    description: Optional[str] = None
    exercises: List[ExerciseDraft] = field(default_factory=list)


@dataclass
class CreateWorkoutResult:
    """Result of the CreateWorkout use case execution."""

    success: bool
    workout: Optional[Workout] = None
    workout_id: Optional[str] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    validation_errors: List[str] = field(default_factory=list)


class CreateWorkoutUseCase:
    """
    Use case for creating workouts.

    Orchestrates the following workflow:
    1. Check the actor is authenticated
    2. Build the workout through the owner-specific factory
    3. Add the initial phases and their placements
    4. Persist via repository

    Nothing is stored if any step fails.

    Usage:
        >>> use_case = CreateWorkoutUseCase(
        ...     workout_repo=workout_repo,
        ...     exercise_catalog=catalog,
        ... )
        >>> result = use_case.execute(
        ...     actor_id="user-123",
        ...     name="Leg Day",
        ...     phases=[
        ...         PhaseDraft(PhaseType.WARM_UP, "Warm-up"),
        ...         PhaseDraft(
        ...             PhaseType.MAIN_EFFORT,
        ...             "Main",
        ...             exercises=[ExerciseDraft("ex-squat", {"sets": 5, "reps": 5})],
        ...         ),
        ...     ],
        ... )
        >>> if result.success:
        ...     print(f"Created workout: {result.workout_id}")
    """

    def __init__(
        self,
        workout_repo: WorkoutRepository,
        exercise_catalog: ExerciseCatalog,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            workout_repo: Repository for persisting workouts
            exercise_catalog: Lookup for exercise display names
        """
        self._workout_repo = workout_repo
        self._exercise_catalog = exercise_catalog

    def execute(
        self,
        actor_id: Optional[str],
        name: str,
        *,
        description: Optional[str] = None,
        category: WorkoutCategory = WorkoutCategory.MIXED,
        difficulty: DifficultyLevel = DifficultyLevel.BEGINNER,
        required_equipment: Optional[List[EquipmentType]] = None,
        image_content_id: Optional[str] = None,
        as_coach: bool = False,
        phases: Optional[List[PhaseDraft]] = None,
    ) -> CreateWorkoutResult:
        """
        Execute the create workout workflow.

        Args:
            actor_id: User or coach creating the workout
            name: Workout name
            description: Optional description
            category: Workout category
            difficulty: Difficulty level
            required_equipment: Equipment needed
            image_content_id: Optional cover image reference
            as_coach: Create a coach-owned workout instead of a user-owned one
            phases: Initial phases with their placements

        Returns:
            CreateWorkoutResult with the stored workout
        """
        try:
            ensure_can_create(actor_id)

            attributes = dict(
                description=description,
                category=category,
                difficulty=difficulty,
                required_equipment=list(required_equipment or []),
                image_content_id=image_content_id,
            )
            if as_coach:
                workout = Workout.create_coach_workout(name, coach_id=actor_id, **attributes)
            else:
                workout = Workout.create_user_workout(name, user_id=actor_id, **attributes)

            for draft in phases or []:
                self._add_phase(workout, draft)

            stored = self._workout_repo.add(workout)
            logger.info(
                f"Workout created: {stored.id} ({stored.workout_type.value}, "
                f"{stored.phase_count} phases, {stored.total_exercises} exercises)"
            )
            return CreateWorkoutResult(success=True, workout=stored, workout_id=stored.id)

        except EXPECTED_ERRORS as e:
            logger.warning(f"Workout creation rejected: {e}")
            return CreateWorkoutResult(
                success=False,
                error=error_message(e),
                error_code=error_code_for(e),
                validation_errors=validation_errors_for(e),
            )

        except Exception as e:
            logger.exception(f"CreateWorkout use case failed: {e}")
            return CreateWorkoutResult(success=False, error=str(e), error_code=INTERNAL_ERROR)

    def _add_phase(self, workout: Workout, draft: PhaseDraft) -> None:
        workout.add_phase(draft.phase_type, draft.name, description=draft.description)
        for exercise in draft.exercises:
            exercise_name = resolve_exercise_name(self._exercise_catalog, exercise.exercise_id)
            workout.add_exercise(
                draft.phase_type, exercise.exercise_id, exercise_name, **exercise.parameters
            )
