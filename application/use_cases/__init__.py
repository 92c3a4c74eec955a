"""
Application Use Cases for the workout composition core.

This package contains application-level use cases that orchestrate domain logic
and coordinate between ports/adapters. Use cases are the entry points for
business operations and contain the application's workflow logic.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return result dataclasses carrying domain models, never raise
  for expected failures

Usage:
    from application.use_cases import (
        CreateWorkoutUseCase,
        PhaseDraft,
        ManageWorkoutStructureUseCase,
    )

    # Create a workout with an initial phase
    create = CreateWorkoutUseCase(workout_repo=repo, exercise_catalog=catalog)
    result = create.execute(
        actor_id="user-123",
        name="Leg Day",
        phases=[PhaseDraft(PhaseType.WARM_UP, "Warm-up")],
    )

    # Reorder its phases
    structure = ManageWorkoutStructureUseCase(workout_repo=repo, exercise_catalog=catalog)
    structure.move_phase(result.workout_id, "user-123", PhaseType.WARM_UP, 1)
"""

from application.use_cases.create_workout import (
    CreateWorkoutResult,
    CreateWorkoutUseCase,
    ExerciseDraft,
    PhaseDraft,
)
from application.use_cases.delete_workout import DeleteWorkoutResult, DeleteWorkoutUseCase
from application.use_cases.duplicate_workout import (
    DuplicateWorkoutResult,
    DuplicateWorkoutUseCase,
)
from application.use_cases.get_workout import (
    GetWorkoutResult,
    GetWorkoutUseCase,
    ListWorkoutsResult,
)
from application.use_cases.manage_workout_structure import ManageWorkoutStructureUseCase
from application.use_cases.update_workout import UpdateWorkoutUseCase
from application.use_cases.workout_mutation import (
    WorkoutMutationResult,
    WorkoutMutationRunner,
)

__all__ = [
    # CreateWorkout
    "CreateWorkoutUseCase",
    "CreateWorkoutResult",
    "PhaseDraft",
    "ExerciseDraft",
    # GetWorkout
    "GetWorkoutUseCase",
    "GetWorkoutResult",
    "ListWorkoutsResult",
    # Edits
    "UpdateWorkoutUseCase",
    "ManageWorkoutStructureUseCase",
    "WorkoutMutationResult",
    "WorkoutMutationRunner",
    # DuplicateWorkout
    "DuplicateWorkoutUseCase",
    "DuplicateWorkoutResult",
    # DeleteWorkout
    "DeleteWorkoutUseCase",
    "DeleteWorkoutResult",
]
