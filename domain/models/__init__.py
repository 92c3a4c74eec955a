"""
Domain models for the workout composition core.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core business concepts:
- Workout: The aggregate root owning an ordered list of phases
- WorkoutPhase: An ordered section of a workout (warm-up, main effort, ...)
- WorkoutExercise: A catalog exercise placed in a phase with its parameters
- OrderedChildren: Insert/remove/move bookkeeping shared by both levels

Usage:
    >>> from domain.models import Workout, PhaseType, DifficultyLevel

    >>> workout = Workout.create_user_workout(
    ...     "Full Body Strength",
    ...     user_id="user-123",
    ...     difficulty=DifficultyLevel.INTERMEDIATE,
    ... )
    >>> workout.add_phase(PhaseType.WARM_UP, "Warm-up")
    >>> workout.add_phase(PhaseType.MAIN_EFFORT, "Main Lifts")
    >>> workout.add_exercise(PhaseType.MAIN_EFFORT, "ex-squat", "Squat", sets=5, reps=5)

    >>> # Serialize to JSON
    >>> json_str = workout.model_dump_json(indent=2)

    >>> # Deserialize from JSON
    >>> workout = Workout.model_validate_json(json_str)
"""

from domain.models.enums import (
    DifficultyLevel,
    EquipmentType,
    PhaseType,
    WorkoutCategory,
    WorkoutType,
)
from domain.models.ordering import OrderedChildren
from domain.models.workout import Workout
from domain.models.workout_exercise import WorkoutExercise
from domain.models.workout_phase import WorkoutPhase

__all__ = [
    # Main entities
    "Workout",
    "WorkoutPhase",
    "WorkoutExercise",
    "OrderedChildren",
    # Enums
    "WorkoutType",
    "WorkoutCategory",
    "DifficultyLevel",
    "EquipmentType",
    "PhaseType",
]
