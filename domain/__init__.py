"""
Domain layer for the workout composition core.

This package contains pure domain models, rules and errors that are
independent of infrastructure concerns (database, API, external services).
"""

from domain.exceptions import (
    AuthorizationError,
    DuplicateExerciseError,
    DuplicateKeyError,
    DuplicatePhaseTypeError,
    ExerciseNotFoundError,
    InvalidOrderError,
    NotFoundError,
    PhaseNotFoundError,
    WorkoutDomainError,
    WorkoutValidationError,
)
from domain.models import (
    DifficultyLevel,
    EquipmentType,
    PhaseType,
    Workout,
    WorkoutCategory,
    WorkoutExercise,
    WorkoutPhase,
    WorkoutType,
)

__all__ = [
    "Workout",
    "WorkoutPhase",
    "WorkoutExercise",
    "WorkoutType",
    "WorkoutCategory",
    "DifficultyLevel",
    "EquipmentType",
    "PhaseType",
    # Errors
    "WorkoutDomainError",
    "WorkoutValidationError",
    "DuplicateKeyError",
    "DuplicatePhaseTypeError",
    "DuplicateExerciseError",
    "NotFoundError",
    "PhaseNotFoundError",
    "ExerciseNotFoundError",
    "InvalidOrderError",
    "AuthorizationError",
]
