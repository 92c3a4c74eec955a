"""
Repository Interfaces (Ports) for the workout composition core.

This package defines abstract interfaces that decouple the use cases from
infrastructure (database, exercise catalog service). Implementations are
provided by the host application; in-memory fakes live in tests/fakes.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the use cases need)
- Adapters: Concrete implementations elsewhere (how it's provided)

Usage:
    from application.ports import WorkoutRepository, ExerciseCatalog

    class WorkoutService:
        def __init__(self, workout_repo: WorkoutRepository, catalog: ExerciseCatalog):
            self.workout_repo = workout_repo
            self.catalog = catalog
"""

# Workout persistence
from application.ports.workout_repository import WorkoutRepository

# Exercise catalog lookup
from application.ports.exercise_catalog import ExerciseCatalog

__all__ = [
    "WorkoutRepository",
    "ExerciseCatalog",
]
