"""
Application-layer exceptions.

These exceptions are raised by repository adapters and used by use cases
alongside the domain errors in domain.exceptions.
"""

from typing import Optional


class WorkoutNotFoundError(Exception):
    """No workout exists with the requested id."""

    def __init__(self, workout_id: str):
        super().__init__(f"Workout {workout_id} not found")
        self.workout_id = workout_id


class ConcurrencyConflictError(Exception):
    """Saving a workout failed because it was changed since it was loaded.

    Raised by WorkoutRepository.save() when the stored version differs from
    the version the caller loaded. The caller should reload and retry the
    whole edit; nothing was written.
    """

    def __init__(
        self,
        workout_id: str,
        expected_version: int,
        actual_version: Optional[int] = None,
    ):
        super().__init__(
            f"Workout {workout_id} was modified concurrently "
            f"(expected version {expected_version}, found {actual_version})"
        )
        self.workout_id = workout_id
        self.expected_version = expected_version
        self.actual_version = actual_version
