"""
Fake Port Implementations for Testing.

This package provides in-memory fake implementations of the application
ports for fast, isolated testing. No database or external dependencies
required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeWorkoutRepository, create_workout_repo

    # Direct instantiation
    repo = FakeWorkoutRepository()
    repo.seed([workout])

    # Factory function with pre-populated data
    repo = create_workout_repo(user_id="user1", num_workouts=5)
"""
from datetime import datetime, timedelta, timezone

from domain.models import PhaseType, Workout

from tests.fakes.exercise_catalog import FakeExerciseCatalog
from tests.fakes.workout_repository import FakeWorkoutRepository

# Actor ids used across tests
TEST_USER_ID = "test-user-123"
OTHER_USER_ID = "other-user-456"
TEST_COACH_ID = "coach-789"


# =============================================================================
# Factory Functions
# =============================================================================


def create_workout_repo(
    *,
    user_id: str = "test_user",
    num_workouts: int = 0,
) -> FakeWorkoutRepository:
    """
    Create a FakeWorkoutRepository with optional pre-populated workouts.

    Each generated workout is user-owned, has a warm-up and a main phase,
    and is stored at version 1. Creation times are one minute apart so the
    newest-first listing order is deterministic.

    Args:
        user_id: Owner of the generated workouts
        num_workouts: Number of sample workouts to create

    Returns:
        Pre-populated FakeWorkoutRepository
    """
    repo = FakeWorkoutRepository()
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)

    workouts = []
    for i in range(num_workouts):
        workout = Workout.create_user_workout(
            f"Test Workout {i + 1}",
            user_id=user_id,
            created_at=start + timedelta(minutes=i),
        )
        workout.add_phase(PhaseType.WARM_UP, "Warm-up")
        workout.add_phase(PhaseType.MAIN_EFFORT, "Main")
        workouts.append(workout.model_copy(update={"version": 1}))
    repo.seed(workouts)

    return repo


__all__ = [
    # Actors
    "TEST_USER_ID",
    "OTHER_USER_ID",
    "TEST_COACH_ID",
    # Fakes
    "FakeWorkoutRepository",
    "FakeExerciseCatalog",
    # Factories
    "create_workout_repo",
]
