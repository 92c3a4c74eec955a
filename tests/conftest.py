"""
Pytest fixtures shared by the workout core tests.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable

import pytest

from backend.settings import Settings
from domain.models import PhaseType, Workout
import domain.models.workout as workout_module
from tests.fakes import TEST_USER_ID, FakeExerciseCatalog, FakeWorkoutRepository

# ---------------------------------------------------------------------------
# Settings and Clock
# ---------------------------------------------------------------------------


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with small list limits."""
    return Settings(
        environment="test",
        workout_list_default_limit=2,
        workout_list_max_limit=10,
    )


class FakeClock:
    """Deterministic replacement for the aggregate's UTC clock."""

    def __init__(self, start: datetime):
        self.now = start
        self.calls = 0

    def __call__(self) -> datetime:
        self.calls += 1
        return self.now

    def advance(self, seconds: int = 60) -> datetime:
        self.now = self.now + timedelta(seconds=seconds)
        return self.now


@pytest.fixture
def clock(monkeypatch) -> FakeClock:
    """Patch the workout clock so timestamp changes can be asserted exactly."""
    fake = FakeClock(datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc))
    monkeypatch.setattr(workout_module, "_utcnow", fake)
    return fake


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------


@pytest.fixture
def workout_repo() -> FakeWorkoutRepository:
    """Fresh in-memory workout repository."""
    return FakeWorkoutRepository()


@pytest.fixture
def exercise_catalog() -> FakeExerciseCatalog:
    """Exercise catalog pre-populated with default exercises."""
    return FakeExerciseCatalog()


# ---------------------------------------------------------------------------
# Workout Builders
# ---------------------------------------------------------------------------


@pytest.fixture
def make_workout() -> Callable[..., Workout]:
    """
    Build a user-owned workout with the given phase types.

    Usage:
        workout = make_workout(PhaseType.WARM_UP, PhaseType.MAIN_EFFORT)
    """

    def _make(*phase_types: PhaseType, user_id: str = TEST_USER_ID, name: str = "Test Workout") -> Workout:
        workout = Workout.create_user_workout(name, user_id=user_id)
        for phase_type in phase_types:
            workout.add_phase(phase_type, phase_type.value.replace("_", " ").title())
        return workout

    return _make


@pytest.fixture
def stored_workout(workout_repo, make_workout) -> Workout:
    """A user-owned workout with warm-up and main phases, stored at version 1."""
    workout = make_workout(PhaseType.WARM_UP, PhaseType.MAIN_EFFORT)
    workout.add_exercise(PhaseType.MAIN_EFFORT, "ex-squat", "Back Squat", sets=5, reps=5)
    workout.add_exercise(PhaseType.MAIN_EFFORT, "ex-bench", "Bench Press", sets=3, reps=8)
    return workout_repo.add(workout)
