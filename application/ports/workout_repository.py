"""
Workout Repository Interface (Port).

This module defines the abstract interface for workout persistence.
Implementations load and store the whole aggregate (workout, phases and
exercise placements) at once; there is no per-child persistence.
"""
from typing import List, Optional, Protocol

from domain.models import DifficultyLevel, Workout, WorkoutCategory, WorkoutType


class WorkoutRepository(Protocol):
    """
    Abstract interface for workout persistence operations.

    Concurrency is optimistic and whole-aggregate: save() compares the
    stored version with expected_version and refuses stale writes.
    """

    def get(self, workout_id: str) -> Optional[Workout]:
        """
        Load a full workout aggregate.

        Args:
            workout_id: Workout UUID

        Returns:
            Workout with all phases and placements, or None if not found
        """
        ...

    def add(self, workout: Workout) -> Workout:
        """
        Store a new workout.

        Args:
            workout: Workout to insert (version 0)

        Returns:
            The stored workout with its version set to 1
        """
        ...

    def save(self, workout: Workout, *, expected_version: int) -> Workout:
        """
        Replace a stored workout atomically.

        Args:
            workout: The mutated aggregate
            expected_version: Version the caller loaded

        Returns:
            The stored workout with an incremented version

        Raises:
            WorkoutNotFoundError: If the workout no longer exists
            ConcurrencyConflictError: If the stored version differs
        """
        ...

    def delete(self, workout_id: str) -> bool:
        """
        Delete a workout.

        Returns:
            True if deleted, False if not found
        """
        ...

    def list_workouts(
        self,
        *,
        visible_to: Optional[str] = None,
        workout_type: Optional[WorkoutType] = None,
        category: Optional[WorkoutCategory] = None,
        difficulty: Optional[DifficultyLevel] = None,
        created_by_user_id: Optional[str] = None,
        created_by_coach_id: Optional[str] = None,
        search: Optional[str] = None,
        active_only: bool = True,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Workout]:
        """
        List one page of the workouts a viewer may see.

        Visibility is applied before paging: system-wide and coach-owned
        workouts are visible to everyone, user-owned workouts only to
        visible_to. A None viewer is anonymous.

        Args:
            visible_to: Actor whose view rule scopes the listing
            workout_type: Filter by workout type
            category: Filter by category
            difficulty: Filter by difficulty
            created_by_user_id: Only workouts owned by this user
            created_by_coach_id: Only workouts owned by this coach
            search: Case-insensitive match on name or description
            active_only: Skip deactivated workouts
            limit: Maximum number of workouts to return
            offset: Number of matching workouts to skip

        Returns:
            Workouts ordered by created_at desc
        """
        ...

    def count_workouts(
        self,
        *,
        visible_to: Optional[str] = None,
        workout_type: Optional[WorkoutType] = None,
        category: Optional[WorkoutCategory] = None,
        difficulty: Optional[DifficultyLevel] = None,
        created_by_user_id: Optional[str] = None,
        created_by_coach_id: Optional[str] = None,
        search: Optional[str] = None,
        active_only: bool = True,
    ) -> int:
        """
        Count the workouts list_workouts() would page through.

        Takes the same filters as list_workouts() without limit and offset.
        """
        ...
