"""
Get Workout Use Case.

This use case handles retrieving workouts the actor is allowed to see.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from application.exceptions import WorkoutNotFoundError
from application.ports import WorkoutRepository
from application.use_cases.workout_mutation import (
    EXPECTED_ERRORS,
    INTERNAL_ERROR,
    error_code_for,
    error_message,
)
from backend.settings import Settings, get_settings
from domain.exceptions import WorkoutValidationError
from domain.models import DifficultyLevel, Workout, WorkoutCategory, WorkoutType
from domain.services import ensure_can_view
from domain.validation import SEARCH_TERM_MAX_LENGTH, optional_text

logger = logging.getLogger(__name__)


@dataclass
class GetWorkoutResult:
    """Result of getting a single workout."""
    success: bool
    workout: Optional[Workout] = None
    error: Optional[str] = None
    error_code: Optional[str] = None


@dataclass
class ListWorkoutsResult:
    """Result of listing workouts."""
    success: bool
    workouts: List[Workout] = field(default_factory=list)
    count: int = 0
    total_count: int = 0
    error: Optional[str] = None
    error_code: Optional[str] = None


class GetWorkoutUseCase:
    """
    Use case for retrieving workouts.

    Encapsulates all logic for getting individual workouts and listing
    workouts with filters. Both paths apply the view rule, so user-owned
    workouts are only ever returned to their owner.
    """

    def __init__(
        self,
        workout_repo: WorkoutRepository,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize with required dependencies.

        Args:
            workout_repo: Repository for workout persistence
            settings: Settings override (defaults to get_settings())
        """
        self._workout_repo = workout_repo
        self._settings = settings or get_settings()

    def get_workout(
        self,
        workout_id: str,
        actor_id: Optional[str],
    ) -> GetWorkoutResult:
        """
        Get a single workout by ID.

        Args:
            workout_id: ID of the workout to retrieve
            actor_id: Current user or coach ID (None when anonymous)

        Returns:
            GetWorkoutResult with the workout or error
        """
        try:
            workout = self._workout_repo.get(workout_id)
            if workout is None:
                raise WorkoutNotFoundError(workout_id)
            ensure_can_view(workout, actor_id)
            return GetWorkoutResult(success=True, workout=workout)

        except EXPECTED_ERRORS as e:
            logger.warning(f"Get workout {workout_id} failed: {e}")
            return GetWorkoutResult(
                success=False,
                error=error_message(e),
                error_code=error_code_for(e),
            )

        except Exception as e:
            logger.exception(f"GetWorkout use case failed: {e}")
            return GetWorkoutResult(success=False, error=str(e), error_code=INTERNAL_ERROR)

    def list_workouts(
        self,
        actor_id: Optional[str],
        workout_type: Optional[WorkoutType] = None,
        category: Optional[WorkoutCategory] = None,
        difficulty: Optional[DifficultyLevel] = None,
        active_only: bool = True,
        limit: Optional[int] = None,
        *,
        search: Optional[str] = None,
        created_by_user_id: Optional[str] = None,
        created_by_coach_id: Optional[str] = None,
        offset: int = 0,
    ) -> ListWorkoutsResult:
        """
        List one page of the workouts visible to the actor.

        The view rule is part of the repository query, so private workouts
        of other users never take up room on the page.

        Args:
            actor_id: Current user or coach ID (None when anonymous)
            workout_type: Optional type filter
            category: Optional category filter
            difficulty: Optional difficulty filter
            active_only: Skip deactivated workouts
            limit: Page size (defaults from settings, capped at the maximum)
            search: Case-insensitive term matched against name and description
            created_by_user_id: Only workouts owned by this user
            created_by_coach_id: Only workouts owned by this coach
            offset: Number of visible workouts to skip

        Returns:
            ListWorkoutsResult with the page and the total number of matches
        """
        try:
            if offset < 0:
                raise WorkoutValidationError("Offset cannot be negative")
            query = dict(
                visible_to=actor_id or None,
                workout_type=workout_type,
                category=category,
                difficulty=difficulty,
                created_by_user_id=created_by_user_id,
                created_by_coach_id=created_by_coach_id,
                search=optional_text(search, "Search term", SEARCH_TERM_MAX_LENGTH),
                active_only=active_only,
            )
            page_size = self._settings.resolve_list_limit(limit)
            workouts = self._workout_repo.list_workouts(**query, limit=page_size, offset=offset)
            total_count = self._workout_repo.count_workouts(**query)
            logger.debug(
                "Listed %d of %d visible workouts for actor %s", len(workouts), total_count, actor_id
            )
            return ListWorkoutsResult(
                success=True,
                workouts=workouts,
                count=len(workouts),
                total_count=total_count,
            )

        except EXPECTED_ERRORS as e:
            logger.warning(f"ListWorkouts rejected: {e}")
            return ListWorkoutsResult(
                success=False,
                error=error_message(e),
                error_code=error_code_for(e),
            )

        except Exception as e:
            logger.exception(f"ListWorkouts failed: {e}")
            return ListWorkoutsResult(success=False, error=str(e), error_code=INTERNAL_ERROR)
