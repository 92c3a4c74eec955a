"""
Shared load -> authorize -> mutate -> save flow for workout edits.

Every editing use case goes through WorkoutMutationRunner so that the
failure mapping, logging and optimistic-lock handling are identical across
operations.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from application.exceptions import ConcurrencyConflictError, WorkoutNotFoundError
from application.ports import WorkoutRepository
from domain.exceptions import (
    AuthorizationError,
    DuplicateKeyError,
    InvalidOrderError,
    NotFoundError,
    WorkoutDomainError,
    WorkoutValidationError,
)
from domain.models import Workout
from domain.services import ensure_can_modify

logger = logging.getLogger(__name__)

# Error codes carried by use case results
VALIDATION_ERROR = "validation_error"
DUPLICATE = "duplicate"
NOT_FOUND = "not_found"
INVALID_ORDER = "invalid_order"
FORBIDDEN = "forbidden"
CONFLICT = "conflict"
INTERNAL_ERROR = "internal_error"

# Failures callers are expected to handle; logged as warnings
EXPECTED_ERRORS = (
    WorkoutDomainError,
    WorkoutNotFoundError,
    ConcurrencyConflictError,
)


def error_code_for(error: Exception) -> str:
    """Map an exception to the error code reported in results."""
    if isinstance(error, WorkoutValidationError):
        return VALIDATION_ERROR
    if isinstance(error, DuplicateKeyError):
        return DUPLICATE
    if isinstance(error, (NotFoundError, WorkoutNotFoundError)):
        return NOT_FOUND
    if isinstance(error, InvalidOrderError):
        return INVALID_ORDER
    if isinstance(error, AuthorizationError):
        return FORBIDDEN
    if isinstance(error, ConcurrencyConflictError):
        return CONFLICT
    return INTERNAL_ERROR


def error_message(error: Exception) -> str:
    return getattr(error, "message", None) or str(error)


def validation_errors_for(error: Exception) -> List[str]:
    if isinstance(error, WorkoutValidationError):
        return list(error.errors)
    return []


@dataclass
class WorkoutMutationResult:
    """Result of a workout edit."""

    success: bool
    workout: Optional[Workout] = None
    changed: bool = False
    error: Optional[str] = None
    error_code: Optional[str] = None
    validation_errors: List[str] = field(default_factory=list)

    @classmethod
    def failed(cls, error: Exception) -> "WorkoutMutationResult":
        return cls(
            success=False,
            error=error_message(error),
            error_code=error_code_for(error),
            validation_errors=validation_errors_for(error),
        )


class WorkoutMutationRunner:
    """
    Runs one aggregate mutation against the repository.

    Steps:
    1. Load the workout (not_found if missing)
    2. Check the actor may modify it (forbidden otherwise)
    3. Apply the mutation, which returns whether anything changed
    4. Save with the loaded version when changed (conflict if stale)

    A mutation that changes nothing is not persisted and the stored version
    stays the same.
    """

    def __init__(self, workout_repo: WorkoutRepository) -> None:
        self._workout_repo = workout_repo

    def run(
        self,
        workout_id: str,
        actor_id: Optional[str],
        mutate: Callable[[Workout], bool],
        *,
        operation: str,
    ) -> WorkoutMutationResult:
        """
        Execute the mutation flow.

        Args:
            workout_id: Workout to edit
            actor_id: User or coach performing the edit
            mutate: Callable applying the change and returning the changed flag
            operation: Name used in log messages

        Returns:
            WorkoutMutationResult with the saved (or unchanged) workout
        """
        try:
            workout = self._workout_repo.get(workout_id)
            if workout is None:
                raise WorkoutNotFoundError(workout_id)

            ensure_can_modify(workout, actor_id)

            expected_version = workout.version
            changed = mutate(workout)
            if not changed:
                logger.debug("%s on workout %s changed nothing", operation, workout_id)
                return WorkoutMutationResult(success=True, workout=workout, changed=False)

            saved = self._workout_repo.save(workout, expected_version=expected_version)
            logger.info(
                "%s applied to workout %s (version %d -> %d)",
                operation,
                workout_id,
                expected_version,
                saved.version,
            )
            return WorkoutMutationResult(success=True, workout=saved, changed=True)

        except EXPECTED_ERRORS as e:
            logger.warning(f"{operation} failed for workout {workout_id}: {e}")
            return WorkoutMutationResult.failed(e)

        except Exception as e:
            logger.exception(f"{operation} failed unexpectedly for workout {workout_id}: {e}")
            return WorkoutMutationResult(
                success=False,
                error=str(e),
                error_code=INTERNAL_ERROR,
            )
