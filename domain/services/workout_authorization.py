"""
Ownership-based access rules for workouts.

The decision depends only on the workout's ownership fields and the id of
the actor asking:

    | Workout kind                      | View            | Modify / Delete |
    |-----------------------------------|-----------------|-----------------|
    | System-wide (no user, no coach)   | everyone        | nobody          |
    | Owned by a user                   | only that user  | only that user  |
    | Owned by a coach                  | everyone        | only that coach |

An absent actor (None or empty) is unauthenticated: it may view system and
coach workouts and nothing else. When both owner fields are set the user
rule applies.

Callers must pass every mutating entry point through the matching
ensure_* function before touching the aggregate.
"""

from typing import TYPE_CHECKING, Optional

from domain.exceptions import AuthorizationError

if TYPE_CHECKING:
    from domain.models.workout import Workout


def _authenticated(actor_id: Optional[str]) -> bool:
    return bool(actor_id)


def can_view(workout: Optional["Workout"], actor_id: Optional[str]) -> bool:
    """Check whether the actor may see the workout."""
    if workout is None:
        return False
    if workout.created_by_user_id is not None:
        return _authenticated(actor_id) and workout.created_by_user_id == actor_id
    # System-wide and coach workouts are public
    return True


def can_modify(workout: Optional["Workout"], actor_id: Optional[str]) -> bool:
    """Check whether the actor may change the workout."""
    if workout is None or not _authenticated(actor_id):
        return False
    if workout.created_by_user_id is not None:
        return workout.created_by_user_id == actor_id
    if workout.created_by_coach_id is not None:
        return workout.created_by_coach_id == actor_id
    return False


def can_delete(workout: Optional["Workout"], actor_id: Optional[str]) -> bool:
    """Deletion follows the same ownership rule as modification."""
    return can_modify(workout, actor_id)


def can_create(actor_id: Optional[str]) -> bool:
    """Any authenticated actor may create workouts."""
    return _authenticated(actor_id)


def ensure_can_view(workout: Optional["Workout"], actor_id: Optional[str]) -> None:
    if not can_view(workout, actor_id):
        raise AuthorizationError(
            "You don't have permission to view this workout",
            action="view",
            actor_id=actor_id,
        )


def ensure_can_modify(workout: Optional["Workout"], actor_id: Optional[str]) -> None:
    if not can_modify(workout, actor_id):
        raise AuthorizationError(
            "You don't have permission to modify this workout. "
            "You can only modify workouts you created.",
            action="modify",
            actor_id=actor_id,
        )


def ensure_can_delete(workout: Optional["Workout"], actor_id: Optional[str]) -> None:
    if not can_delete(workout, actor_id):
        raise AuthorizationError(
            "You don't have permission to delete this workout. "
            "You can only delete workouts you created.",
            action="delete",
            actor_id=actor_id,
        )


def ensure_can_create(actor_id: Optional[str]) -> None:
    if not can_create(actor_id):
        raise AuthorizationError(
            "You must be authenticated to create workouts",
            action="create",
            actor_id=actor_id,
        )
