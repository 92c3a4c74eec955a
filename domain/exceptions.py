"""
Domain exceptions for the workout aggregate.

All errors raised by the domain layer derive from WorkoutDomainError so the
application layer can catch them in one place. Every error is raised before
the aggregate is mutated, so a failed call leaves the workout unchanged.
"""

from typing import Any, List, Optional


class WorkoutDomainError(Exception):
    """Base exception for workout domain errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class WorkoutValidationError(WorkoutDomainError, ValueError):
    """Raised when input to a factory or mutator is malformed."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = errors or [message]


class DuplicateKeyError(WorkoutDomainError):
    """Raised when an item with the same uniqueness key already exists."""

    def __init__(self, message: str, *, key: Any = None):
        super().__init__(message)
        self.key = key


class DuplicatePhaseTypeError(DuplicateKeyError):
    """Raised when a workout already has a phase of the requested type."""


class DuplicateExerciseError(DuplicateKeyError):
    """Raised when a phase already places the requested catalog exercise."""


class NotFoundError(WorkoutDomainError):
    """Raised when a referenced child item does not exist."""

    def __init__(self, message: str, *, key: Any = None):
        super().__init__(message)
        self.key = key


class PhaseNotFoundError(NotFoundError):
    """Raised when a workout has no phase with the requested type or id."""


class ExerciseNotFoundError(NotFoundError):
    """Raised when a phase has no placement for the requested catalog id."""


class InvalidOrderError(WorkoutDomainError):
    """Raised when a requested position lies outside [1, count]."""

    def __init__(self, message: str, *, requested: Optional[int] = None, count: Optional[int] = None):
        super().__init__(message)
        self.requested = requested
        self.count = count


class AuthorizationError(WorkoutDomainError):
    """Raised when the actor lacks the capability for an action."""

    def __init__(self, message: str, *, action: Optional[str] = None, actor_id: Optional[str] = None):
        super().__init__(message)
        self.action = action
        self.actor_id = actor_id
