"""
Domain services for the workout aggregate.

- duration_calculator: phase and workout duration roll-up
- workout_authorization: ownership-based view/modify/delete/create rules
"""

from domain.services.duration_calculator import (
    default_phase_duration,
    estimate_time_minutes,
    estimate_time_seconds,
    phase_duration_minutes,
    workout_duration_minutes,
)
from domain.services.workout_authorization import (
    can_create,
    can_delete,
    can_modify,
    can_view,
    ensure_can_create,
    ensure_can_delete,
    ensure_can_modify,
    ensure_can_view,
)

__all__ = [
    # Duration roll-up
    "default_phase_duration",
    "estimate_time_seconds",
    "estimate_time_minutes",
    "phase_duration_minutes",
    "workout_duration_minutes",
    # Authorization
    "can_view",
    "can_modify",
    "can_delete",
    "can_create",
    "ensure_can_view",
    "ensure_can_modify",
    "ensure_can_delete",
    "ensure_can_create",
]
