"""
Duration roll-up for phases and workouts.

A placement's estimated time comes from a single function,
estimate_time_seconds(), covering every parameter combination:

- duration-based: duration per set plus rest between sets
- distance-based: distance at a pace chosen by distance band
- reps-based: a fixed allowance per repetition plus rest between sets

A phase with placements sums their estimates (rounded up per placement to
whole minutes); an empty phase falls back to a per-type default. A workout
sums its phases and never reports less than one minute.
"""

import math
from typing import TYPE_CHECKING, Dict, Iterable

from domain.models.enums import PhaseType

if TYPE_CHECKING:
    from domain.models.workout_exercise import WorkoutExercise
    from domain.models.workout_phase import WorkoutPhase


SECONDS_PER_REP = 2
SECONDS_PER_SET_WITHOUT_REPS = 30
DEFAULT_REST_SECONDS = 45

DEFAULT_PHASE_DURATION_MINUTES: Dict[PhaseType, int] = {
    PhaseType.WARM_UP: 8,
    PhaseType.MAIN_EFFORT: 25,
    PhaseType.RECOVERY: 10,
    PhaseType.COOL_DOWN: 5,
    PhaseType.STRETCHING: 10,
}
FALLBACK_PHASE_DURATION_MINUTES = 15

MINIMUM_WORKOUT_DURATION_MINUTES = 1

# (upper bound in km, pace in minutes per km)
_PACE_BANDS = (
    (1.0, 5.5),
    (3.0, 6.0),
    (5.0, 6.5),
    (10.0, 7.0),
    (21.0, 7.5),
)
_LONG_DISTANCE_PACE = 8.0


def default_phase_duration(phase_type: PhaseType) -> int:
    """Default duration in minutes for a phase with no placements."""
    return DEFAULT_PHASE_DURATION_MINUTES.get(phase_type, FALLBACK_PHASE_DURATION_MINUTES)


def running_pace_min_per_km(distance_km: float) -> float:
    """Typical pace for a given distance; longer efforts run slower."""
    for upper_km, pace in _PACE_BANDS:
        if distance_km <= upper_km:
            return pace
    return _LONG_DISTANCE_PACE


def estimate_time_seconds(placement: "WorkoutExercise") -> int:
    """
    Estimate how long a placement takes, in seconds.

    Args:
        placement: Exercise placement with its performance parameters.

    Returns:
        Estimated seconds, 0 if the placement carries no effort parameters.
    """
    sets = placement.sets or 1
    rest_between_sets = (placement.rest_seconds or 0) * (sets - 1)

    if placement.duration_seconds is not None:
        return placement.duration_seconds * sets + rest_between_sets

    if placement.distance_meters is not None:
        distance_km = placement.distance_meters / 1000.0
        work = distance_km * running_pace_min_per_km(distance_km) * 60
        return int(math.ceil(work * sets)) + rest_between_sets

    if placement.reps is not None:
        rest = placement.rest_seconds if placement.rest_seconds is not None else DEFAULT_REST_SECONDS
        return sets * placement.reps * SECONDS_PER_REP + rest * (sets - 1)

    if placement.sets is not None:
        rest = placement.rest_seconds if placement.rest_seconds is not None else DEFAULT_REST_SECONDS
        return sets * SECONDS_PER_SET_WITHOUT_REPS + rest * (sets - 1)

    return 0


def estimate_time_minutes(placement: "WorkoutExercise") -> int:
    """Estimated time rounded up to whole minutes."""
    seconds = estimate_time_seconds(placement)
    if seconds <= 0:
        return 0
    return int(math.ceil(seconds / 60.0))


def phase_duration_minutes(
    exercises: Iterable["WorkoutExercise"], phase_type: PhaseType
) -> int:
    """
    Roll up a phase's duration.

    Returns the sum of placement estimates, or the phase-type default when
    the phase has no placements.
    """
    placements = list(exercises)
    if not placements:
        return default_phase_duration(phase_type)
    return sum(estimate_time_minutes(p) for p in placements)


def workout_duration_minutes(phases: Iterable["WorkoutPhase"]) -> int:
    """Sum of phase durations, floored at one minute."""
    total = sum(phase.estimated_duration_minutes for phase in phases)
    return max(MINIMUM_WORKOUT_DURATION_MINUTES, total)
