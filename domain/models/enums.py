"""
Closed value sets used by the workout aggregate.
"""

from enum import Enum


class WorkoutType(str, Enum):
    """
    How a workout came to exist.

    - USER_CREATED: built by a user for themselves
    - COACH_CREATED: published by a coach
    - TEMPLATE: preset shipped with the system
    - AI_GENERATED: produced by the generation pipeline
    """

    USER_CREATED = "user_created"
    COACH_CREATED = "coach_created"
    TEMPLATE = "template"
    AI_GENERATED = "ai_generated"


class WorkoutCategory(str, Enum):
    """Broad training focus of a workout."""

    STRENGTH = "strength"
    CARDIO = "cardio"
    HIIT = "hiit"
    MOBILITY = "mobility"
    ENDURANCE = "endurance"
    MIXED = "mixed"


class DifficultyLevel(str, Enum):
    """Difficulty of a workout."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


class EquipmentType(str, Enum):
    """Equipment a workout may require."""

    NONE = "none"
    FREE_WEIGHTS = "free_weights"
    RESISTANCE_BANDS = "resistance_bands"
    PULL_UP_BAR = "pull_up_bar"
    MAT = "mat"
    KETTLEBELL = "kettlebell"
    CABLE_MACHINE = "cable_machine"
    GYM_EQUIPMENT = "gym_equipment"
    CARDIO_EQUIPMENT = "cardio_equipment"


class PhaseType(str, Enum):
    """
    Phases a workout can be split into. A workout holds at most one
    phase of each type.
    """

    WARM_UP = "warm_up"
    MAIN_EFFORT = "main_effort"
    RECOVERY = "recovery"
    COOL_DOWN = "cool_down"
    STRETCHING = "stretching"
    FINISHER = "finisher"
