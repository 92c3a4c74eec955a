"""
Workout aggregate root - the main domain entity.

All structural changes to phases and exercise placements flow through the
Workout so that positions, uniqueness, the duration roll-up and the
updated_at timestamp stay consistent.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from domain.exceptions import DuplicatePhaseTypeError, PhaseNotFoundError
from domain.models.enums import (
    DifficultyLevel,
    EquipmentType,
    PhaseType,
    WorkoutCategory,
    WorkoutType,
)
from domain.models.ordering import OrderedChildren
from domain.models.workout_exercise import WorkoutExercise
from domain.models.workout_phase import WorkoutPhase
from domain.services.duration_calculator import workout_duration_minutes
from domain.validation import (
    MAX_DURATION_MINUTES,
    MIN_DURATION_MINUTES,
    WORKOUT_DESCRIPTION_MAX_LENGTH,
    WORKOUT_NAME_MAX_LENGTH,
    clamp_duration_minutes,
    coerce_enum,
    dedupe,
    from_pydantic_error,
    optional_text,
    require_duration_minutes,
    require_text,
)

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _clean_equipment(equipment: List[EquipmentType]) -> List[EquipmentType]:
    return dedupe([coerce_enum(EquipmentType, e, "equipment") for e in equipment])


class Workout(BaseModel):
    """
    Aggregate root representing a complete workout.

    A Workout contains:
    - Identity (id, name)
    - Classification (type, category, difficulty, equipment)
    - Ownership (created_by_user_id / created_by_coach_id)
    - Structure (ordered phases, each with ordered exercise placements)
    - Audit (created_at, updated_at, version)

    Mutating methods validate their input before touching any state and
    refresh updated_at once, and only when something actually changed.
    The version field belongs to persistence (optimistic locking) and is
    never changed here.

    Examples:
        >>> workout = Workout.create_user_workout(
        ...     "Leg Day", user_id="user-123", difficulty=DifficultyLevel.INTERMEDIATE
        ... )
        >>> warm_up = workout.add_phase(PhaseType.WARM_UP, "Warm-up")
        >>> main = workout.add_phase(PhaseType.MAIN_EFFORT, "Main Lifts")
        >>> workout.add_exercise(
        ...     PhaseType.MAIN_EFFORT, "ex-squat", "Back Squat", sets=5, reps=5
        ... )
        >>> workout.move_phase(PhaseType.MAIN_EFFORT, 1)
        True
    """

    # Identity
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str = Field(..., description="Workout name (trimmed, 1-200 chars)")
    description: Optional[str] = Field(default=None, description="Optional description")

    # Classification
    workout_type: WorkoutType = Field(default=WorkoutType.USER_CREATED)
    category: WorkoutCategory = Field(default=WorkoutCategory.MIXED)
    difficulty: DifficultyLevel = Field(default=DifficultyLevel.BEGINNER)
    required_equipment: List[EquipmentType] = Field(default_factory=list)
    is_active: bool = Field(default=True)
    image_content_id: Optional[str] = Field(default=None)

    # Ownership
    created_by_user_id: Optional[str] = Field(default=None)
    created_by_coach_id: Optional[str] = Field(default=None)

    # Derived
    estimated_duration_minutes: int = Field(
        default=MIN_DURATION_MINUTES, ge=MIN_DURATION_MINUTES, le=MAX_DURATION_MINUTES
    )

    # Structure
    phases: List[WorkoutPhase] = Field(default_factory=list)

    # Audit
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: Optional[datetime] = Field(default=None)
    version: int = Field(default=0, ge=0, description="Optimistic concurrency stamp")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return require_text(v, "Workout name", WORKOUT_NAME_MAX_LENGTH)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: Optional[str]) -> Optional[str]:
        return optional_text(v, "Workout description", WORKOUT_DESCRIPTION_MAX_LENGTH)

    @field_validator("required_equipment")
    @classmethod
    def validate_required_equipment(cls, v: List[EquipmentType]) -> List[EquipmentType]:
        """Deduplicate equipment while preserving order."""
        return dedupe(v)

    @model_validator(mode="after")
    def validate_phase_structure(self) -> "Workout":
        """Reject duplicate phase types and gaps in phase orders."""
        phase_types = [p.phase_type for p in self.phases]
        if len(set(phase_types)) != len(phase_types):
            raise ValueError("A workout can hold only one phase of each type")
        orders = sorted(p.order for p in self.phases)
        if orders != list(range(1, len(orders) + 1)):
            raise ValueError(f"Phase orders must be 1..{len(orders)}, got {orders}")
        return self

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def _build(cls, **data: Any) -> "Workout":
        try:
            return cls(**data)
        except ValidationError as e:
            raise from_pydantic_error("Invalid workout", e) from e

    @classmethod
    def create_user_workout(cls, name: str, *, user_id: str, **attributes: Any) -> "Workout":
        """Workout owned by a single user."""
        return cls._build(
            name=name,
            workout_type=WorkoutType.USER_CREATED,
            created_by_user_id=user_id,
            **attributes,
        )

    @classmethod
    def create_coach_workout(cls, name: str, *, coach_id: str, **attributes: Any) -> "Workout":
        """Workout published by a coach; visible to everyone."""
        return cls._build(
            name=name,
            workout_type=WorkoutType.COACH_CREATED,
            created_by_coach_id=coach_id,
            **attributes,
        )

    @classmethod
    def create_template(cls, name: str, **attributes: Any) -> "Workout":
        """System-wide preset with no owner."""
        return cls._build(name=name, workout_type=WorkoutType.TEMPLATE, **attributes)

    @classmethod
    def create_ai_generated(cls, name: str, **attributes: Any) -> "Workout":
        """System-wide workout produced by the generation pipeline."""
        return cls._build(name=name, workout_type=WorkoutType.AI_GENERATED, **attributes)

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def phase_list(self) -> OrderedChildren[WorkoutPhase, PhaseType]:
        return OrderedChildren(
            self.phases,
            key=lambda p: p.phase_type,
            item_label="Phase",
            duplicate_error=DuplicatePhaseTypeError,
            not_found_error=PhaseNotFoundError,
        )

    @property
    def phase_count(self) -> int:
        return len(self.phases)

    @property
    def total_exercises(self) -> int:
        """Placements across all phases."""
        return sum(phase.exercise_count for phase in self.phases)

    @property
    def ordered_phases(self) -> List[WorkoutPhase]:
        """Phases in execution order."""
        return self.phase_list.ordered()

    @property
    def is_system_workout(self) -> bool:
        """True when neither a user nor a coach owns the workout."""
        return self.created_by_user_id is None and self.created_by_coach_id is None

    def is_created_by_user(self, user_id: Optional[str]) -> bool:
        return user_id is not None and self.created_by_user_id == user_id

    def is_created_by_coach(self, coach_id: Optional[str]) -> bool:
        return coach_id is not None and self.created_by_coach_id == coach_id

    def get_phase(self, phase_type: PhaseType) -> Optional[WorkoutPhase]:
        return self.phase_list.find(phase_type)

    def get_phase_by_id(self, phase_id: str) -> Optional[WorkoutPhase]:
        for phase in self.phases:
            if phase.id == phase_id:
                return phase
        return None

    def has_phase(self, phase_type: PhaseType) -> bool:
        return self.phase_list.contains(phase_type)

    def calculate_actual_duration_minutes(self) -> int:
        """Sum of phase durations, at least one minute."""
        return workout_duration_minutes(self.phases)

    # -------------------------------------------------------------------------
    # Phase Operations
    # -------------------------------------------------------------------------

    def add_phase(
        self,
        phase_type: PhaseType,
        name: str,
        order_hint: Optional[int] = None,
        description: Optional[str] = None,
    ) -> WorkoutPhase:
        """
        Append a phase, optionally placing it at order_hint.

        Args:
            phase_type: Type of the new phase; one per workout.
            name: Phase name.
            order_hint: Desired 1-based position (1..phase_count + 1).
            description: Optional phase description.

        Returns:
            The new phase, with the default duration for its type.

        Raises:
            DuplicatePhaseTypeError: If a phase of this type exists.
            InvalidOrderError: If order_hint is out of range.
            WorkoutValidationError: If name or description is invalid.
        """
        phase_type = coerce_enum(PhaseType, phase_type, "phase type")
        phases = self.phase_list
        if phases.contains(phase_type):
            raise DuplicatePhaseTypeError(
                f"Workout already has a {phase_type.value} phase", key=phase_type
            )
        if order_hint is not None:
            phases.check_position(order_hint, upper=len(phases) + 1)

        try:
            phase = WorkoutPhase(phase_type=phase_type, name=name, description=description)
        except ValidationError as e:
            raise from_pydantic_error("Invalid phase", e) from e
        phase.recalculate_duration()

        phases.append(phase)
        if order_hint is not None:
            phases.move(phase_type, order_hint)

        logger.debug("Added %s phase to workout %s at order %d", phase_type.value, self.id, phase.order)
        self._after_structure_change()
        return phase

    def remove_phase(self, phase_type: PhaseType) -> WorkoutPhase:
        """
        Remove a phase; remaining phases are renumbered 1..N-1.

        Raises:
            PhaseNotFoundError: If the workout has no phase of this type.
        """
        removed = self.phase_list.remove(coerce_enum(PhaseType, phase_type, "phase type"))
        logger.debug("Removed %s phase from workout %s", removed.phase_type.value, self.id)
        self._after_structure_change()
        return removed

    def move_phase(self, phase_type: PhaseType, new_order: int) -> bool:
        """
        Move a phase to new_order, shifting the phases in between.

        Returns:
            True if positions changed, False if it was already there.

        Raises:
            PhaseNotFoundError: If the workout has no phase of this type.
            InvalidOrderError: If new_order is outside [1, phase_count].
        """
        changed = self.phase_list.move(coerce_enum(PhaseType, phase_type, "phase type"), new_order)
        if changed:
            self._touch()
        return changed

    def update_phase(
        self,
        phase_type: PhaseType,
        name: Optional[str] = None,
        description: Optional[str] = None,
    ) -> bool:
        """Rename or re-describe a phase."""
        phase = self._require_phase(phase_type)
        changed = phase.update_details(name=name, description=description)
        if changed:
            self._touch()
        return changed

    # -------------------------------------------------------------------------
    # Exercise Operations
    # -------------------------------------------------------------------------

    def add_exercise(
        self,
        phase_type: PhaseType,
        exercise_id: str,
        exercise_name: str,
        **parameters: Any,
    ) -> WorkoutExercise:
        """
        Place a catalog exercise at the end of a phase.

        Raises:
            PhaseNotFoundError: If the workout has no phase of this type.
            DuplicateExerciseError: If the phase already places the exercise.
            WorkoutValidationError: If the parameters are invalid.
        """
        placement = self._require_phase(phase_type).add_exercise(
            exercise_id, exercise_name, **parameters
        )
        self._after_structure_change()
        return placement

    def remove_exercise(self, phase_type: PhaseType, exercise_id: str) -> WorkoutExercise:
        """Remove a placement from a phase; the rest are renumbered."""
        removed = self._require_phase(phase_type).remove_exercise(exercise_id)
        self._after_structure_change()
        return removed

    def move_exercise(self, phase_type: PhaseType, exercise_id: str, new_order: int) -> bool:
        """Reposition a placement within its phase."""
        changed = self._require_phase(phase_type).move_exercise(exercise_id, new_order)
        if changed:
            self._touch()
        return changed

    def update_exercise(self, phase_type: PhaseType, exercise_id: str, **changes: Any) -> bool:
        """Edit a placement's parameters or notes in place."""
        changed = self._require_phase(phase_type).update_exercise_parameters(exercise_id, **changes)
        if changed:
            self._touch()
        return changed

    # -------------------------------------------------------------------------
    # Detail Operations
    # -------------------------------------------------------------------------

    def update_details(
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        difficulty: Optional[DifficultyLevel] = None,
        duration_minutes: Optional[int] = None,
        category: Optional[WorkoutCategory] = None,
        required_equipment: Optional[List[EquipmentType]] = None,
    ) -> bool:
        """
        Update descriptive fields. Arguments left as None are unchanged;
        an empty description clears it and an empty equipment list clears
        the equipment.

        Every given value is validated before any is applied, so a bad
        category leaves a valid name unapplied too.

        Returns:
            True if anything changed.
        """
        updates = {}
        if name is not None:
            updates["name"] = require_text(name, "Workout name", WORKOUT_NAME_MAX_LENGTH)
        if description is not None:
            updates["description"] = optional_text(
                description, "Workout description", WORKOUT_DESCRIPTION_MAX_LENGTH
            )
        if difficulty is not None:
            updates["difficulty"] = coerce_enum(DifficultyLevel, difficulty, "difficulty")
        if duration_minutes is not None:
            updates["estimated_duration_minutes"] = require_duration_minutes(
                duration_minutes, "Workout duration"
            )
        if category is not None:
            updates["category"] = coerce_enum(WorkoutCategory, category, "category")
        if required_equipment is not None:
            updates["required_equipment"] = _clean_equipment(required_equipment)
        return self._apply(updates)

    def set_category(self, category: WorkoutCategory) -> bool:
        return self._apply({"category": coerce_enum(WorkoutCategory, category, "category")})

    def set_required_equipment(self, equipment: List[EquipmentType]) -> bool:
        return self._apply({"required_equipment": _clean_equipment(equipment)})

    def set_image_content(self, image_content_id: Optional[str]) -> bool:
        return self._apply({"image_content_id": image_content_id})

    def activate(self) -> bool:
        """Mark the workout active. Returns False if it already was."""
        return self._apply({"is_active": True})

    def deactivate(self) -> bool:
        """Mark the workout inactive. Returns False if it already was."""
        return self._apply({"is_active": False})

    def duplicate(self, new_name: str, *, user_id: str) -> "Workout":
        """
        Copy this workout as a new user-owned workout.

        Phases and placements are copied with fresh ids; positions,
        parameters and durations are kept.

        Args:
            new_name: Name of the copy.
            user_id: Owner of the copy.
        """
        phases = []
        for phase in self.phases:
            exercises = [
                exercise.model_copy(update={"id": str(uuid.uuid4())})
                for exercise in phase.exercises
            ]
            phases.append(
                phase.model_copy(update={"id": str(uuid.uuid4()), "exercises": exercises})
            )

        return Workout.create_user_workout(
            new_name,
            user_id=user_id,
            description=self.description,
            category=self.category,
            difficulty=self.difficulty,
            required_equipment=list(self.required_equipment),
            image_content_id=self.image_content_id,
            estimated_duration_minutes=self.estimated_duration_minutes,
            phases=phases,
        )

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _require_phase(self, phase_type: PhaseType) -> WorkoutPhase:
        return self.phase_list.get(coerce_enum(PhaseType, phase_type, "phase type"))

    def _apply(self, updates: dict) -> bool:
        changed = False
        for field_name, value in updates.items():
            if getattr(self, field_name) != value:
                setattr(self, field_name, value)
                changed = True
        if changed:
            self._touch()
        return changed

    def _after_structure_change(self) -> None:
        self.estimated_duration_minutes = clamp_duration_minutes(
            self.calculate_actual_duration_minutes()
        )
        self._touch()

    def _touch(self) -> None:
        self.updated_at = _utcnow()

    def __str__(self) -> str:
        parts = [f'"{self.name}"', f"{self.phase_count} phases", f"{self.total_exercises} exercises"]
        parts.append(f"~{self.estimated_duration_minutes} min")
        if not self.is_active:
            parts.append("[inactive]")
        return f"Workout({', '.join(parts)})"

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": "550e8400-e29b-41d4-a716-446655440000",
                    "name": "Leg Day",
                    "workout_type": "user_created",
                    "category": "strength",
                    "difficulty": "intermediate",
                    "created_by_user_id": "user-123",
                    "estimated_duration_minutes": 33,
                    "phases": [
                        {
                            "phase_type": "warm_up",
                            "name": "Warm-up",
                            "order": 1,
                            "estimated_duration_minutes": 8,
                            "exercises": [],
                        },
                        {
                            "phase_type": "main_effort",
                            "name": "Main Lifts",
                            "order": 2,
                            "estimated_duration_minutes": 25,
                            "exercises": [],
                        },
                    ],
                }
            ]
        },
    }
