"""
Exercise Catalog Interface (Port).

The catalog owns exercise definitions. The workout core only needs to turn
an exercise id into a display name when a placement is added; the name is
stored as a snapshot, not a live reference.
"""
from typing import Optional, Protocol


class ExerciseCatalog(Protocol):
    """Read-only lookup into the exercise catalog."""

    def get_exercise_name(self, exercise_id: str) -> Optional[str]:
        """
        Resolve a catalog exercise id to its display name.

        Args:
            exercise_id: Catalog exercise id

        Returns:
            Display name, or None if the catalog has no such exercise
        """
        ...
