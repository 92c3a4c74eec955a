"""
Ordered child collection used for phases within a workout and exercise
placements within a phase.

The collection wraps the owning model's list in place. Items keep a 1-based
``order`` attribute; the list itself is never reordered, so callers that
need display order use ``ordered()``.

Renumbering differs between the two mutations:
- remove() does a full stable pass, reassigning 1..N-1 by current order
- move() shifts only the items between the old and new position

Examples:
    >>> children = OrderedChildren(phase.exercises, key=lambda e: e.exercise_id,
    ...                            item_label="Exercise")
    >>> children.append(placement)
    >>> children.move("ex-2", 1)
    True
"""

from typing import Callable, Generic, Iterator, List, Optional, Protocol, Type, TypeVar

from domain.exceptions import DuplicateKeyError, InvalidOrderError, NotFoundError


class Ordered(Protocol):
    """Anything carrying a mutable 1-based position."""

    order: int


T = TypeVar("T", bound=Ordered)
K = TypeVar("K")


class OrderedChildren(Generic[T, K]):
    """
    Insert/remove/move bookkeeping for a list of ordered children.

    Uniqueness is checked by scanning for an equal key; the collection is
    a list on purpose since positions are load-bearing.
    """

    def __init__(
        self,
        items: List[T],
        key: Callable[[T], K],
        *,
        item_label: str = "Item",
        duplicate_error: Type[DuplicateKeyError] = DuplicateKeyError,
        not_found_error: Type[NotFoundError] = NotFoundError,
    ) -> None:
        self._items = items
        self._key = key
        self._label = item_label
        self._duplicate_error = duplicate_error
        self._not_found_error = not_found_error

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.ordered())

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def find(self, key: K) -> Optional[T]:
        """Return the item with the given key, or None."""
        for item in self._items:
            if self._key(item) == key:
                return item
        return None

    def get(self, key: K) -> T:
        """Return the item with the given key, raising if absent."""
        item = self.find(key)
        if item is None:
            raise self._not_found_error(f"{self._label} '{_display(key)}' not found", key=key)
        return item

    def contains(self, key: K) -> bool:
        return self.find(key) is not None

    def ordered(self) -> List[T]:
        """Items sorted by position."""
        return sorted(self._items, key=lambda item: item.order)

    def orders(self) -> List[int]:
        return sorted(item.order for item in self._items)

    def check_position(self, position: int, upper: Optional[int] = None) -> None:
        """
        Raise InvalidOrderError unless 1 <= position <= upper.

        Args:
            position: Requested 1-based position.
            upper: Highest allowed position, defaults to the current count.
        """
        limit = len(self._items) if upper is None else upper
        if isinstance(position, bool) or not isinstance(position, int) or position < 1 or position > limit:
            raise InvalidOrderError(
                f"Invalid {self._label.lower()} order position {position}: must be between 1 and {limit}",
                requested=position if isinstance(position, int) else None,
                count=limit,
            )

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def append(self, item: T) -> T:
        """
        Add an item at the end of the sequence.

        Raises:
            DuplicateKeyError: If an item with the same key exists.
        """
        key = self._key(item)
        if self.contains(key):
            raise self._duplicate_error(
                f"{self._label} '{_display(key)}' already exists", key=key
            )
        item.order = len(self._items) + 1
        self._items.append(item)
        return item

    def remove(self, key: K) -> T:
        """
        Remove an item and renumber the rest 1..N-1 by their current order.

        Raises:
            NotFoundError: If no item has the key.
        """
        item = self.get(key)
        index = next(i for i, candidate in enumerate(self._items) if candidate is item)
        del self._items[index]
        for position, remaining in enumerate(self.ordered(), start=1):
            remaining.order = position
        return item

    def move(self, key: K, new_order: int) -> bool:
        """
        Put an item at new_order, shifting only the items in between.

        Returns:
            True if positions changed, False when already at new_order.

        Raises:
            NotFoundError: If no item has the key.
            InvalidOrderError: If new_order is outside [1, count].
        """
        target = self.get(key)
        self.check_position(new_order)

        old_order = target.order
        if new_order == old_order:
            return False

        target.order = new_order
        for item in self._items:
            if item is target:
                continue
            original = item.order
            if old_order < new_order and old_order < original <= new_order:
                item.order = original - 1
            elif old_order > new_order and new_order <= original < old_order:
                item.order = original + 1
        return True


def _display(key: object) -> str:
    value = getattr(key, "value", key)
    return str(value)
