"""
Unit tests for the ordered child collection.

These tests verify:
- Append/remove/move bookkeeping
- Error precedence (not found before invalid order)
- Random operation sequences keep orders contiguous
"""

import random
from dataclasses import dataclass
from typing import List

import pytest

from domain.exceptions import DuplicateKeyError, InvalidOrderError, NotFoundError
from domain.models.ordering import OrderedChildren


@dataclass
class Item:
    key: str
    order: int = 0


def make_children(*keys: str) -> OrderedChildren:
    children = OrderedChildren([], key=lambda item: item.key, item_label="Item")
    for key in keys:
        children.append(Item(key))
    return children


def keys_in_order(children: OrderedChildren) -> List[str]:
    return [item.key for item in children.ordered()]


@pytest.mark.unit
class TestAppend:
    """Tests for OrderedChildren.append()."""

    def test_append_assigns_next_order(self):
        """Appended items get count + 1."""
        children = make_children("a", "b", "c")
        assert [item.order for item in children.ordered()] == [1, 2, 3]

    def test_append_duplicate_key_rejected(self):
        """A second item with the same key is rejected and nothing changes."""
        children = make_children("a", "b")

        with pytest.raises(DuplicateKeyError) as exc_info:
            children.append(Item("a"))

        assert exc_info.value.key == "a"
        assert len(children) == 2
        assert children.orders() == [1, 2]

    def test_append_uses_configured_error(self):
        """The duplicate error class is configurable."""

        class CustomDuplicate(DuplicateKeyError):
            pass

        children = OrderedChildren(
            [], key=lambda item: item.key, duplicate_error=CustomDuplicate
        )
        children.append(Item("a"))

        with pytest.raises(CustomDuplicate):
            children.append(Item("a"))

    def test_wraps_list_in_place(self):
        """Mutations are visible on the owner's list."""
        items: List[Item] = []
        children = OrderedChildren(items, key=lambda item: item.key)
        children.append(Item("a"))
        assert items == [Item("a", 1)]


@pytest.mark.unit
class TestRemove:
    """Tests for OrderedChildren.remove()."""

    def test_remove_renumbers_remaining(self):
        """Remaining items are renumbered 1..N-1 in their previous order."""
        children = make_children("a", "b", "c", "d")
        children.move("d", 1)  # d, a, b, c

        removed = children.remove("a")

        assert removed.key == "a"
        assert keys_in_order(children) == ["d", "b", "c"]
        assert children.orders() == [1, 2, 3]

    def test_remove_last_item(self):
        """Removing the only item leaves an empty collection."""
        children = make_children("a")
        children.remove("a")
        assert len(children) == 0

    def test_remove_missing_key(self):
        """Removing an unknown key raises NotFoundError."""
        children = make_children("a")

        with pytest.raises(NotFoundError) as exc_info:
            children.remove("zzz")

        assert exc_info.value.key == "zzz"
        assert len(children) == 1


@pytest.mark.unit
class TestMove:
    """Tests for OrderedChildren.move()."""

    def test_move_to_front(self):
        """Moving the last item to 1 shifts the others later."""
        children = make_children("a", "b", "c")

        assert children.move("c", 1) is True
        assert keys_in_order(children) == ["c", "a", "b"]

    def test_move_to_back(self):
        """Moving the first item to N shifts the others earlier."""
        children = make_children("a", "b", "c")

        assert children.move("a", 3) is True
        assert keys_in_order(children) == ["b", "c", "a"]

    def test_move_within_middle(self):
        """Only items between the old and new positions shift."""
        children = make_children("a", "b", "c", "d", "e")

        children.move("b", 4)

        assert keys_in_order(children) == ["a", "c", "d", "b", "e"]
        assert children.find("a").order == 1
        assert children.find("e").order == 5

    def test_move_to_same_order_is_noop(self):
        """Moving an item to its own position returns False."""
        children = make_children("a", "b")

        assert children.move("b", 2) is False
        assert keys_in_order(children) == ["a", "b"]

    @pytest.mark.parametrize("bad_order", [0, -1, 4, 100])
    def test_move_out_of_range(self, bad_order):
        """Positions outside 1..N are rejected and nothing changes."""
        children = make_children("a", "b", "c")

        with pytest.raises(InvalidOrderError) as exc_info:
            children.move("a", bad_order)

        assert exc_info.value.requested == bad_order
        assert exc_info.value.count == 3
        assert keys_in_order(children) == ["a", "b", "c"]

    def test_move_rejects_bool(self):
        """True is not accepted as position 1."""
        children = make_children("a", "b")
        with pytest.raises(InvalidOrderError):
            children.move("b", True)

    def test_missing_key_checked_before_order(self):
        """An unknown key wins over an invalid position."""
        children = make_children("a")
        with pytest.raises(NotFoundError):
            children.move("zzz", 99)

    def test_move_then_move_back_restores(self):
        """move(k, new) followed by move(k, old) restores the ordering."""
        children = make_children("a", "b", "c", "d")
        before = keys_in_order(children)

        children.move("b", 4)
        children.move("b", 2)

        assert keys_in_order(children) == before


@pytest.mark.unit
class TestQueries:
    """Tests for lookups and iteration."""

    def test_iteration_follows_order(self):
        """Iterating yields items by position, not list position."""
        children = make_children("a", "b", "c")
        children.move("c", 1)
        assert [item.key for item in children] == ["c", "a", "b"]

    def test_get_missing_key(self):
        """get() raises the configured not-found error."""
        children = make_children("a")
        with pytest.raises(NotFoundError, match="Item 'b' not found"):
            children.get("b")

    def test_contains_and_find(self):
        children = make_children("a")
        assert children.contains("a") is True
        assert children.contains("b") is False
        assert children.find("b") is None


@pytest.mark.unit
class TestOrderingProperties:
    """Randomized operation sequences."""

    @pytest.mark.parametrize("seed", range(25))
    def test_random_sequences_keep_orders_contiguous(self, seed):
        """Any mix of append/remove/move leaves orders exactly 1..N."""
        rng = random.Random(seed)
        children = make_children()
        next_key = 0

        for _ in range(60):
            operation = rng.choice(["append", "remove", "move"])
            if operation == "append" or len(children) == 0:
                children.append(Item(f"k{next_key}"))
                next_key += 1
            elif operation == "remove":
                key = rng.choice([item.key for item in children])
                children.remove(key)
            else:
                key = rng.choice([item.key for item in children])
                children.move(key, rng.randint(1, len(children)))

            assert children.orders() == list(range(1, len(children) + 1))

    @pytest.mark.parametrize("seed", range(10))
    def test_move_round_trip_restores_ordering(self, seed):
        """Moving an item away and back restores every position."""
        rng = random.Random(seed)
        children = make_children(*[f"k{i}" for i in range(rng.randint(2, 12))])
        for _ in range(5):
            children.move(rng.choice([i.key for i in children]), rng.randint(1, len(children)))
        before = keys_in_order(children)

        item = rng.choice(children.ordered())
        old_order = item.order
        children.move(item.key, rng.randint(1, len(children)))
        children.move(item.key, old_order)

        assert keys_in_order(children) == before

    @pytest.mark.parametrize("seed", range(10))
    def test_remove_then_readd_stays_within_count(self, seed):
        """A removed-and-re-added item lands at N, never beyond."""
        rng = random.Random(seed)
        children = make_children(*[f"k{i}" for i in range(rng.randint(1, 10))])
        key = rng.choice([i.key for i in children])

        children.remove(key)
        readded = children.append(Item(key))

        assert readded.order == len(children)
        assert max(children.orders()) == len(children)
