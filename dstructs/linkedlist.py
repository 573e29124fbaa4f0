"""A singly linked list of values with reversal, cycle and middle-node helpers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ListNode:
    """One node of a singly linked list."""

    value: Any
    next: ListNode | None = None


class LinkedList:
    """A singly linked list; ``head`` is the first node or None when empty."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: ListNode | None = None
        tail: ListNode | None = None
        for value in items:
            node = ListNode(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> ListNode:
        if index < 0:
            raise IndexError(f"index {index} out of range")
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node
        raise IndexError(f"index {index} out of range")

    def append(self, value: Any) -> None:
        """Add ``value`` at the end of the list."""
        node = ListNode(value)
        if self.head is None:
            self.head = node
            return
        tail = self.head
        while tail.next is not None:
            tail = tail.next
        tail.next = node

    def push_front(self, value: Any) -> None:
        """Add ``value`` at the front of the list."""
        self.head = ListNode(value, self.head)

    def delete_after(self, index: int) -> Any:
        """Remove the node that follows position ``index`` and return its value.

        Raise IndexError when there is no node at ``index`` or none after it.
        """
        node = self._node_at(index)
        removed = node.next
        if removed is None:
            raise IndexError(f"no node after index {index}")
        node.next = removed.next
        return removed.value

    def clear(self) -> None:
        """Remove every node."""
        self.head = None

    def search(self, value: Any) -> int | None:
        """Return the position of the first node holding ``value``, or None."""
        for position, node in enumerate(self._nodes()):
            if node.value == value:
                return position
        return None

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous: ListNode | None = None
        node = self.head
        while node is not None:
            following = node.next
            node.next = previous
            previous = node
            node = following
        self.head = previous

    def has_cycle(self) -> bool:
        """Return True when following ``next`` links never reaches the end."""
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            slow = slow.next  # type: ignore[union-attr]
            fast = fast.next.next
            if slow is fast:
                return True
        return False

    def swap_even_pairs(self) -> None:
        """Walk adjacent pairs front to back, swapping a pair whose second value is even.

        For example ``1 2 3 4`` becomes ``2 1 4 3``.
        """
        node = self.head
        while node is not None and node.next is not None:
            if node.next.value % 2 == 0:
                node.value, node.next.value = node.next.value, node.value
            node = node.next

    def middle(self) -> Any:
        """Return the value of the middle node (the later one for an even length)."""
        if self.head is None:
            raise ValueError("middle() of an empty list")
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            slow = slow.next  # type: ignore[assignment]
            fast = fast.next.next
        return slow.value

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.value

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def format(self) -> str:
        """Render the values as ``v1->v2->...->``."""
        return "".join(f"{value}->" for value in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"