"""A singly linked list with removal of arbitrary nodes and deletion callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One element of a LinkedList."""

    value: Any
    next: Optional[Node] = None


def _dispose(node: Node, on_delete: Callable[[Any], object] | None) -> None:
    if on_delete is not None and node.value is not None:
        on_delete(node.value)
    node.next = None


class LinkedList:
    """A singly linked list of values, reachable from its head node."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        tail: Node | None = None
        for value in items:
            node = Node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.value

    def push_front(self, value: Any) -> Node:
        """Insert value at the front and return its node."""
        node = Node(value, self.head)
        self.head = node
        return node

    def push_back(self, value: Any) -> Node:
        """Append value at the end and return its node."""
        node = Node(value)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """Return the last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def remove(self, node: Node, on_delete: Callable[[Any], object] | None = None) -> bool:
        """Unlink node from the list; on_delete receives its value if it is not None.

        Returns True when the node was found and removed.
        """
        if self.head is None:
            return False
        if self.head is node:
            self.head = node.next
            _dispose(node, on_delete)
            return True
        for prev in self._nodes():
            if prev.next is node:
                prev.next = node.next
                _dispose(node, on_delete)
                return True
        return False

    def clear(self, on_delete: Callable[[Any], object] | None = None) -> None:
        """Remove every node, passing each non-None value to on_delete."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            _dispose(node, on_delete)
            node = following

    def for_each(self, func: Callable[[Any], object]) -> None:
        """Call func on every value, front to back."""
        for value in self:
            func(value)

    def map(self, func: Callable[[Any], Any]) -> LinkedList:
        """Return a new list holding func applied to every value."""
        return LinkedList(func(value) for value in self)

    def to_list(self, select: Callable[[Any], Any] | None = None) -> list[Any]:
        """Return the values as a Python list, each passed through select if given."""
        if select is None:
            return list(self)
        return [select(value) for value in self]