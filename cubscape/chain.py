"""A singly linked chain of values with in-place append, iteration and mapping."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """One link of a chain: a value and the link that follows it."""

    value: Any
    next: Optional["Node"] = None


class Chain:
    """A singly linked list of values."""

    def __init__(self, values: Any = ()) -> None:
        self.head: Node | None = None
        for value in values:
            self.push_back(value)

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __bool__(self) -> bool:
        return self.head is not None

    def __repr__(self) -> str:
        return f"Chain({list(self)!r})"

    def push_front(self, value: Any) -> Node:
        """Insert ``value`` at the front and return its node."""
        self.head = Node(value, self.head)
        return self.head

    def push_back(self, value: Any) -> Node:
        """Append ``value`` at the end and return its node."""
        node = Node(value)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """The final node, or None for an empty chain."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every value in order."""
        for value in self:
            func(value)

    def map(
        self, func: Callable[[Any], Any], dispose: Callable[[Any], Any]
    ) -> "Chain":
        """Build a new chain of ``func(value)`` for every value.

        If ``func`` yields None for any value, the values mapped so far are
        passed to ``dispose`` and ValueError is raised.
        """
        result = Chain()
        for value in self:
            mapped = func(value)
            if mapped is None:
                result.clear(dispose)
                raise ValueError("mapping produced no value")
            result.push_back(mapped)
        return result

    def clear(self, dispose: Callable[[Any], Any] | None = None) -> None:
        """Remove every node, passing each non-None value to ``dispose`` first."""
        for value in self:
            if dispose is not None and value is not None:
                dispose(value)
        self.head = None