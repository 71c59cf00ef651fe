"""A singly linked list with the usual push, map, iteration and sort operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass
class Node(Generic[T]):
    """One link of a list: a value and the node that follows it."""

    value: T
    next: Optional["Node[T]"] = None


class LinkedList(Generic[T]):
    """A singly linked list that keeps track of its tail and its length."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self.head: Optional[Node[T]] = None
        self._tail: Optional[Node[T]] = None
        self._size = 0
        for item in items or ():
            self.push_back(item)

    def push_front(self, value: T) -> None:
        """Insert ``value`` before the first element."""
        node = Node(value, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, value: T) -> None:
        """Append ``value`` after the last element."""
        node = Node(value)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> T:
        """Return the value of the last element; raise IndexError when empty."""
        if self._tail is None:
            raise IndexError("last() on an empty list")
        return self._tail.value

    def clear(self, on_delete: Optional[Callable[[T], Any]] = None) -> None:
        """Remove every element, calling ``on_delete`` on each value in order."""
        node = self.head
        while node is not None:
            following = node.next
            if on_delete is not None:
                on_delete(node.value)
            node.next = None
            node = following
        self.head = None
        self._tail = None
        self._size = 0

    def for_each(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` on every value, front to back."""
        for value in self:
            func(value)

    def map(self, func: Callable[[T], U]) -> "LinkedList[U]":
        """Return a new list holding ``func`` applied to every value."""
        return LinkedList(func(value) for value in self)

    def sort(self, cmp: Callable[[T, T], int]) -> None:
        """Sort in place with ``cmp``, which returns a positive number when its
        first argument belongs after its second.

        Each position is compared with every later one and their values are
        exchanged whenever ``cmp`` reports them out of order.
        """
        outer = self.head
        while outer is not None:
            inner = outer.next
            while inner is not None:
                if cmp(outer.value, inner.value) > 0:
                    outer.value, inner.value = inner.value, outer.value
                inner = inner.next
            outer = outer.next

    def nodes(self) -> Iterator[Node[T]]:
        """Iterate over the nodes, front to back."""
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        return (node.value for node in self.nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"