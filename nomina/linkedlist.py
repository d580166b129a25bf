"""A singly linked list of arbitrary elements, compared by identity."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Callable, Iterable, Iterator, Optional

ASCENDING = 1
DESCENDING = 0


@dataclass(eq=False)
class Node:
    """One link of the list: an element and the node after it."""

    element: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list with positional access.

    Membership and lookups compare elements by identity, not equality.
    Indices are never negative; an index out of range raises IndexError.
    """

    def __init__(self, iterable: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[Node] = None
        self._size = 0
        if iterable is not None:
            for element in iterable:
                self.add(element)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.element

    def __contains__(self, element: Any) -> bool:
        return any(item is element for item in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _check_index(self, index: int, upper: int) -> None:
        if index < 0 or index > upper:
            raise IndexError(f"index {index} out of range for list of length {self._size}")

    def get_node(self, index: int) -> Node:
        """Return the node at ``index``."""
        self._check_index(index, self._size - 1)
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def add(self, element: Any) -> None:
        """Append ``element`` at the end of the list."""
        self.push(self._size, element)

    def get(self, index: int) -> Any:
        """Return the element at ``index``."""
        return self.get_node(index).element

    def set(self, index: int, element: Any) -> None:
        """Replace the element at ``index``."""
        self.get_node(index).element = element

    def push(self, index: int, element: Any) -> None:
        """Insert ``element`` so that it ends up at ``index``."""
        self._check_index(index, self._size)
        if index == 0:
            self._head = Node(element, self._head)
        else:
            previous = self.get_node(index - 1)
            previous.next = Node(element, previous.next)
        self._size += 1

    def pop(self, index: int) -> Any:
        """Remove the element at ``index`` and return it."""
        self._check_index(index, self._size - 1)
        if index == 0:
            removed = self._head
            self._head = removed.next
        else:
            previous = self.get_node(index - 1)
            removed = previous.next
            previous.next = removed.next
        self._size -= 1
        return removed.element

    def remove(self, index: int) -> None:
        """Remove the element at ``index``."""
        self.pop(index)

    def clear(self) -> None:
        """Remove every element."""
        self._head = None
        self._size = 0

    def index_of(self, element: Any) -> int:
        """Return the position of the first occurrence of ``element``."""
        for position, item in enumerate(self):
            if item is element:
                return position
        raise ValueError("element is not in the list")

    def is_empty(self) -> bool:
        return self._head is None

    def contains(self, element: Any) -> bool:
        return element in self

    def contains_all(self, other: "LinkedList") -> bool:
        """Tell whether every element of ``other`` is in this list.

        A list longer than this one is never considered contained.
        """
        if len(self) < len(other):
            return False
        return all(element in self for element in other)

    def sub_list(self, start: int, stop: int) -> "LinkedList":
        """Return a new list with the elements from ``start`` up to ``stop`` (excluded)."""
        if start < 0 or start > stop or stop > self._size:
            raise IndexError(f"invalid range [{start}, {stop}) for list of length {self._size}")
        result = LinkedList()
        for position, element in enumerate(self):
            if position >= stop:
                break
            if position >= start:
                result.add(element)
        return result

    def clone(self) -> "LinkedList":
        """Return a new list holding the same elements."""
        return LinkedList(self)

    def sort(self, compare: Callable[[Any, Any], int], order: int) -> None:
        """Sort in place with a three-way ``compare``.

        ``order`` is 1 for ascending and 0 for descending; equal elements
        keep their relative order.
        """
        if not callable(compare):
            raise TypeError("compare must be callable")
        if order not in (ASCENDING, DESCENDING):
            raise ValueError("order must be 1 (ascending) or 0 (descending)")
        ordered = sorted(self, key=cmp_to_key(compare), reverse=order == DESCENDING)
        for node, element in zip(self._nodes(), ordered):
            node.element = element