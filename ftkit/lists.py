"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that keeps a reference to its first node."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        if items is not None:
            for item in items:
                self.add_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, content: Any) -> Node:
        """Put ``content`` in a new node at the front and return that node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def add_back(self, content: Any) -> Node:
        """Put ``content`` in a new node at the back and return that node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """The last node, or ``None`` when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Callable[[Any], Any]) -> None:
        """Pass every content to ``delete``, front to back, and empty the list."""
        if delete is None:
            raise TypeError("clear needs a delete function")
        while self.head is not None:
            node = self.head
            self.head = node.next
            node.next = None
            delete(node.content)

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content, front to back."""
        for node in self._nodes():
            func(node.content)

    def map(
        self, func: Callable[[Any], Any], delete: Callable[[Any], Any]
    ) -> "LinkedList":
        """A new list of ``func(content)`` for every content, in order.

        Should ``func`` fail part way, the contents already made are passed to
        ``delete`` and the error propagates.
        """
        if func is None or delete is None:
            raise TypeError("map needs both a mapping and a delete function")
        result = LinkedList()
        try:
            for node in self._nodes():
                result.add_back(func(node.content))
        except BaseException:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"