"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """One element of a LinkedList."""

    content: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list that can grow at either end.

    Iterating over the list yields the contents in order, from the head.
    """

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for content in reversed(list(contents)):
            self.push(content)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def push(self, content: Any) -> Node:
        """Add content at the front and return its new node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def append(self, content: Any) -> Node:
        """Add content at the back and return its new node."""
        node = Node(content)
        if self.head is None:
            self.head = node
            return node
        last = self.head
        while last.next is not None:
            last = last.next
        last.next = node
        return node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def each(self, func: Callable[[Any], Any]) -> None:
        """Call func on every content, in order."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any]) -> LinkedList:
        """Return a new list holding func applied to every content."""
        return LinkedList(func(content) for content in self)

    def find(self, content: Any) -> Node | None:
        """Return the first node whose content equals content, or None."""
        return next((node for node in self._nodes() if node.content == content), None)

    def pop(self, node: Node) -> Any:
        """Unlink node from the list and return its content.

        Raises ValueError when the node is not part of this list.
        """
        if self.head is None:
            raise ValueError("cannot pop from an empty list")
        if self.head is node:
            self.head = node.next
            node.next = None
            return node.content
        for current in self._nodes():
            if current.next is node:
                current.next = node.next
                node.next = None
                return node.content
        raise ValueError("node is not in this list")

    def clear(self, func: Callable[[Any], Any] | None = None) -> None:
        """Empty the list, first calling func on every content if given."""
        if func is not None:
            for content in self:
                func(content)
        self.head = None