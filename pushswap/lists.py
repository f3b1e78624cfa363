"""A singly linked list whose head is the most recently added node."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, TextIO


@dataclass
class Node:
    """One element of a linked list."""

    content: Any = None
    next: Node | None = None


class LinkedList:
    """A chain of nodes starting at ``head``."""

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        tail: Node | None = None
        for content in contents:
            node = Node(content)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        current = self.head
        while current is not None:
            following = current.next
            yield current
            current = following

    def add(self, content: Any) -> Node:
        """Put a new node holding ``content`` at the front and return it."""
        self.head = Node(content, self.head)
        return self.head

    def delete(self, destructor: Callable[[Any], None] | None = None) -> None:
        """Hand every content to ``destructor`` in order, then empty the list."""
        for node in self._nodes():
            if destructor is not None:
                destructor(node.content)
            node.next = None
        self.head = None

    def foreach(self, func: Callable[[Node], None]) -> None:
        """Call ``func`` on every node, front to back."""
        for node in self._nodes():
            func(node)

    def map(self, func: Callable[[Any], Any]) -> LinkedList:
        """A new list of ``func`` applied to every content, in the same order."""
        return LinkedList(func(content) for content in self)

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous: Node | None = None
        current = self.head
        while current is not None:
            current.next, previous, current = previous, current, current.next
        self.head = previous

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def write(self, stream: TextIO) -> None:
        """Write every content to ``stream``, skipping empty ones."""
        for content in self:
            if content is not None:
                stream.write(str(content))