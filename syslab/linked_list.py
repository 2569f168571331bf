"""A doubly linked list with head and tail references."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One element of a :class:`DoublyLinkedList`."""

    data: Any
    next: Optional["Node"] = field(default=None, repr=False)
    prev: Optional["Node"] = field(default=None, repr=False)


class DoublyLinkedList:
    """Doubly linked list of arbitrary items.

    ``None`` is never stored: inserting it leaves the list unchanged, and the
    accessors return ``None`` when there is nothing to return.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self.tail: Optional[Node] = None
        self._size = 0
        for item in items:
            self.insert_last(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def first(self) -> Any:
        """Return the first item, or ``None`` if the list is empty."""
        return self.head.data if self.head is not None else None

    def last(self) -> Any:
        """Return the last item, or ``None`` if the list is empty."""
        return self.tail.data if self.tail is not None else None

    def insert_first(self, item: Any) -> None:
        """Insert ``item`` at the front of the list."""
        if item is None:
            return
        node = Node(item, next=self.head)
        if self.head is not None:
            self.head.prev = node
        else:
            self.tail = node
        self.head = node
        self._size += 1

    def insert_last(self, item: Any) -> None:
        """Insert ``item`` at the end of the list."""
        if item is None:
            return
        node = Node(item, prev=self.tail)
        if self.tail is not None:
            self.tail.next = node
        else:
            self.head = node
        self.tail = node
        self._size += 1

    def get(self, index: int) -> Any:
        """Return the item at ``index``, or ``None`` if it is out of range."""
        if index < 0:
            return None
        for position, data in enumerate(self):
            if position == index:
                return data
        return None

    def _unlink(self, node: Node) -> None:
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self.head = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self.tail = node.prev
        node.next = node.prev = None
        self._size -= 1

    def remove(self, item: Any) -> bool:
        """Remove the first element equal to ``item``; report whether one was found."""
        for node in self._nodes():
            if node.data == item:
                self._unlink(node)
                return True
        return False

    def reverse(self) -> None:
        """Reverse the list in place."""
        node = self.head
        while node is not None:
            node.next, node.prev = node.prev, node.next
            node = node.prev
        self.head, self.tail = self.tail, self.head

    def remove_first(self) -> Any:
        """Remove and return the first item, or ``None`` if the list is empty."""
        if self.head is None:
            return None
        node = self.head
        self._unlink(node)
        return node.data

    def remove_last(self) -> Any:
        """Remove and return the last item, or ``None`` if the list is empty."""
        if self.tail is None:
            return None
        node = self.tail
        self._unlink(node)
        return node.data