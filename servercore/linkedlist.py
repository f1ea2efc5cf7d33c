"""Intrusive doubly linked list with sentinel head and tail nodes."""

from __future__ import annotations

from typing import Iterator, Optional


class LinkedListElement:
    """A node that links itself into at most one LinkedListHead."""

    def __init__(self) -> None:
        self._next: Optional[LinkedListElement] = None
        self._prev: Optional[LinkedListElement] = None

    def has_next(self) -> bool:
        """Whether a real element (not the tail sentinel) follows this one."""
        return self._next is not None and self._next._next is not None

    def has_prev(self) -> bool:
        """Whether a real element (not the head sentinel) precedes this one."""
        return self._prev is not None and self._prev._prev is not None

    def is_in_list(self) -> bool:
        """Whether the element is linked on both sides."""
        return self._next is not None and self._prev is not None

    def next(self) -> Optional[LinkedListElement]:
        """The following element, or None at the end of the list."""
        return self._next if self.has_next() else None

    def prev(self) -> Optional[LinkedListElement]:
        """The preceding element, or None at the start of the list."""
        return self._prev if self.has_prev() else None

    def nocheck_next(self) -> Optional[LinkedListElement]:
        """The raw following link, which may be a sentinel."""
        return self._next

    def nocheck_prev(self) -> Optional[LinkedListElement]:
        """The raw preceding link, which may be a sentinel."""
        return self._prev

    def delink(self) -> None:
        """Remove the element from its list; does nothing if not linked."""
        if self.is_in_list():
            self._next._prev = self._prev
            self._prev._next = self._next
            self._next = None
            self._prev = None

    def insert_before(self, elem: LinkedListElement) -> None:
        """Link *elem* directly before this element."""
        if self._prev is None:
            raise ValueError("cannot insert before an element that has no predecessor")
        elem._next = self
        elem._prev = self._prev
        self._prev._next = elem
        self._prev = elem

    def insert_after(self, elem: LinkedListElement) -> None:
        """Link *elem* directly after this element."""
        if self._next is None:
            raise ValueError("cannot insert after an element that has no successor")
        elem._prev = self
        elem._next = self._next
        self._next._prev = elem
        self._next = elem


class LinkedListHead:
    """Owner of a list of LinkedListElement nodes."""

    def __init__(self) -> None:
        self._first = LinkedListElement()
        self._last = LinkedListElement()
        self._first._next = self._last
        self._last._prev = self._first
        self._size = 0

    def is_empty(self) -> bool:
        return not self._first._next.is_in_list()

    def get_first(self) -> Optional[LinkedListElement]:
        """The first element, or None when the list is empty."""
        return None if self.is_empty() else self._first._next

    def get_last(self) -> Optional[LinkedListElement]:
        """The last element, or None when the list is empty."""
        return None if self.is_empty() else self._last._prev

    def insert_first(self, elem: LinkedListElement) -> None:
        self._first.insert_after(elem)

    def insert_last(self, elem: LinkedListElement) -> None:
        self._last.insert_before(elem)

    def get_size(self) -> int:
        """The tracked size, or the counted length when none is tracked."""
        if self._size:
            return self._size
        return sum(1 for _ in self)

    def inc_size(self) -> None:
        self._size += 1

    def dec_size(self) -> None:
        self._size -= 1

    def __iter__(self) -> Iterator[LinkedListElement]:
        elem = self.get_first()
        while elem is not None:
            following = elem.next()
            yield elem
            elem = following

    def __reversed__(self) -> Iterator[LinkedListElement]:
        elem = self.get_last()
        while elem is not None:
            preceding = elem.prev()
            yield elem
            elem = preceding