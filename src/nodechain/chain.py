"""Singly linked chain of cells with head/tail/size bookkeeping."""

import logging
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from nodechain.errors import SelfConcatenationError

E = TypeVar("E")

logger = logging.getLogger(__name__)

# Hash accumulator width and rotation
_HASH_MASK = 0xFFFFFFFF
_HASH_ROTATE = 5


class Node(Generic[E]):
    """A cell in the chain."""

    __slots__ = ("element", "next")

    def __init__(self, element: E, next: "Node[E] | None" = None) -> None:
        self.element = element
        self.next = next

    def __repr__(self) -> str:
        return f"Node({self.element!r})"


class NodeChain(Generic[E]):
    """
    Singly linked sequential container.

    Tracks the first cell, the last cell and the element count. Every
    mutating operation keeps the three consistent: size is zero iff head and
    tail are both None, and walking forward from head reaches tail in
    exactly size - 1 steps.
    """

    def __init__(self, iterable: Iterable[E] = ()) -> None:
        """
        Initialize the chain.

        Args:
            iterable: Optional elements appended in order via add_last().
        """
        self._head: Node[E] | None = None
        self._tail: Node[E] | None = None
        self._size = 0
        for element in iterable:
            self.add_last(element)

    def __len__(self) -> int:
        """Return the number of elements in the chain. O(1)."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the chain is non-empty."""
        return self._size > 0

    def __iter__(self) -> Iterator[E]:
        """Yield elements from head to tail."""
        walk = self._head
        while walk is not None:
            yield walk.element
            walk = walk.next

    def is_empty(self) -> bool:
        return self._size == 0

    def first(self) -> E | None:
        """Return (but do not remove) the first element, or None if empty."""
        if self._head is None:
            return None
        return self._head.element

    def last(self) -> E | None:
        """Return (but do not remove) the last element, or None if empty."""
        if self._tail is None:
            return None
        return self._tail.element

    def add_first(self, element: E) -> None:
        """Add an element to the front of the chain. O(1)."""
        self._head = Node(element, self._head)
        if self._size == 0:
            self._tail = self._head
        self._size += 1

    def add_last(self, element: E) -> None:
        """Add an element to the end of the chain. O(1)."""
        newest = Node(element)
        if self._tail is None:
            self._head = newest
        else:
            self._tail.next = newest
        self._tail = newest
        self._size += 1

    def remove_first(self) -> E | None:
        """Remove and return the first element, or None if empty. O(1)."""
        node = self._head
        if node is None:
            return None
        self._head = node.next
        node.next = None
        self._size -= 1
        if self._size == 0:
            self._tail = None
        return node.element

    def find_node(self, element: E) -> Node[E] | None:
        """
        Find the first cell holding this exact element instance.

        Lookup compares by identity (``is``), unlike ``__eq__`` which compares
        elements by value. Two equal but distinct objects do not match.

        Args:
            element: The element instance to look for

        Returns:
            The matching cell, or None if no cell holds the element
        """
        walk = self._head
        while walk is not None:
            if walk.element is element:
                return walk
            walk = walk.next
        return None

    def _locate(self, element: E) -> tuple[Node[E] | None, Node[E] | None]:
        """Return (predecessor, cell) for element; predecessor is None at head."""
        prev: Node[E] | None = None
        walk = self._head
        while walk is not None:
            if walk.element is element:
                return prev, walk
            prev = walk
            walk = walk.next
        return None, None

    def _relink(self, prev: Node[E] | None, node: Node[E]) -> None:
        """Point prev (or head when prev is None) at node."""
        if prev is None:
            self._head = node
        else:
            prev.next = node

    def swap_nodes(self, e1: E, e2: E) -> None:
        """
        Exchange the positions of the cells holding e1 and e2.

        Cells are located with find_node() semantics (identity). Only links
        are rewritten; no cell is created or dropped and size is unchanged.
        Does nothing if e1 is e2, either is None, the chain is empty, or
        either element is not in the chain.

        Args:
            e1: Element instance of the first cell
            e2: Element instance of the second cell
        """
        if e1 is e2 or e1 is None or e2 is None or self._head is None:
            logger.debug("swap_nodes no-op: trivial arguments or empty chain")
            return

        prev1, n1 = self._locate(e1)
        prev2, n2 = self._locate(e2)
        if n1 is None or n2 is None:
            logger.debug("swap_nodes no-op: element not found (%r, %r)", e1, e2)
            return
        if (prev1 is not None and prev1.next is not n1) or (
            prev2 is not None and prev2.next is not n2
        ):
            logger.debug("swap_nodes no-op: predecessor lookup failed")
            return

        if n1.next is n2:
            # n1 directly before n2
            n1.next = n2.next
            n2.next = n1
            self._relink(prev1, n2)
        elif n2.next is n1:
            # n2 directly before n1
            n2.next = n1.next
            n1.next = n2
            self._relink(prev2, n1)
        else:
            n1.next, n2.next = n2.next, n1.next
            self._relink(prev1, n2)
            self._relink(prev2, n1)

        # Either swapped cell may have moved into or out of the last position
        walk = self._head
        while walk is not None and walk.next is not None:
            walk = walk.next
        self._tail = walk
        logger.debug("swap_nodes swapped %r and %r", e1, e2)

    def concatenate(self, other: "NodeChain[E]", *, copy: bool = False) -> None:
        """
        Append another chain's elements after this chain's last element.

        Args:
            other: The chain to append
            copy: If True, append fresh copies of other's cells and leave
                other untouched (O(n)). Otherwise move other's cells into
                this chain and reset other to empty (O(1)).

        Raises:
            TypeError: If other is not a NodeChain
            SelfConcatenationError: If other is this chain
        """
        if not isinstance(other, NodeChain):
            raise TypeError(f"Cannot concatenate {type(other).__name__!r} to a chain")
        if other is self:
            raise SelfConcatenationError("Cannot concatenate a chain onto itself")
        if other._head is None:
            return

        source = other.copy() if copy else other
        head, tail, size = source._head, source._tail, source._size

        if self._tail is None:
            self._head = head
        else:
            self._tail.next = head
        self._tail = tail
        self._size += size

        # Cells now belong to this chain only
        source._head = None
        source._tail = None
        source._size = 0
        logger.debug("concatenate appended %d cells (copy=%s)", size, copy)

    def copy(self) -> "NodeChain[E]":
        """
        Return a chain with the same elements in new cells.

        Elements themselves are shared, not copied.
        """
        other = type(self).__new__(type(self))
        other._head = None
        other._tail = None
        other._size = 0
        walk = self._head
        while walk is not None:
            other.add_last(walk.element)
            walk = walk.next
        return other

    def __copy__(self) -> "NodeChain[E]":
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NodeChain) or type(other) is not type(self):
            return NotImplemented
        if self._size != other._size:
            return False
        walk_a = self._head
        walk_b = other._head
        while walk_a is not None and walk_b is not None:
            if walk_a.element != walk_b.element:
                return False
            walk_a = walk_a.next
            walk_b = walk_b.next
        return True

    def __hash__(self) -> int:
        """Order-sensitive hash: xor each element hash, then rotate left 5 bits."""
        h = 0
        walk = self._head
        while walk is not None:
            h ^= hash(walk.element) & _HASH_MASK
            h = ((h << _HASH_ROTATE) | (h >> (32 - _HASH_ROTATE))) & _HASH_MASK
            walk = walk.next
        return h

    def __str__(self) -> str:
        return "(" + ", ".join(str(element) for element in self) + ")"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"
