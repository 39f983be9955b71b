from __future__ import annotations
import logging
import numbers
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

from ..errors import EmptyCollection, InvalidArgument, NotFound
from .dynamic_array import DynamicArray
from .element import ABSENT, PriorityQueueElement

E = TypeVar("E", bound=PriorityQueueElement)

logger = logging.getLogger(__name__)

# Branching factor of the tree.
ARITY = 3


def parent_index(i: int) -> int:
    """Index of the parent of slot `i` (``i > 0``)."""
    return (i - 1) // ARITY


def child_index(i: int, k: int) -> int:
    """Index of the `k`-th child (0, 1 or 2) of slot `i`."""
    return ARITY * i + 1 + k


def _orderable(priority) -> bool:
    """Real numbers other than NaN; anything else breaks the total order."""
    return isinstance(priority, numbers.Real) and priority == priority


class TernaryHeapMinPriorityQueue(Generic[E]):
    """A dynamic min-priority queue backed by a ternary heap.

    Every queued element carries a ``handle``: its current index in the
    backing array. The queue rewrites handles on every move, so a caller
    holding an element can lower its priority in O(log3 n) without a search.

    Invariants, after every public call:
      • ``heap[parent_index(i)].priority <= heap[i].priority`` for i > 0
      • ``heap[i].handle == i`` for every occupied slot
      • occupied slots form the prefix [0, len(self))

    Errors are raised before anything is mutated.
    """

    __slots__ = ("_heap",)

    def __init__(self, elements: Optional[Iterable[E]] = None) -> None:
        self._heap: DynamicArray[E] = DynamicArray()
        if elements is not None:
            self._build(list(elements))

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _holds(self, element) -> bool:
        """True if `element` sits at the slot its handle names."""
        handle = getattr(element, "handle", ABSENT)
        return (
            isinstance(handle, int)
            and 0 <= handle < len(self._heap)
            and self._heap[handle] is element
        )

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap.swap(i, j)
        heap[i].handle = i
        heap[j].handle = j

    def _sift_up(self, idx: int) -> None:
        heap = self._heap
        while idx > 0:
            parent = parent_index(idx)
            if not heap[idx].priority < heap[parent].priority:
                break
            self._swap(idx, parent)
            idx = parent

    def _sift_down(self, idx: int) -> None:
        heap = self._heap
        n = len(heap)
        while True:
            first = child_index(idx, 0)
            if first >= n:
                break  # leaf
            smallest = idx
            for c in range(first, min(first + ARITY, n)):
                if heap[c].priority < heap[smallest].priority:
                    smallest = c
            if smallest == idx:
                break
            self._swap(idx, smallest)
            idx = smallest

    def _build(self, items: List[E]) -> None:
        """Bottom-up heap construction in O(n)."""
        seen = set()
        for item in items:
            if item is None:
                raise InvalidArgument("cannot queue None")
            if not _orderable(item.priority):
                raise InvalidArgument(f"priority of {item!r} is not a real number")
            if id(item) in seen:
                raise InvalidArgument(f"{item!r} given more than once")
            seen.add(id(item))

        for i, item in enumerate(items):
            self._heap.append(item)
            item.handle = i

        n = len(items)
        if n > 1:
            for i in reversed(range(parent_index(n - 1) + 1)):
                self._sift_down(i)
        logger.debug("built ternary heap from %d elements", n)

    # -----------------------------
    # Public API
    # -----------------------------
    def size(self) -> int:
        """Number of queued elements (O(1))."""
        return len(self._heap)

    def insert(self, element: E) -> None:
        """Queue `element` at its current priority and set its handle (O(log n)).

        Raises:
            InvalidArgument: if `element` is None, already in this queue,
                or has a priority that is not a real number (NaN included).
        """
        if element is None:
            raise InvalidArgument("cannot insert None")
        if self._holds(element):
            raise InvalidArgument(f"{element!r} is already in this queue")
        if not _orderable(element.priority):
            raise InvalidArgument(f"priority of {element!r} is not a real number")

        idx = len(self._heap)
        self._heap.append(element)
        element.handle = idx
        self._sift_up(idx)

    def minimum(self) -> E:
        """Return the element with the smallest priority without removing it (O(1)).

        Raises:
            EmptyCollection: if the queue is empty.
        """
        if not self._heap:
            raise EmptyCollection("minimum of empty queue")
        return self._heap[0]

    def extract_minimum(self) -> E:
        """Remove and return the element with the smallest priority (O(log n)).

        The returned element's handle is reset to ``ABSENT``.

        Raises:
            EmptyCollection: if the queue is empty.
        """
        heap = self._heap
        if not heap:
            raise EmptyCollection("extract from empty queue")
        top = heap[0]
        last = heap.pop()
        if heap:
            heap[0] = last
            last.handle = 0
            self._sift_down(0)
        top.handle = ABSENT
        return top

    def decrease_priority(self, element: E, new_priority) -> None:
        """Lower the priority of a queued element and move it up (O(log n)).

        Raises:
            NotFound: if `element` is not currently in this queue.
            InvalidArgument: if `new_priority` is not strictly less than the
                element's current priority.
        """
        if not self._holds(element):
            raise NotFound(f"{element!r} is not in this queue")
        if not _orderable(new_priority) or not new_priority < element.priority:
            raise InvalidArgument(
                f"new priority {new_priority!r} must be strictly less than {element.priority!r}"
            )
        element.priority = new_priority
        self._sift_up(element.handle)

    def clear(self, invalidate: bool = False) -> None:
        """Empty the queue.

        Handles of the dropped elements are left stale unless `invalidate`
        is true, which resets each of them to ``ABSENT`` at O(n) cost.
        """
        if invalidate:
            for element in self._heap:
                element.handle = ABSENT
        logger.debug("clearing ternary heap of %d elements", len(self._heap))
        self._heap.clear()

    def is_heap(self) -> bool:
        """Check the heap-order and handle invariants over the whole array (O(n))."""
        heap = self._heap
        for i in range(len(heap)):
            if heap[i].handle != i:
                return False
            if i > 0 and heap[i].priority < heap[parent_index(i)].priority:
                return False
        return True

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, element: object) -> bool:
        return self._holds(element)

    def __iter__(self) -> Iterator[E]:
        # Iterate over the backing array (heap order, not sorted order)
        return iter(self._heap)

    def to_list(self) -> List[E]:
        return self._heap.to_py()

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"TernaryHeapMinPriorityQueue({self.to_list()!r})"
