from __future__ import annotations
from typing import Generic, Optional, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")

# Handle value of an element that is not queued in any heap.
ABSENT = -1


@runtime_checkable
class PriorityQueueElement(Protocol):
    """What the queue needs from anything it holds.

    ``priority`` is the ordering key (smaller comes out first) and ``handle``
    is the element's current index in the queue's backing array, or
    :data:`ABSENT`. The queue writes ``handle`` on every move and reads
    nothing else from the element.
    """

    priority: float
    handle: int


class Element(Generic[T]):
    """A ready-made queue element carrying an arbitrary payload.

    Elements compare by identity, so two elements with the same value and
    priority are still distinct queue entries.
    """

    __slots__ = ("value", "priority", "handle")

    def __init__(self, value: Optional[T] = None, priority: float = 0.0) -> None:
        self.value = value
        self.priority = priority
        self.handle = ABSENT

    @property
    def queued(self) -> bool:
        """True while some heap holds a live position for this element."""
        return self.handle != ABSENT

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Element(value={self.value!r}, priority={self.priority!r}, handle={self.handle})"
