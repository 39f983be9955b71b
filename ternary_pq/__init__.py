"""Dynamic ternary-heap min-priority queue with decrease-key support."""

from .datastructures import ABSENT, Element, PriorityQueueElement, TernaryHeapMinPriorityQueue
from .errors import EmptyCollection, InvalidArgument, NotFound, PriorityQueueError

__version__ = "0.1.0"

__all__ = [
    "ABSENT",
    "Element",
    "EmptyCollection",
    "InvalidArgument",
    "NotFound",
    "PriorityQueueElement",
    "PriorityQueueError",
    "TernaryHeapMinPriorityQueue",
]
