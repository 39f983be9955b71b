from .dynamic_array import DynamicArray
from .element import ABSENT, Element, PriorityQueueElement
from .ternary_heap import ARITY, TernaryHeapMinPriorityQueue, child_index, parent_index

__all__ = [
    "ABSENT",
    "ARITY",
    "DynamicArray",
    "Element",
    "PriorityQueueElement",
    "TernaryHeapMinPriorityQueue",
    "child_index",
    "parent_index",
]
