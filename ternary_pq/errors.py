"""Exceptions raised by the priority queue and its consumers.

Every error is a contract violation detected before any mutation, so the
queue is left exactly as it was when one of these is raised. Each class also
derives from the closest built-in exception, so callers that already catch
``ValueError`` / ``IndexError`` / ``LookupError`` keep working.
"""

from __future__ import annotations


class PriorityQueueError(Exception):
    """Base class for all queue errors."""


class InvalidArgument(PriorityQueueError, ValueError):
    """A ``None`` element, a NaN priority, or a non-decreasing new priority."""


class EmptyCollection(PriorityQueueError, IndexError):
    """``minimum()`` or ``extract_minimum()`` on an empty queue."""


class NotFound(PriorityQueueError, LookupError):
    """The element is not currently queued in this queue."""
