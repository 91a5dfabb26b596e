from __future__ import annotations
import logging
import typing
from ..enumerable import IEnumerable, ReadOnlyCollection
from ..types import *
from .delegation import _DelegatingEnumerable

logger = logging.getLogger(__name__)


class Queue(_DelegatingEnumerable[T], IEnumerable[T]):
    """first-in, first-out collection. queries are forwarded to a read-only view of the queue's storage."""

    def __init__(self, items: Optional[Iterable[T]] = None):
        self._container: typing.List[T] = []
        self._readonly: ReadOnlyCollection[T] = ReadOnlyCollection(self._container)
        if items is not None:
            for item in items:
                self.enqueue(item)

    def enqueue(self, item: T) -> None:
        """insert an item at the tail"""
        self._ensure_not_iterating('enqueue')
        self._container.append(item)

    def dequeue(self) -> Optional[T]:
        """
        remove and return the head item.
        an empty queue yields None and stays empty; nothing is raised.
        """
        self._ensure_not_iterating('dequeue')
        if not self._container:
            logger.debug("dequeue on an empty queue, returning None")
            return None
        return self._container.pop(0)

    def contains(self, item: T) -> bool:
        return any(element == item for element in self._container)

    def clear(self) -> None:
        self._ensure_not_iterating('clear')
        self._container.clear()

    def __contains__(self, item: T) -> bool:
        return self.contains(item)
