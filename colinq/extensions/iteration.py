from __future__ import annotations
import logging
from contextlib import contextmanager
from ..config import config
from ..errors import CollectionModifiedError
from ..types import *

logger = logging.getLogger(__name__)


class _IterationOperations(Generic[T]):
    """
    callback-driven traversal shared by every enumerable.
    hosts provide _get_data() and an integer _iteration_depth.
    """

    @property
    def is_iterating(self) -> bool:
        """true while an each/until/from_last_until callback loop is running"""
        return self._iteration_depth > 0

    @contextmanager
    def _iterating(self):
        self._iteration_depth += 1
        try:
            yield self._get_data()
        finally:
            self._iteration_depth -= 1

    def _ensure_not_iterating(self, operation: str, owner: Optional[str] = None) -> None:
        """called by structural mutators before they touch storage; owner names the container in the log"""
        if config.guard_iteration and self.is_iterating:
            logger.warning(f"rejected '{operation}' on {owner or type(self).__name__} during iteration")
            raise CollectionModifiedError(
                f"cannot {operation}: collection was modified during iteration")

    def each(self, action: Action[T]) -> None:
        """performs the action on every element in forward order"""
        with self._iterating() as data:
            for index, element in enumerate(data):
                action(element, index)

    def until(self, action: Action[T]) -> None:
        """
        performs the action in forward order until it returns False.
        only the False object itself stops iteration; None, 0 and '' do not.
        """
        with self._iterating() as data:
            for index, element in enumerate(data):
                if action(element, index) is False:
                    return

    def from_last_until(self, action: Action[T]) -> None:
        """same as until, starting from the last element"""
        with self._iterating() as data:
            for index in range(len(data) - 1, -1, -1):
                if action(data[index], index) is False:
                    return
