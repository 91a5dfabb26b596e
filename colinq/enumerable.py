from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *

# --- shared contract pieces ---
from .extensions.iteration import _IterationOperations
from .extensions.element import _ElementOperations
from .extensions.query import _QueryOperations
from .extensions.terminal import _TerminalOperations

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    """
    the enumerable contract: predicate tests, early-exit iteration, first/last
    lookups, projection, filtering, reversal, zipping and materialization.
    """

    @abstractmethod
    def _get_data(self) -> List[T]:
        """get the elements as a python list, in enumeration order"""
        pass

# --- canonical implementation ---

class _EnumerableOperations(
    _IterationOperations[T],
    _ElementOperations[T],
    _QueryOperations[T],
    _TerminalOperations[T]
):
    """every contract operation, written once against _get_data()"""
    pass


class ReadOnlyCollection(IEnumerable[T], _EnumerableOperations[T]):
    """
    a non-owning view over an existing list.
    elements cannot be added or removed through the view, but changes made by
    the list's owner are visible through it. the elements themselves are not read-only.
    """

    def __init__(self, source: Optional[List[T]] = None):
        self._source: List[T] = source if source is not None else []
        self._iteration_depth = 0

    def _get_data(self) -> List[T]:
        return self._source
