from __future__ import annotations
import typing
from itertools import zip_longest
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import ReadOnlyCollection


class _QueryOperations(Generic[T]):
    def all(self, predicate: Predicate[T]) -> bool:
        """true if every element satisfies the predicate, or the sequence is empty"""
        result = [True]

        def check(element, _):
            if not predicate(element):
                result[0] = False
                return False

        self.until(check)
        return result[0]

    def any(self, predicate: Predicate[T]) -> bool:
        """true if at least one element satisfies the predicate"""
        result = [False]

        def check(element, _):
            if predicate(element):
                result[0] = True
                return False

        self.until(check)
        return result[0]

    def reverse(self) -> 'ReadOnlyCollection[T]':
        """inverts the order into a fresh sequence; the source keeps its order"""
        from ..enumerable import ReadOnlyCollection
        return ReadOnlyCollection(list(reversed(self._get_data())))

    def select(self, selector: Selector[T, U]) -> 'ReadOnlyCollection[U]':
        """project each element to a new form (eager)"""
        from ..enumerable import ReadOnlyCollection
        with self._iterating() as data:
            return ReadOnlyCollection([selector(x) for x in data])

    def where(self, predicate: Predicate[T]) -> 'ReadOnlyCollection[T]':
        """filter elements based on a predicate (eager)"""
        from ..enumerable import ReadOnlyCollection
        with self._iterating() as data:
            return ReadOnlyCollection([x for x in data if predicate(x)])

    def zip(self, other: Iterable[U], result_selector: ResultSelector[T, U, R]) -> 'ReadOnlyCollection[R]':
        """
        merge two sequences pairwise up to the length of the LONGER one.
        positions past the end of the shorter side receive None for that side,
        and the result selector is still called for them.
        """
        from ..enumerable import IEnumerable, ReadOnlyCollection
        other_data = other.to_array() if isinstance(other, IEnumerable) else list(other)
        with self._iterating() as data:
            # zip_longest pads the shorter side with None
            return ReadOnlyCollection([result_selector(t, u) for t, u in zip_longest(data, other_data)])
