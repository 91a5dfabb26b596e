from __future__ import annotations
from ..types import *


class _ElementOperations(Generic[T]):
    """first/last retrieval. an empty result is None or the caller's default, never an error."""

    def _find_first(self, predicate: Optional[Predicate[T]]) -> Any:
        if predicate is None:
            data = self._get_data()
            return data[0] if data else MISSING

        found = [MISSING]

        def check(element, _):
            if predicate(element):
                found[0] = element
                return False

        self.until(check)
        return found[0]

    def _find_last(self, predicate: Optional[Predicate[T]]) -> Any:
        if predicate is None:
            data = self._get_data()
            return data[-1] if data else MISSING

        found = [MISSING]

        def check(element, _):
            if predicate(element):
                found[0] = element
                return False

        self.from_last_until(check)
        return found[0]

    def first(self, predicate: Optional[Predicate[T]] = None) -> Optional[T]:
        """get the first element, or the first one satisfying the predicate; None if there is none"""
        result = self._find_first(predicate)
        return None if result is MISSING else result

    def first_or_default(self, default: T, predicate: Optional[Predicate[T]] = None) -> T:
        """get the first (matching) element or the default"""
        result = self._find_first(predicate)
        return default if result is MISSING else result

    def last(self, predicate: Optional[Predicate[T]] = None) -> Optional[T]:
        """get the last element, or the last one satisfying the predicate; None if there is none"""
        result = self._find_last(predicate)
        return None if result is MISSING else result

    def last_or_default(self, default: T, predicate: Optional[Predicate[T]] = None) -> T:
        """get the last (matching) element or the default"""
        result = self._find_last(predicate)
        return default if result is MISSING else result
