from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import ReadOnlyCollection
    from .list import List as ColinqList


class _DelegatingEnumerable(Generic[T]):
    """
    forwards every query to a privately held ReadOnlyCollection over the
    host's own storage. hosts set self._container and self._readonly.
    """

    def _get_data(self) -> List[T]:
        return self._container

    @property
    def is_iterating(self) -> bool:
        return self._readonly.is_iterating

    def _ensure_not_iterating(self, operation: str, owner: Optional[str] = None) -> None:
        self._readonly._ensure_not_iterating(operation, owner or type(self).__name__)

    # --- iteration ---

    def each(self, action: Action[T]) -> None:
        self._readonly.each(action)

    def until(self, action: Action[T]) -> None:
        self._readonly.until(action)

    def from_last_until(self, action: Action[T]) -> None:
        self._readonly.from_last_until(action)

    # --- predicates ---

    def all(self, predicate: Predicate[T]) -> bool:
        return self._readonly.all(predicate)

    def any(self, predicate: Predicate[T]) -> bool:
        return self._readonly.any(predicate)

    # --- element lookup ---

    def first(self, predicate: Optional[Predicate[T]] = None) -> Optional[T]:
        return self._readonly.first(predicate)

    def first_or_default(self, default: T, predicate: Optional[Predicate[T]] = None) -> T:
        return self._readonly.first_or_default(default, predicate)

    def last(self, predicate: Optional[Predicate[T]] = None) -> Optional[T]:
        return self._readonly.last(predicate)

    def last_or_default(self, default: T, predicate: Optional[Predicate[T]] = None) -> T:
        return self._readonly.last_or_default(default, predicate)

    # --- projections ---

    def reverse(self) -> 'ReadOnlyCollection[T]':
        return self._readonly.reverse()

    def select(self, selector: Selector[T, U]) -> 'ReadOnlyCollection[U]':
        return self._readonly.select(selector)

    def where(self, predicate: Predicate[T]) -> 'ReadOnlyCollection[T]':
        return self._readonly.where(predicate)

    def zip(self, other: Iterable[U], result_selector: ResultSelector[T, U, R]) -> 'ReadOnlyCollection[R]':
        return self._readonly.zip(other, result_selector)

    # --- terminal ---

    def length(self) -> int:
        return len(self._container)

    def is_empty(self) -> bool:
        return self._readonly.is_empty()

    def to_array(self) -> List[T]:
        return self._readonly.to_array()

    def to_list(self) -> 'ColinqList[T]':
        return self._readonly.to_list()

    def to_numpy(self) -> np.ndarray:
        return self._readonly.to_numpy()

    def to_pandas(self) -> pd.Series:
        return self._readonly.to_pandas()

    def __len__(self) -> int:
        return self.length()

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_array())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._container!r})"
