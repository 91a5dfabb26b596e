from __future__ import annotations
import logging
import numpy as np
import pandas as pd
from ..enumerable import IEnumerable, ReadOnlyCollection, _EnumerableOperations
from ..types import *
from .list import List as ColinqList

logger = logging.getLogger(__name__)


class Dictionary(IEnumerable[KeyValuePair], _EnumerableOperations[KeyValuePair]):
    """
    an insertion-ordered map built from two parallel lists, one of keys and one of values.

    lookups are a linear scan over the key list using ==, so keys need not be hashable.
    the enumerable operations work on KeyValuePair items synthesized from both lists
    at enumeration time; pairs handed out earlier do not follow later changes.
    """

    def __init__(self, items: Optional[Iterable[Tuple[K, V]]] = None):
        self._keys: ColinqList[K] = ColinqList()
        self._values: ColinqList[V] = ColinqList()
        self._iteration_depth = 0
        if items is not None:
            for key, value in items:
                self.put(key, value)

    def _get_data(self) -> List[KeyValuePair]:
        return [KeyValuePair(k, v) for k, v in zip(self._keys.to_array(), self._values.to_array())]

    def _ensure_not_iterating(self, operation: str, owner: Optional[str] = None) -> None:
        """check this dictionary and both backing lists before either list is touched"""
        owner = owner or type(self).__name__
        super()._ensure_not_iterating(operation, owner)
        self._keys._ensure_not_iterating(operation, owner)
        self._values._ensure_not_iterating(operation, owner)

    def put(self, key: K, value: V) -> None:
        """insert a new entry at the end, or overwrite the value of an existing key in place"""
        index = self._keys.index_of(key)
        if index > -1:
            logger.debug(f"overwriting value for key {key!r} at index {index}")
            self._values.put(index, value)
        else:
            self._ensure_not_iterating('put')
            self._keys.add(key)
            self._values.add(value)

    def retrieve(self, key: K) -> Optional[V]:
        """value stored under key, or None"""
        index = self._keys.index_of(key)
        return self._values.at(index) if index > -1 else None

    def remove(self, key: K) -> Optional[V]:
        """remove the entry for key and return its value, or None when absent"""
        self._ensure_not_iterating('remove')
        index = self._keys.index_of(key)
        if index == -1:
            logger.debug(f"remove of missing key {key!r}")
            return None
        self._keys.remove_at(index)
        return self._values.remove_at(index)

    def contains_key(self, key: K) -> bool:
        return self._keys.index_of(key) > -1

    # the original name for contains_key
    exists = contains_key

    def contains_value(self, value: V) -> bool:
        return self._values.index_of(value) > -1

    def get_keys(self) -> ReadOnlyCollection[K]:
        """live read-only view over the keys, in entry order"""
        return self._keys.as_read_only()

    def get_values(self) -> ReadOnlyCollection[V]:
        """live read-only view over the values, in entry order"""
        return self._values.as_read_only()

    def clear(self) -> None:
        self._ensure_not_iterating('clear')
        self._keys.clear()
        self._values.clear()

    # --- enumerable overrides ---

    def length(self) -> int:
        return self._keys.length()

    def to_array(self) -> List[KeyValuePair]:
        return self.to_list().to_array()

    def to_numpy(self) -> np.ndarray:
        """object array of shape (n, 2), one [key, value] row per entry; keys and values keep their types"""
        result = np.empty((self.length(), 2), dtype=object)
        for row, (key, value) in enumerate(self._get_data()):
            result[row, 0] = key
            result[row, 1] = value
        return result

    def to_pandas(self) -> pd.Series:
        """values as a pandas series indexed by key"""
        return pd.Series(self._values.to_array(), index=self._keys.to_array())

    # --- python conveniences ---

    def __getitem__(self, key: K) -> V:
        index = self._keys.index_of(key)
        if index == -1:
            raise KeyError(key)
        return self._values.at(index)

    def __setitem__(self, key: K, value: V) -> None:
        self.put(key, value)

    def __contains__(self, key: K) -> bool:
        return self.contains_key(key)

    def __repr__(self) -> str:
        entries = ', '.join(f"{k!r}: {v!r}" for k, v in self._get_data())
        return f"Dictionary({{{entries}}})"
