from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..containers.list import List as ColinqList


class _TerminalOperations(Generic[T]):
    def length(self) -> int:
        """number of elements"""
        return len(self._get_data())

    def is_empty(self) -> bool:
        return self.length() == 0

    def to_array(self) -> List[T]:
        """snapshot of the elements as a new python list (always a copy)"""
        return list(self._get_data())

    def to_list(self) -> 'ColinqList[T]':
        """copy the elements into a new mutable colinq List"""
        from ..containers.list import List as ColinqList
        result = ColinqList()
        result.add_range(self._get_data())
        return result

    def to_numpy(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._get_data())

    def to_pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._get_data())

    def __len__(self) -> int:
        return self.length()

    def __iter__(self) -> Iterator[T]:
        # python iteration walks a snapshot, so it is not subject to the iteration guard
        return iter(self.to_array())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._get_data()!r})"
