from __future__ import annotations
import typing
from ..enumerable import IEnumerable, ReadOnlyCollection
from ..types import *
from .delegation import _DelegatingEnumerable


class List(_DelegatingEnumerable[T], IEnumerable[T]):
    """
    a mutable, index-addressable ordered sequence.

    the list owns its backing storage and a read-only view over that same
    storage; every query operation is forwarded to the view. structural
    changes made from inside an each/until callback raise CollectionModifiedError.
    """

    def __init__(self, items: Optional[Iterable[T]] = None):
        self._container: typing.List[T] = []
        self._readonly: ReadOnlyCollection[T] = ReadOnlyCollection(self._container)
        if items is not None:
            self.add_range(items)

    def _check_index(self, index: int) -> None:
        # the backing list would accept negative indices; the contract does not
        if index < 0:
            raise IndexError(f"list index out of range: {index}")

    def add(self, item: T) -> None:
        """append an item at the end"""
        self._ensure_not_iterating('add')
        self._container.append(item)

    def add_range(self, collection: Iterable[T]) -> None:
        """append every element of another enumerable or iterable, in its order"""
        self._ensure_not_iterating('add_range')
        items = collection.to_array() if isinstance(collection, IEnumerable) else list(collection)
        self._container.extend(items)

    def at(self, index: int) -> T:
        """element at the given position; IndexError when out of range"""
        self._check_index(index)
        return self._container[index]

    def put(self, index: int, item: T) -> None:
        """replace the element at the given position; IndexError when out of range"""
        self._check_index(index)
        self._container[index] = item

    def index_of(self, item: T) -> int:
        """lowest index of an element equal to item, or -1"""
        for index, element in enumerate(self._container):
            if element == item:
                return index
        return -1

    def remove(self, item: T) -> None:
        """remove the first occurrence of item, if any"""
        self._ensure_not_iterating('remove')
        index = self.index_of(item)
        if index != -1:
            del self._container[index]

    def remove_all(self, item: T) -> None:
        """remove every occurrence of item"""
        self._ensure_not_iterating('remove_all')
        self._container[:] = [x for x in self._container if x != item]

    def remove_at(self, index: int) -> T:
        """remove and return the element at index, shifting the rest down"""
        self._ensure_not_iterating('remove_at')
        self._check_index(index)
        return self._container.pop(index)

    def clear(self) -> None:
        self._ensure_not_iterating('clear')
        # clear in place, the read-only view shares this list
        self._container.clear()

    def as_read_only(self) -> ReadOnlyCollection[T]:
        """the live read-only view over this list's storage"""
        return self._readonly

    # --- python conveniences ---

    def __getitem__(self, index: int) -> T:
        return self.at(index)

    def __setitem__(self, index: int, item: T) -> None:
        self.put(index, item)

    def __contains__(self, item: T) -> bool:
        return self.index_of(item) != -1
