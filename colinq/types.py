from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, NamedTuple
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')
R = TypeVar('R')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
# callbacks for each/until/from_last_until receive (element, index)
Action = Callable[[T, int], Any]
ResultSelector = Callable[[Optional[T], Optional[U]], R]


class _Missing:
    """marker for 'no element found', distinct from a stored none"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


class KeyValuePair(NamedTuple):
    """immutable (key, value) view synthesized from a dictionary's parallel lists"""
    key: Any
    value: Any

    def __repr__(self) -> str:
        return f"KeyValuePair(key={self.key!r}, value={self.value!r})"
