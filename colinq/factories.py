import typing
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import ReadOnlyCollection
    from .containers.list import List as ColinqList
    from .containers.queue import Queue
    from .containers.dictionary import Dictionary

def from_iterable(data: Iterable[T]) -> 'ReadOnlyCollection[T]':
    """read-only view over a list; other iterables are materialized into a new list first"""
    from .enumerable import ReadOnlyCollection
    return ReadOnlyCollection(data if isinstance(data, list) else list(data))

def empty() -> 'ReadOnlyCollection[Any]':
    """create empty read-only collection"""
    from .enumerable import ReadOnlyCollection
    return ReadOnlyCollection([])

def list_of(*items: T) -> 'ColinqList[T]':
    """create a List holding the given items"""
    from .containers.list import List as ColinqList
    return ColinqList(items)

def queue_of(*items: T) -> 'Queue[T]':
    """create a Queue; the first argument is the head"""
    from .containers.queue import Queue
    return Queue(items)

def dictionary_of(pairs: Optional[Iterable[Tuple[K, V]]] = None, **entries: V) -> 'Dictionary[K, V]':
    """create a Dictionary from (key, value) pairs and/or keyword entries, in that order"""
    from .containers.dictionary import Dictionary
    result = Dictionary(pairs)
    for key, value in entries.items():
        result.put(key, value)
    return result

# --- aliases ---
readonly = from_iterable
C = from_iterable
