r"""
'               _ _
'      ___ ___ | (_)_ __   __ _
'     / __/ _ \| | | '_ \ / _` |
'    | (_| (_) | | | | | | (_| |
'     \___\___/|_|_|_| |_|\__, |
'                            |_|
"""

import logging

# library logging: applications decide where records go
logging.getLogger(__name__).addHandler(logging.NullHandler())

# expose the contract and the read-only wrapper
from .enumerable import IEnumerable, ReadOnlyCollection

# expose the containers
from .containers.list import List
from .containers.queue import Queue
from .containers.dictionary import Dictionary

# expose the factory functions
from .factories import (
    from_iterable,
    empty,
    list_of,
    queue_of,
    dictionary_of,
    readonly,
    C
)

# expose supporting types
from .types import KeyValuePair, MISSING
from .errors import CollectionModifiedError
from .config import CollectionConfig, config, configure

# collaborators built on the containers
from .events import Event, EventArgs, EventHandler, IEvent
from . import strings

# define what `import *` does
__all__ = [
    "IEnumerable",
    "ReadOnlyCollection",
    "List",
    "Queue",
    "Dictionary",
    "from_iterable",
    "empty",
    "list_of",
    "queue_of",
    "dictionary_of",
    "readonly",
    "C",
    "KeyValuePair",
    "MISSING",
    "CollectionModifiedError",
    "CollectionConfig",
    "config",
    "configure",
    "Event",
    "EventArgs",
    "EventHandler",
    "IEvent",
    "strings"
]
