from __future__ import annotations
from .enumerable import IEnumerable
from .types import *

_HIGH_SURROGATES = range(0xD800, 0xDC00)
_LOW_SURROGATES = range(0xDC00, 0xE000)


def is_null_or_empty(value: Optional[Any]) -> bool:
    """true for None or anything with a length of zero"""
    if value is None:
        return True
    return hasattr(value, '__len__') and len(value) == 0


def join(collection: Iterable[Any], separator: Optional[str] = None) -> str:
    """join the str() of every element, optionally separated"""
    parts = []
    if isinstance(collection, IEnumerable):
        collection.each(lambda value, _: parts.append(str(value)))
    else:
        parts.extend(str(value) for value in collection)
    return (separator or '').join(parts)


def _utf16_units(text: str) -> List[int]:
    data = text.encode('utf-16-le', 'surrogatepass')
    return [int.from_bytes(data[i:i + 2], 'little') for i in range(0, len(data), 2)]


def unicode_char_code_at(text: str, index: int = 0) -> Optional[int]:
    """
    the code point starting at utf-16 code unit `index`.
    a surrogate pair is combined into one code point; an index pointing at a low
    surrogate gives -1 so callers walking code units can skip it. an unpaired high
    surrogate or an out-of-range index gives None.
    """
    units = _utf16_units(text)
    if not 0 <= index < len(units):
        return None

    code = units[index]
    if code in _HIGH_SURROGATES:
        low = units[index + 1] if index + 1 < len(units) else None
        if low not in _LOW_SURROGATES:
            return None
        return ((code - 0xD800) * 0x400) + (low - 0xDC00) + 0x10000
    if code in _LOW_SURROGATES:
        return -1
    return code
