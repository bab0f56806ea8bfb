# coding: utf-8
# Pure slice utilities. Every slice helper goes through base_slice so they
# all agree on negative and out-of-range indexes.
from typing import Any, Iterable, List, Optional, Sequence

def base_slice(lst: Sequence[Any], start: int = 0, stop: int = 0) -> List[Any]:
    """lst[start, stop) after normalization.

    A negative start counts from the end, clamped to 0 if it reaches past
    the front. A stop of zero or less is an offset from the end. Nothing
    here ever raises on an out-of-range index.

    ex: base_slice([1, 2, 3, 4, 5], -2) => [4, 5]
    base_slice([1, 2, 3, 4, 5], 1, -1) => [2, 3, 4]
    """
    length = len(lst)
    if start < 0:
        start = 0 if -start > length else length + start
    if stop <= 0:
        stop += length
    if stop <= start:
        return []
    return list(lst[start:stop])

def slice_(lst: Sequence[Any], start: int = 0, stop: int = 0) -> List[Any]:
    return base_slice(lst, start, stop)

def first(lst: Sequence[Any]) -> Any:
    for x in base_slice(lst, 0, 1): return x
    return None

def last(lst: Sequence[Any]) -> Any:
    for x in base_slice(lst, len(lst) - 1, len(lst)): return x
    return None

def drop(lst: Sequence[Any], n: int = 1) -> List[Any]:
    return base_slice(lst, max(n, 0))

def drop_right(lst: Sequence[Any], n: int = 1) -> List[Any]:
    stop = len(lst) - max(n, 0)
    # a stop of 0 would mean "to the end"
    if stop <= 0: return []
    return base_slice(lst, 0, stop)

def rest(lst: Sequence[Any]) -> List[Any]:
    return drop(lst, 1)

def initial(lst: Sequence[Any]) -> List[Any]:
    return drop_right(lst, 1)

def take(lst: Sequence[Any], n: int = 1) -> List[Any]:
    """The first n elements. A negative n takes all but the last -n."""
    if n == 0: return []
    return base_slice(lst, 0, n)

def take_right(lst: Sequence[Any], n: int = 1) -> List[Any]:
    """The last n elements. A negative n drops the first -n instead."""
    if n == 0 or not lst: return []
    if n < 0: return base_slice(lst, -n)
    if n >= len(lst): return list(lst)
    return base_slice(lst, len(lst) - n)

def index_of(lst: Sequence[Any], value: Any, start: int = 0) -> int:
    if start < 0: start = max(len(lst) + start, 0)
    for i in range(start, len(lst)):
        if lst[i] == value:
            return i
    return -1

def includes(lst: Sequence[Any], value: Any, start: int = 0) -> bool:
    return index_of(lst, value, start) >= 0

def at(lst: Sequence[Any], indexes: Iterable[int]) -> List[Optional[Any]]:
    """The elements at each of the given indexes; None where one is out of
    range. Negative indexes count from the end."""
    result = []
    for i in indexes:
        if -len(lst) <= i < len(lst):
            result.append(lst[i])
        else:
            result.append(None)
    return result

# vim:set tabstop=4 shiftwidth=4 expandtab fdm=marker:
