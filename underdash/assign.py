# coding: utf-8
# Operations that update a caller's list binding in place. Each takes the
# caller's scope and the name of the binding, reads it, and writes the new
# list back under the same name before returning.
from typing import Any, List, Optional
from underdash.objects import Scope
import underdash.base as base
import underdash.lists as lists
import underdash.shape as shape

def push(scope: Scope, name: str, element: Any) -> List[Any]:
    """Append element to the list bound to name. Returns the new list."""
    obj = scope.get_or_else(name, [])
    scope.put(name, list(obj) + [element])
    return scope.get(name)

def unshift(scope: Scope, name: str, element: Any) -> List[Any]:
    obj = scope.get_or_else(name, [])
    scope.put(name, [element] + list(obj))
    return scope.get(name)

def pop(scope: Scope, name: str, count: int = 1) -> Any:
    """Remove the last count elements. Returns the element itself when
    count is 1 (None if the list was empty), else the list of them."""
    obj = list(scope.get(name))
    n = max(min(count, len(obj)), 0)
    removed = obj[len(obj) - n:]
    scope.put(name, obj[:len(obj) - n])
    if count == 1:
        return removed[0] if removed else None
    return removed

def shift(scope: Scope, name: str, count: int = 1) -> Any:
    """Like pop, from the front."""
    obj = list(scope.get(name))
    n = max(min(count, len(obj)), 0)
    removed = obj[:n]
    scope.put(name, obj[n:])
    if count == 1:
        return removed[0] if removed else None
    return removed

def splice(scope: Scope, name: str, start: int,
        count: Optional[int] = None, *items: Any) -> List[Any]:
    """Remove count elements from start (to the end if count is None,
    negative or too large), put items in their place, and return the
    removed elements.

    ex: l = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
    splice(scope, 'l', 1, 2) => [2, 3]
    l => [1, 4, 5, 6, 7, 8, 9, 10]
    """
    obj = list(scope.get(name))
    if start < 0: start = max(len(obj) + start, 0)
    if start >= len(obj):
        scope.put(name, obj + list(items))
        return []
    stop = len(obj) if count is None or count < 0 else min(start + count, len(obj))
    removed = obj[start:stop]
    scope.put(name, obj[:start] + list(items) + obj[stop:])
    return removed

def fill(scope: Scope, name: str, value: Any,
        start: int = 0, stop: Optional[int] = None) -> List[Any]:
    """Write value over positions [start, stop), extending the list where
    that runs past its end. Returns the new list."""
    obj = list(scope.get(name))
    if stop is None or stop < 0: stop = len(obj)
    for i in range(max(start, 0), stop):
        if i < len(obj): obj[i] = value
        else: obj.append(value)
    scope.put(name, obj)
    return obj

def remove(scope: Scope, name: str, block: Any) -> List[Any]:
    """Drop the elements block accepts from the bound list.

    The removed elements reported are the difference between the old and
    the new list, so a value occurring more than once in the original is
    never reported even if it was removed.

    ex: l = [1, 2, 3, 4, 5]
    remove(scope, 'l', lambda n: n <= 3) => [1, 2, 3]
    l => [4, 5]
    """
    original = list(scope.get(name))
    kept = lists.reject(original, block)
    scope.put(name, kept)
    return shape.difference(original, kept)

def pull(scope: Scope, name: str, values: List[Any]) -> List[Any]:
    """Remove every occurrence of values from the bound list and return the
    ones that were present."""
    result = shape.intersection(scope.get(name), values)
    remove(scope, name, lambda item: base.includes(result, item))
    return result

# vim:set tabstop=4 shiftwidth=4 expandtab fdm=marker:
