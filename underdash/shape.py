# coding: utf-8
# Set and shape operations on plain sequences. Nothing here takes a
# callable, and no input is ever modified.
from typing import Any, Hashable, List, Mapping, Sequence
import collections
from underdash.objects import InvalidArgument
import underdash.num as num
import underdash.string as string

Seq = Sequence[Any]

# Returns Hashable, but typing that doesn't really work...
def pykey(obj: Any) -> Hashable:
    if isinstance(obj, (list, tuple)): return tuple(pykey(x) for x in obj)
    elif isinstance(obj, dict): return tuple((pykey(k), pykey(v)) for k, v in obj.items())
    elif isinstance(obj, (set, frozenset)): return frozenset(pykey(x) for x in obj)
    else: return obj

def is_sequence(obj: Any) -> bool:
    return isinstance(obj, (list, tuple))

# combining {{{
def merge(*lists: Seq) -> List[Any]:
    """Concatenate lists, keeping duplicates. A non-list argument counts as
    a one-element list.

    ex: merge([1, 2, 3], [2, 3, 4], [5, [6], 7]) => [1, 2, 3, 2, 3, 4, 5, [6], 7]
    """
    result: List[Any] = []
    for lst in lists:
        if is_sequence(lst): result.extend(lst)
        else: result.append(lst)
    return result

def uniq(lst: Seq) -> List[Any]:
    """Drop repeated elements; the first occurrence wins.

    ex: uniq([2, 1, 4, 4, 2, 5]) => [2, 1, 4, 5]
    """
    seen = set()
    result = []
    for x in lst:
        k = pykey(x)
        if k not in seen:
            seen.add(k)
            result.append(x)
    return result

def union(*lists: Seq) -> List[Any]:
    return uniq(merge(*lists))

def intersection(*lists: Seq) -> List[Any]:
    """Elements present in every list, in the order of the first.

    ex: intersection([1, 2], [4, 2], [2, 1]) => [2]
    """
    if not lists: return []
    keysets = [set(pykey(x) for x in lst) for lst in lists[1:]]
    return [x for x in uniq(lists[0]) if all(pykey(x) in ks for ks in keysets)]

def difference(*lists: Seq) -> List[Any]:
    """Elements that occur exactly once across all the lists merged
    together. An element repeated anywhere, even within a single list, is
    dropped entirely.

    ex: difference([1, 2], [4, 2], [2, 1], [7, 7]) => [4]
    """
    merged = merge(*lists)
    counts = collections.Counter(pykey(x) for x in merged)
    return [x for x in merged if counts[pykey(x)] == 1]
# }}}
# flattening {{{
def has_depth(value: Any) -> bool:
    """Whether value is a sequence with at least one sequence inside."""
    return is_sequence(value) and any(is_sequence(x) for x in value)

def flatten_depth(lst: Seq, depth: int = 1) -> List[Any]:
    result: List[Any] = []
    for x in lst:
        if is_sequence(x) and depth > 0:
            result.extend(flatten_depth(x, depth - 1))
        else:
            result.append(x)
    return result

def flatten_deep(lst: Seq) -> List[Any]:
    result: List[Any] = []
    for x in lst:
        if is_sequence(x): result.extend(flatten_deep(x))
        else: result.append(x)
    return result

def flatten(lst: Seq, deep: bool = False) -> List[Any]:
    """Remove one level of nesting, or all of them with deep=True.

    ex: flatten([1, [2, [3]]]) => [1, 2, [3]]
    """
    return flatten_deep(lst) if deep else flatten_depth(lst, 1)

def depth(lst: Any) -> int:
    """How many levels of nesting lst has below its own.

    ex: depth([0, 0, [1, 1, [2, 2]]]) => 2
    """
    d = 0
    while has_depth(lst):
        d += 1
        lst = flatten_depth(lst, 1)
    return d
# }}}
# transposition {{{
def unzip(lists: Seq) -> List[List[Any]]:
    """Transpose a list of lists. Short rows are padded with None up to the
    longest one.

    ex: unzip([[1, 2], [3, 4], [5]]) => [[1, 3, 5], [2, 4, None]]
    """
    if string.empty(lists): return []
    width = max(len(row) for row in lists)
    return [[row[i] if i < len(row) else None for row in lists]
            for i in range(width)]

def zip_(*lists: Seq) -> List[List[Any]]:
    if not lists:
        raise InvalidArgument('wrong # args: should be "zip list ?list ...?"')
    return unzip(lists)

def pluck(collection: Seq, key: Any) -> List[Any]:
    """The value at key of every mapping that has it.

    ex: pluck([{'a': 1}, {'b': 2}, {'a': 3}], 'a') => [1, 3]
    """
    return [d[key] for d in collection if isinstance(d, Mapping) and key in d]
# }}}

def compact(lst: Seq, strict: bool = False) -> List[Any]:
    """Drop empty values and false booleans.

    Empty means None, a blank string or an empty container. Which values
    count as booleans follows is_boolean(value, strict).

    ex: compact(["the", "", 0, 1, "of", [], " ", "false", "true", "string"], True)
    => ["the", 1, "true", "string"]
    """
    return [x for x in lst
            if not string.empty(x)
            and (not num.is_boolean(x, strict) or num.boolean_value(x))]

# vim:set tabstop=4 shiftwidth=4 expandtab fdm=marker:
