# coding: utf-8
# Higher-order list operations. Each one is a single pass that invokes a
# callable per element and decides what its outcome means: a break ends
# that operation's own loop, a continue skips the element, and an early
# return or a failure unwinds out through unwrap().
from typing import Any, Dict, Hashable, Iterable, Iterator, List, Sequence, Tuple
import random
from underdash.objects import (
        MISSING, Block, EmptyInput, Frame, InvalidArgument, LoopBreak, LoopContinue,
        Scope, invoke, unwrap, yield_,
        )
from underdash.shape import pykey
import underdash.num as num

Seq = Sequence[Any]

def identity(x: Any) -> Any:
    return x

def iterate(iterator: Any, arg_tuples: Iterable[Tuple[Any, ...]]) -> Iterator[Tuple[Tuple[Any, ...], Any]]:
    """Invoke iterator once per argument tuple, yielding (args, result)."""
    for args in arg_tuples:
        outcome = invoke(iterator, *args)
        if isinstance(outcome, LoopBreak): return
        if isinstance(outcome, LoopContinue): continue
        yield args, unwrap(outcome)

def singles(lst: Iterable[Any]) -> Iterator[Tuple[Any]]:
    return ((x,) for x in lst)

# each {{{
def each(lst: Seq, iterator: Any) -> Seq:
    """Invoke iterator on every element. Returns lst itself.

    ex: each([1, 2, 3], print) => [1, 2, 3]
    """
    for _ in iterate(iterator, singles(lst)): pass
    return lst

def each_index(lst: Seq, iterator: Any) -> Seq:
    for _ in iterate(iterator, ((x, i) for i, x in enumerate(lst))): pass
    return lst

def each_slice(lst: Seq, size: int, iterator: Any) -> Seq:
    """Invoke iterator on consecutive runs of size elements; the last run
    may be shorter."""
    if size < 1:
        raise InvalidArgument("slice size must be equal to or greater than 1")
    runs = (list(lst[i:i + size]) for i in range(0, len(lst), size))
    for _ in iterate(iterator, singles(runs)): pass
    return lst

def chunk(lst: Seq, size: int = 1) -> List[List[Any]]:
    """Split lst into runs of size elements.

    ex: chunk([1, 2, 3, 4, 5], 2) => [[1, 2], [3, 4], [5]]
    """
    if size < 1:
        raise InvalidArgument("chunk size must be equal to or greater than 1")
    scope = Scope()
    scope['result'] = []
    def collect(frame: Frame, run: List[Any]) -> None:
        frame.upvar('result')
        frame['result'] = frame['result'] + [run]
    each_slice(lst, size, Block('run', collect, scope))
    return scope['result']

def times(n: int, iterator: Any) -> None:
    for _ in iterate(iterator, singles(range(n))): pass

def do(body: Any, keyword: str, condition: Any) -> None:
    """Run body, then keep running it while (or until) condition holds.
    Both are callables taking no arguments."""
    if keyword not in ('while', 'until'):
        raise InvalidArgument(
                'unknown keyword "{}": must be until or while'.format(keyword))
    while True:
        outcome = invoke(body)
        if isinstance(outcome, LoopBreak): break
        if not isinstance(outcome, LoopContinue): unwrap(outcome)
        if bool(yield_(condition)) != (keyword == 'while'):
            break
# }}}
# map, sortBy, groupBy, partition {{{
def map_(lst: Seq, iterator: Any) -> Any:
    """The list of iterator's results per element.

    A break stops right there and map returns the break's value instead of
    the list built so far. A continue contributes its value like a normal
    result.

    ex: map_([1, 2, 3], lambda x: x * x) => [1, 4, 9]
    """
    result = []
    for item in lst:
        outcome = invoke(iterator, item)
        if isinstance(outcome, LoopBreak):
            return outcome.value
        elif isinstance(outcome, LoopContinue):
            result.append(outcome.value)
        else:
            result.append(unwrap(outcome))
    return result

def sort_by(lst: Seq, iterator: Any, reverse: bool = False) -> List[Any]:
    """A stably sorted copy of lst, ordered by iterator's result per element.

    Keys compare numerically when both read as numbers and as strings
    otherwise. reverse=True reverses the sorted list.

    ex: sort_by(["testings", "len", "of", "strings", "sort"], len)
    => ["of", "len", "sort", "strings", "testings"]
    """
    pairs = [(key, item) for (item,), key in iterate(iterator, singles(lst))]
    pairs.sort(key=lambda pair: num.natural_key(pair[0]))
    if reverse: pairs.reverse()
    return [item for _, item in pairs]

def group_by(lst: Seq, iterator: Any) -> Dict[Hashable, List[Any]]:
    """Group elements by iterator's result, in first-seen key order.

    Keys are stored in hashable form, so a list key comes back as a tuple
    and a dict key as a tuple of pairs.

    ex: group_by([1.3, 2.1, 2.4], math.floor) => {1: [1.3], 2: [2.1, 2.4]}
    """
    result: Dict[Hashable, List[Any]] = {}
    for (item,), key in iterate(iterator, singles(lst)):
        result.setdefault(pykey(key), []).append(item)
    return result

def partition(lst: Seq, iterator: Any) -> Tuple[List[Any], List[Any]]:
    """ex: partition([1, 2, 3, 4, 5, 6], lambda n: n % 2 == 0) => ([2, 4, 6], [1, 3, 5])"""
    truthy: List[Any] = []
    falsy: List[Any] = []
    for (item,), ok in iterate(iterator, singles(lst)):
        (truthy if ok else falsy).append(item)
    return truthy, falsy
# }}}
# reduce {{{
def _fold(items: List[Any], iterator: Any, memo: Any) -> Any:
    if memo is MISSING:
        if not items:
            raise EmptyInput("Reduce of empty list with no initial value")
        memo, items = items[0], items[1:]
    for item in items:
        outcome = invoke(iterator, memo, item)
        if isinstance(outcome, LoopBreak): break
        if isinstance(outcome, LoopContinue): continue
        memo = unwrap(outcome)
    return memo

def reduce(lst: Seq, iterator: Any, memo: Any = MISSING) -> Any:
    """Fold lst from the left. Without memo, the first element is the seed.

    ex: reduce([2, 4, 6, 8, 10], operator.add) => 30
    """
    return _fold(list(lst), iterator, memo)

def reduce_right(lst: Seq, iterator: Any, memo: Any = MISSING) -> Any:
    """Fold lst from the right. Without memo, the last element is the seed.

    ex: reduce_right([2, 5, 10, 200], operator.truediv) => 2.0
    """
    return _fold(list(reversed(lst)), iterator, memo)
# }}}
# predicates and search {{{
def all_(lst: Seq, iterator: Any = identity) -> bool:
    for _, ok in iterate(iterator, singles(lst)):
        if not ok: return False
    return True

def any_(lst: Seq, iterator: Any = identity) -> bool:
    for _, ok in iterate(iterator, singles(lst)):
        if ok: return True
    return False

def _start_index(lst: Seq, start: int) -> int:
    if start < 0: start = max(len(lst) + start, 0)
    return start

def find_index(lst: Seq, block: Any, start: int = 0) -> int:
    """The index of the first element at or after start that block accepts,
    or -1. A negative start counts from the end."""
    for i in range(_start_index(lst, start), len(lst)):
        outcome = invoke(block, lst[i])
        if isinstance(outcome, LoopBreak): break
        if isinstance(outcome, LoopContinue): continue
        if unwrap(outcome): return i
    return -1

def detect(lst: Seq, block: Any, start: int = 0) -> Any:
    """The first element at or after start that block accepts, or None."""
    i = find_index(lst, block, start)
    return None if i < 0 else lst[i]

def find_indexes(lst: Seq, block: Any) -> List[int]:
    """ex: find_indexes([1, 9, 2, 8, 3, 7, 4, 6, 5, 10], lambda n: n < 5) => [0, 2, 4, 6]"""
    result = []
    for i, item in enumerate(lst):
        outcome = invoke(block, item)
        if isinstance(outcome, LoopBreak): break
        if isinstance(outcome, LoopContinue): continue
        if unwrap(outcome): result.append(i)
    return result

def find_map(lst: Seq, locate: Any, injection: Any,
        start: Any = 0, after: bool = False) -> List[Any]:
    """A copy of lst with injection inserted before (or after) the first
    element equal to locate. A boolean start is taken as after.

    ex: find_map([1, 2, 3, 4], 4, 5) => [1, 2, 3, 5, 4]
    find_map([1, 2, 3, 4], 4, 5, True) => [1, 2, 3, 4, 5]
    """
    if isinstance(start, bool):
        after, start = start, 0
    scope = Scope()
    scope['locate'] = locate
    def matches(frame: Frame, element: Any) -> bool:
        frame.upvar('locate')
        return element == frame['locate']
    result = list(lst)
    index = find_index(result, Block('element', matches, scope), start)
    if index >= 0:
        result.insert(index + 1 if after else index, injection)
    return result

def select(lst: Seq, block: Any) -> List[Any]:
    return [item for (item,), ok in iterate(block, singles(lst)) if ok]

def reject(lst: Seq, block: Any) -> List[Any]:
    return [item for (item,), ok in iterate(block, singles(lst)) if not ok]

def take_while(lst: Seq, iterator: Any, reverse: bool = False) -> List[Any]:
    """The longest prefix of lst whose elements iterator accepts; with
    reverse=True, the longest such suffix.

    ex: take_while([1, 2, 3, 4, 5], lambda n: n < 3) => [1, 2]
    """
    items = list(reversed(lst)) if reverse else list(lst)
    result = []
    for (item,), ok in iterate(iterator, singles(items)):
        if not ok: break
        result.append(item)
    if reverse: result.reverse()
    return result
# }}}
# max, min, shuffle {{{
def _extreme(lst: Seq, iterator: Any, sign: int, which: str) -> Any:
    if not lst:
        raise EmptyInput("cannot get the {} of an empty list".format(which))
    best: Any = MISSING
    result = None
    for (item,), computed in iterate(iterator, singles(lst)):
        if best is MISSING or num.natural_cmp(computed, best) == sign:
            best = computed
            result = item
    return result

def max_(lst: Seq, iterator: Any = identity) -> Any:
    """The element whose iterator result is greatest; the first one on ties.

    ex: max_([{'age': 16}, {'age': 17}, {'age': 8}], lambda d: d['age']) => {'age': 17}
    """
    return _extreme(lst, iterator, 1, 'max')

def min_(lst: Seq, iterator: Any = identity) -> Any:
    return _extreme(lst, iterator, -1, 'min')

def shuffle(lst: Seq) -> List[Any]:
    """A shuffled copy of lst, drawn from the random module's generator."""
    result = list(lst)
    for i in range(len(result)):
        j = int(random.random() * (i + 1))
        if i == j: continue
        result[i], result[j] = result[j], result[i]
    return result
# }}}

# vim:set tabstop=4 shiftwidth=4 expandtab fdm=marker:
