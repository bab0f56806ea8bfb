# coding: utf-8
import functools
from typing import Any, Optional, Union

Num = Union[int, float]

def to_number(x: Any) -> Optional[Num]:
    """The numeric value of x, or None if it doesn't read as a number.

    Strings are parsed; booleans are not numbers here.
    """
    if isinstance(x, bool): return None
    if isinstance(x, (int, float)): return x
    if isinstance(x, str):
        s = x.strip()
        try:
            return int(s)
        except ValueError:
            pass
        try:
            return float(s)
        except ValueError:
            return None
    return None

def any_cmp(a: Any, b: Any) -> int:
    return int(a > b) - int(a < b)

def natural_cmp(a: Any, b: Any) -> int:
    """Numeric if both sides read as numbers, elementwise for two
    sequences, lexicographic on the string forms otherwise."""
    na, nb = to_number(a), to_number(b)
    if na is not None and nb is not None:
        return any_cmp(na, nb)
    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        for x, y in zip(a, b):
            c = natural_cmp(x, y)
            if c: return c
        return any_cmp(len(a), len(b))
    return any_cmp(str(a), str(b))

natural_key = functools.cmp_to_key(natural_cmp)

# booleans {{{
boolean_words = ('true', 'false', 'yes', 'no', 'on', 'off')
true_words = ('true', 'yes', 'on')

def _boolean_word(s: str) -> Optional[str]:
    # Any unambiguous prefix of a boolean word counts as that word.
    s = s.strip().lower()
    if not s: return None
    matches = [w for w in boolean_words if w.startswith(s)]
    return matches[0] if len(matches) == 1 else None

def is_boolean(value: Any, strict: bool = False) -> bool:
    """Whether value is a boolean literal.

    Loosely only true, false, 1 and 0 count (any case). Strictly every
    boolean spelling counts, including yes/no, on/off and unambiguous
    prefixes such as "f" or "of".

    ex: is_boolean("f") => False
    is_boolean("f", True) => True
    """
    if isinstance(value, bool): return True
    if isinstance(value, int): return value in (0, 1)
    if not isinstance(value, str): return False
    s = value.strip()
    if s in ('0', '1'): return True
    if strict:
        return _boolean_word(s) is not None
    return s.lower() in ('true', 'false')

def boolean_value(value: Any) -> bool:
    if isinstance(value, str):
        s = value.strip()
        if s in ('0', '1'): return s == '1'
        return _boolean_word(s) in true_words
    return bool(value)
# }}}

def in_range(number: Num, start: Num = 0, stop: Optional[Num] = None) -> bool:
    """Whether number lies in [start, stop). With only one bound given, the
    range is [0, start). A reversed range is swapped."""
    if stop is None:
        start, stop = 0, start
    if start > stop:
        start, stop = stop, start
    return start <= number < stop

# vim:set tabstop=4 shiftwidth=4 expandtab fdm=marker:
