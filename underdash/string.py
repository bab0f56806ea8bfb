# coding: utf-8
from typing import Any

def empty(value: Any) -> bool:
    """Whether value is empty: None, a blank string or an empty container."""
    if value is None: return True
    if isinstance(value, str): return not value.strip()
    if isinstance(value, (list, tuple, dict, set, frozenset)): return not value
    return False

def starts_with(s: str, chars: str) -> bool:
    return str(s).startswith(str(chars))

def ends_with(s: str, chars: str) -> bool:
    return str(s).endswith(str(chars))

def contains(s: str, chars: str) -> bool:
    """Substring test.

    ex: contains("testing testing", "ing t") => True
    """
    return str(chars) in str(s)

# vim:set tabstop=4 shiftwidth=4 expandtab fdm=marker:
