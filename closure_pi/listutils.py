# closure_pi/listutils.py
"""
List helpers on top of Church-encoded pairs.

Design:
-------
* Lists are nested pairs:
      EMPTY               -> empty list
      make_pair(h, t)     -> cons cell, t is itself a list

* A value is treated as a list iff it is a chain of pairs ending in EMPTY.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from closure_pi.core.pair import EMPTY, first, is_empty, is_pair, make_pair, second


# ---------------------------------------------------------------------------
# Python list <-> encoded list bridges
# ---------------------------------------------------------------------------

def list_from_py(seq: Iterable[Any]) -> Any:
    """
    Build an encoded list from a Python iterable.

    Example:
        list_from_py([1, 2])  ->  make_pair(1, make_pair(2, EMPTY))
    """
    m: Any = EMPTY
    for item in reversed(list(seq)):
        m = make_pair(item, m)
    return m


def py_from_list(m: Any) -> Optional[list[Any]]:
    """
    Convert an encoded list back to a Python list.

    Returns None if the chain does not end in EMPTY.
    """
    out: list[Any] = []
    cur = m
    while is_pair(cur):
        out.append(first(cur))
        cur = second(cur)
    return out if is_empty(cur) else None


# ---------------------------------------------------------------------------
# Recognizers
# ---------------------------------------------------------------------------

def is_list(m: Any) -> bool:
    """Return True if m is EMPTY or a pair chain ending in EMPTY."""
    cur = m
    while is_pair(cur):
        cur = second(cur)
    return is_empty(cur)


def length(m: Any) -> int:
    """Number of pairs before EMPTY."""
    n = 0
    cur = m
    while not is_empty(cur):
        cur = second(cur)
        n += 1
    return n


def demo_list() -> Any:
    """The fixed four-element list the list demos run on."""
    return make_pair(1, make_pair(2, make_pair(3, make_pair(4, EMPTY))))
