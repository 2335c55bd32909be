# closure_pi/core/pair.py
"""
Church-encoded pairs.

A pair is not a record. It is a closure that remembers two values and,
when handed a two-argument selector, applies the selector to them:

    p = make_pair(a, b)
    p(select_a)   -> a
    p(select_b)   -> b

Lists are nested pairs whose second component is the rest of the list,
terminated by EMPTY:

    make_pair(1, make_pair(2, EMPTY))

Accessors fail fast: first/second on EMPTY (or on anything that did not
come out of make_pair) raise TypeError instead of returning garbage.
"""

from __future__ import annotations

from typing import Any, Callable

Selector = Callable[[Any, Any], Any]
Pair = Callable[[Selector], Any]


class _Empty:
    """Terminal marker for encoded lists. There is exactly one instance."""

    _instance: "_Empty | None" = None

    def __new__(cls) -> "_Empty":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "EMPTY"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Empty, ())


EMPTY = _Empty()


def is_empty(x: Any) -> bool:
    return x is EMPTY


# ---------------------------------------------------------------------------
# Constructor
# ---------------------------------------------------------------------------

def make_pair(a: Any, b: Any) -> Pair:
    """
    Capture (a, b) and return the accessor-accepting closure.

    A fresh closure is returned on every call; two pairs over equal values
    are still distinct objects.
    """

    def inner(accessor: Selector) -> Any:
        return accessor(a, b)

    inner._is_pair = True  # type: ignore[attr-defined]
    return inner


def is_pair(x: Any) -> bool:
    """Return True only for closures produced by make_pair."""
    return callable(x) and getattr(x, "_is_pair", False) is True


# ---------------------------------------------------------------------------
# Selectors and accessors
# ---------------------------------------------------------------------------

def select_a(a: Any, b: Any) -> Any:
    return a


def select_b(a: Any, b: Any) -> Any:
    return b


def _ensure_pair(p: Any, ctx: str) -> None:
    if is_empty(p):
        raise TypeError(f"{ctx}: called on EMPTY")
    if not is_pair(p):
        raise TypeError(f"{ctx}: expected an encoded pair, got {type(p).__name__}")


def first(p: Pair) -> Any:
    """Head of a pair."""
    _ensure_pair(p, "first")
    return p(select_a)


def second(p: Pair) -> Any:
    """Tail of a pair (the rest of the list, when p is a list node)."""
    _ensure_pair(p, "second")
    return p(select_b)
