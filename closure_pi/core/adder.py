# closure_pi/core/adder.py
"""
Closure factory.

    add40 = make_adder(40)
    add40(2)  -> 42

`a` is bound once when the outer call returns and is never rebound, so
every call of the returned function sees the same captured value.
Operand types are the caller's business: whatever `+` does, this does.
"""

from __future__ import annotations

from typing import Any, Callable


def make_adder(a: Any) -> Callable[[Any], Any]:
    def inner(b: Any) -> Any:
        return a + b

    return inner
