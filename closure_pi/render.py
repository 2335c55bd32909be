# closure_pi/render.py
"""
Render values the way the demo programs print them.

    render(42)      -> "42"
    render(2.0)     -> "2"
    render(2.5)     -> "2.5"
    render(True)    -> "true"
    render(None)    -> "null"
    render(EMPTY)   -> "undefined"
    render(pair)    -> "Function {}"
"""

from __future__ import annotations

import math
from typing import Any

from closure_pi.core.pair import is_empty

FUNCTION_TEXT = "Function {}"


def _render_number(x: float) -> str:
    if isinstance(x, float) and math.isnan(x):
        return "NaN"
    if isinstance(x, float) and math.isinf(x):
        return "Infinity" if x > 0 else "-Infinity"
    # repr keeps exponent form for large floats; only the ".0" of integral values goes
    r = repr(x)
    return r[:-2] if r.endswith(".0") else r


def render(value: Any) -> str:
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if is_empty(value):
        return "undefined"
    if isinstance(value, (int, float)):
        return _render_number(value)
    if isinstance(value, str):
        return value
    if callable(value):
        return FUNCTION_TEXT
    return str(value)
