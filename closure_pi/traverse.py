# closure_pi/traverse.py
"""
Linear traversals over encoded lists.

Both walk the same two-state machine:

    Continue  (node is a pair)  -> handle first(node), move to second(node)
    Done      (node is EMPTY)   -> stop

The walk is a loop rather than host recursion, so depth is bounded by
list length without touching the interpreter recursion limit. A node that
is neither a pair nor EMPTY makes the accessor raise TypeError.
"""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO

from closure_pi.core.pair import first, is_empty, second
from closure_pi.render import render
from closure_pi.trace import TraceRecorder, default_recorder


def print_all(lst: Any, out: Optional[TextIO] = None, trace: Optional[TraceRecorder] = None) -> None:
    """Write each element on its own line, in order."""
    if out is None:
        out = sys.stdout
    if trace is None:
        trace = default_recorder()

    trace.emit("traverse.start", meta={"op": "print_all"})
    node = lst
    while not is_empty(node):
        value = first(node)
        trace.emit("traverse.visit", value=value)
        out.write(render(value) + "\n")
        node = second(node)
    trace.emit("traverse.done", meta={"op": "print_all"})


def sum_all(lst: Any, trace: Optional[TraceRecorder] = None) -> Any:
    """Add up every element with host `+`, starting from 0."""
    if trace is None:
        trace = default_recorder()

    trace.emit("traverse.start", meta={"op": "sum_all"})
    acc: Any = 0
    node = lst
    while not is_empty(node):
        value = first(node)
        trace.emit("traverse.visit", value=value)
        acc = acc + value
        node = second(node)
    trace.emit("traverse.done", value=acc, meta={"op": "sum_all"})
    return acc
