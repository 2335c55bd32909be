# closure_pi/programs.py
"""
Named demo programs.

Each program is a callable of the form

    fn(out: TextIO, trace: TraceRecorder) -> Any

that writes its plain-text output to `out` and returns the computed value
(or None when the program only prints).

    - fib_program         : fib(25), plain host recursion   -> 75025
    - let_program         : main() reads two outer bindings -> 3
    - closure_program     : make_adder(40)(2)               -> 42
    - list_print_program  : print_all(demo list)            -> 1 2 3 4
    - list_sum_program    : sum_all(demo list)              -> 10
"""

from __future__ import annotations

from typing import Any, Callable, TextIO

from closure_pi.core.adder import make_adder
from closure_pi.listutils import demo_list
from closure_pi.render import render
from closure_pi.trace import TraceRecorder
from closure_pi.traverse import print_all, sum_all

Program = Callable[[TextIO, TraceRecorder], Any]

FIB_ARG = 25


def fib(n: int) -> int:
    """fib(1) == fib(2) == 1, doubly recursive."""
    if n < 1:
        raise ValueError("fib(n) only defined for n >= 1")
    if n == 1 or n == 2:
        return 1
    return fib(n - 1) + fib(n - 2)


def fib_program() -> Program:
    def _impl(out: TextIO, trace: TraceRecorder) -> Any:
        value = fib(FIB_ARG)
        out.write(render(value) + "\n")
        return value

    return _impl


def let_program() -> Program:
    def _impl(out: TextIO, trace: TraceRecorder) -> Any:
        a = 1
        b = 2

        def main() -> int:
            return a + b

        value = main()
        out.write(render(value) + "\n")
        return value

    return _impl


def closure_program() -> Program:
    def _impl(out: TextIO, trace: TraceRecorder) -> Any:
        value = make_adder(40)(2)
        out.write(render(value) + "\n")
        return value

    return _impl


def list_print_program() -> Program:
    def _impl(out: TextIO, trace: TraceRecorder) -> Any:
        print_all(demo_list(), out=out, trace=trace)
        return None

    return _impl


def list_sum_program() -> Program:
    def _impl(out: TextIO, trace: TraceRecorder) -> Any:
        value = sum_all(demo_list(), trace=trace)
        out.write(render(value) + "\n")
        return value

    return _impl
