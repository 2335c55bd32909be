# closure_pi/__init__.py
"""
closure_pi public API surface.

    - Closures: make_adder
    - Pairs: make_pair, first, second, select_a, select_b, is_pair,
             EMPTY, is_empty
    - Node lists: Node, iter_nodes, node_from_pair, pair_from_node
    - Lists: list_from_py, py_from_list, is_list, length, demo_list
    - Traversals: print_all, sum_all
    - Rendering / tracing: render, TraceRecorder
    - Programs: run_named_program, list_program_names
"""

from __future__ import annotations

from .core.adder import make_adder
from .core.pair import (
    EMPTY,
    first,
    is_empty,
    is_pair,
    make_pair,
    second,
    select_a,
    select_b,
)
from .core.node import Node, iter_nodes, node_from_pair, pair_from_node
from .listutils import demo_list, is_list, length, list_from_py, py_from_list
from .render import render
from .trace import TraceRecorder
from .traverse import print_all, sum_all
from .program_registry import list_program_names, run_named_program


__all__ = [
    # closures
    "make_adder",

    # pairs
    "EMPTY",
    "is_empty",
    "make_pair",
    "is_pair",
    "first",
    "second",
    "select_a",
    "select_b",

    # node lists
    "Node",
    "iter_nodes",
    "node_from_pair",
    "pair_from_node",

    # lists
    "list_from_py",
    "py_from_list",
    "is_list",
    "length",
    "demo_list",

    # traversals
    "print_all",
    "sum_all",

    # rendering / tracing
    "render",
    "TraceRecorder",

    # programs
    "run_named_program",
    "list_program_names",
]
