# closure_pi/program_registry.py
"""
Simple in-memory registry for named demo programs.

Lets the CLI and callers talk in terms of names like "list-sum" instead of
passing closures around.

- Registry is just a dict[str, Program].
- Built-ins are seeded on first lookup and re-seeded after clear_registry(),
  so a cleared registry still answers for them.
"""

from __future__ import annotations

import io
import sys
from typing import Any, Dict, List, Optional, TextIO, Tuple

from .programs import (
    Program,
    closure_program,
    fib_program,
    let_program,
    list_print_program,
    list_sum_program,
)
from .render import render
from .trace import TraceRecorder, default_recorder

_REGISTRY: Dict[str, Program] = {}


# ---------------------------------------------------------------------------
# Core registry operations
# ---------------------------------------------------------------------------

def register_program(name: str, program: Program) -> None:
    """Register (or overwrite) a named program."""
    _REGISTRY[name] = program


def get_program(name: str) -> Program | None:
    """Look up a program by name; None if not registered."""
    _ensure_defaults()
    return _REGISTRY.get(name)


def has_program(name: str) -> bool:
    _ensure_defaults()
    return name in _REGISTRY


def clear_registry() -> None:
    """
    Remove all registered programs.

    Built-ins come back on the next lookup.
    """
    _REGISTRY.clear()


def list_programs() -> list[str]:
    """Return all registered program names, sorted for stability."""
    _ensure_defaults()
    return sorted(_REGISTRY.keys())


def list_program_names() -> list[str]:
    """Alias of list_programs()."""
    return list_programs()


# ---------------------------------------------------------------------------
# Running
# ---------------------------------------------------------------------------

def run_named_program(
    name: str,
    out: Optional[TextIO] = None,
    trace: Optional[TraceRecorder] = None,
) -> Any:
    """
    Run a registered program, writing its output to `out` (default stdout).

    Raises:
        KeyError if no such program is registered.
    """
    prog = get_program(name)
    if prog is None:
        raise KeyError(f"No program named {name!r} is registered")
    return prog(out if out is not None else sys.stdout, trace if trace is not None else default_recorder())


def capture_named_program(name: str, trace: Optional[TraceRecorder] = None) -> Tuple[str, Any]:
    """Run a program and return (printed text, returned value)."""
    buf = io.StringIO()
    value = run_named_program(name, out=buf, trace=trace)
    return buf.getvalue(), value


def summarize_run(text: str, value: Any) -> str:
    """
    One-line summary of a run: the rendered value, or the printed lines
    joined by spaces for programs that only print.
    """
    if value is not None:
        return render(value)
    return " ".join(text.splitlines())


def run_all_programs(trace: Optional[TraceRecorder] = None) -> List[Tuple[str, str]]:
    """Run every registered program in name order; return (name, summary) pairs."""
    results: List[Tuple[str, str]] = []
    for name in list_programs():
        text, value = capture_named_program(name, trace=trace)
        results.append((name, summarize_run(text, value)))
    return results


# ---------------------------------------------------------------------------
# Default / built-in programs
# ---------------------------------------------------------------------------

def _ensure_defaults() -> None:
    """Seed any missing built-in programs into the registry."""
    defaults = {
        "fibonacci": fib_program,
        "let": let_program,
        "closure": closure_program,
        "list-print": list_print_program,
        "list-sum": list_sum_program,
    }
    for name, factory in defaults.items():
        if name not in _REGISTRY:
            register_program(name, factory())
