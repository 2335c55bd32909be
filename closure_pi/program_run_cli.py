from __future__ import annotations

"""
closure_pi program runner

Runs a named demo program (see program_registry). By default it writes the
program's plain output, exactly as the standalone scripts do. With --json
it wraps the output in a payload tagged with a schema.
"""

import argparse
import datetime
import hashlib
import json
import sys
from typing import Any, List, Optional

from closure_pi.program_registry import capture_named_program, list_program_names, run_all_programs
from closure_pi.render import render
from closure_pi.trace import default_recorder, stderr_recorder


SCHEMA_TAG = "closure-pi-program-run.v1"
SCHEMA_DOC = "docs/program_run_schema.md"
SCHEMA_JSON = "docs/schemas/program_run_schema.json"

# --schema output: tag, prose doc, JSON Schema; single spaces, one line
SCHEMA_LINE = f"{SCHEMA_TAG} {SCHEMA_DOC} {SCHEMA_JSON}"


def _utc_now_z() -> str:
    return datetime.datetime.now(datetime.timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")


def _inputs_hash(program: str) -> str:
    payload = json.dumps({"program": program}, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def _emit(payload: dict[str, Any], pretty: bool) -> None:
    if pretty:
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(json.dumps(payload, ensure_ascii=False))


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Run a named closure_pi demo program.")
    ap.add_argument("--schema", action="store_true", help="Print schema tag, doc and JSON Schema paths and exit.")
    ap.add_argument("--list", action="store_true", help="List known program names and exit.")
    ap.add_argument("--all", action="store_true", help="Run every program and print `name: value` lines.")
    ap.add_argument("--json", action="store_true", help="Emit a JSON payload instead of plain output.")
    ap.add_argument("--pretty", action="store_true", help="Pretty-print JSON output (implies --json).")
    ap.add_argument("--trace", action="store_true", help="Write traversal trace events to stderr.")
    ap.add_argument("program", nargs="?", help="Registered program name (e.g. list-sum)")

    args = ap.parse_args(argv)

    if args.schema:
        print(SCHEMA_LINE, flush=True)
        return 0

    if args.list:
        for name in list_program_names():
            print(name)
        return 0

    if args.all:
        trace = stderr_recorder() if args.trace else default_recorder()
        for name, summary in run_all_programs(trace=trace):
            print(f"{name}: {summary}")
        return 0

    if not args.program:
        ap.error("program is required unless --schema, --list or --all is used")

    as_json = bool(args.json or args.pretty)
    trace = stderr_recorder() if args.trace else default_recorder()

    warnings: List[str] = []
    try:
        text, value = capture_named_program(args.program, trace=trace)
        ok = True
    except KeyError as e:
        if not as_json:
            print(f"Unknown program: {args.program!r}. Try --list.", file=sys.stderr)
            return 2
        ok = False
        text, value = "", None
        warnings.append(str(e.args[0]) if e.args else str(e))

    if not as_json:
        sys.stdout.write(text)
        return 0

    payload: dict[str, Any] = {
        "schema": SCHEMA_TAG,
        "schema_doc": SCHEMA_DOC,
        "program": args.program,
        "output": text.splitlines(),
        "value": None if value is None else render(value),
        "ok": bool(ok),
        "warnings": warnings,
        "meta": {
            "tool": "program_run_cli",
            "generated_at": _utc_now_z(),
            "determinism": {
                "inputs_hash": _inputs_hash(args.program),
            },
        },
    }

    _emit(payload, pretty=bool(args.pretty))
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
