from __future__ import annotations

import json
import os
import sys
from typing import Any, Dict, List, Mapping, Optional, TextIO, Tuple

from closure_pi.render import render

TRACE_EVENT_V1 = 1

# Feature flag: set CLOSURE_PI_TRACE=1 to record traversal events by default
CLOSURE_PI_TRACE_ENABLED = os.environ.get("CLOSURE_PI_TRACE", "0") == "1"

TRACE_EVENT_KEY_ORDER: Tuple[str, ...] = ("v", "type", "i", "value", "meta")


def _deep_sort_json(x: Any) -> Any:
    """
    Deterministically normalize nested JSON-ish structures:
    - dict: keys sorted lexicographically; values deep-sorted
    - list: values deep-sorted (order preserved)
    - primitives: unchanged
    """
    if isinstance(x, dict):
        out: Dict[str, Any] = {}
        for k in sorted(x.keys()):
            out[str(k)] = _deep_sort_json(x[k])
        return out
    if isinstance(x, list):
        return [_deep_sort_json(v) for v in x]
    return x


def canon_event(ev: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Canonicalize a single trace event to a deterministic dict.

    Required:
    - v: const 1
    - type: non-empty string
    - i: integer >= 0

    Optional:
    - value: rendered string of the value being visited
    - meta: optional metadata (deep-sorted for determinism)

    Rules:
    - Drop optional keys if value is None.
    - Ignore unknown keys.
    - Enforce stable top-level key order.
    """
    if not isinstance(ev, Mapping):
        raise TypeError(f"event must be a mapping, got {type(ev)}")

    v = ev.get("v", TRACE_EVENT_V1)
    if v != TRACE_EVENT_V1:
        raise ValueError(f"event.v must be {TRACE_EVENT_V1}, got {v!r}")

    typ = ev.get("type")
    if not isinstance(typ, str) or not typ.strip():
        raise ValueError("event.type must be a non-empty string")

    i = ev.get("i")
    if isinstance(i, bool) or not isinstance(i, int) or i < 0:
        raise ValueError("event.i must be an integer >= 0")

    value = ev.get("value", None)
    if value is not None and not isinstance(value, str):
        raise ValueError("event.value must be a string when provided")

    meta = ev.get("meta", None)
    if meta is not None and not isinstance(meta, Mapping):
        raise ValueError("event.meta must be a mapping when provided")

    out: Dict[str, Any] = {"v": v, "type": typ, "i": i}
    if value is not None:
        out["value"] = value
    if meta is not None:
        out["meta"] = _deep_sort_json(dict(meta))
    return {k: out[k] for k in TRACE_EVENT_KEY_ORDER if k in out}


def canon_event_json(ev: Mapping[str, Any]) -> str:
    """Compact, deterministic JSON for one event."""
    return json.dumps(canon_event(ev), ensure_ascii=False, separators=(",", ":"))


class TraceRecorder:
    """
    Collects canonical trace events, optionally echoing them as JSON lines.

    A disabled recorder accepts emit() calls and drops them, so callers
    never need to branch on whether tracing is on.
    """

    def __init__(self, enabled: Optional[bool] = None, stream: Optional[TextIO] = None) -> None:
        self._enabled = enabled if enabled is not None else CLOSURE_PI_TRACE_ENABLED
        self._stream = stream
        self.events: List[Dict[str, Any]] = []

    @property
    def enabled(self) -> bool:
        return self._enabled

    def emit(self, typ: str, value: Any = None, meta: Optional[Mapping[str, Any]] = None) -> None:
        if not self._enabled:
            return
        ev = canon_event(
            {
                "type": typ,
                "i": len(self.events),
                "value": None if value is None else render(value),
                "meta": meta,
            }
        )
        self.events.append(ev)
        if self._stream is not None:
            self._stream.write(json.dumps(ev, ensure_ascii=False, separators=(",", ":")) + "\n")
            self._stream.flush()


def default_recorder() -> TraceRecorder:
    """Recorder that follows CLOSURE_PI_TRACE and writes to stderr when on."""
    return TraceRecorder(stream=sys.stderr)


def stderr_recorder() -> TraceRecorder:
    """Enabled recorder writing JSON lines to stderr."""
    return TraceRecorder(enabled=True, stream=sys.stderr)
