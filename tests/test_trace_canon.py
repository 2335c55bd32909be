from __future__ import annotations

import json

import pytest

from closure_pi.trace import TraceRecorder, canon_event, canon_event_json


def test_canon_event_minimal_keeps_required_fields_and_order():
    out = canon_event({"type": "traverse.start", "i": 0, "v": 1})
    assert list(out.keys()) == ["v", "type", "i"]


def test_canon_event_drops_none_optionals_and_ignores_unknown_keys():
    out = canon_event({"v": 1, "type": "x", "i": 0, "value": None, "meta": None, "nope": 1})
    assert list(out.keys()) == ["v", "type", "i"]


def test_canon_event_meta_is_deep_sorted():
    out = canon_event({"type": "x", "i": 0, "meta": {"b": 2, "a": {"d": 4, "c": 3}}})
    assert list(out["meta"].keys()) == ["a", "b"]
    assert list(out["meta"]["a"].keys()) == ["c", "d"]


def test_canon_event_json_is_deterministic_across_key_permutations():
    j1 = canon_event_json({"v": 1, "type": "x", "i": 0, "meta": {"b": 2, "a": 1}})
    j2 = canon_event_json({"meta": {"a": 1, "b": 2}, "i": 0, "type": "x", "v": 1})
    assert j1 == j2
    assert json.loads(j1)["meta"] == {"a": 1, "b": 2}


@pytest.mark.parametrize(
    "ev",
    [
        {"v": 2, "type": "x", "i": 0},
        {"type": "", "i": 0},
        {"type": "x", "i": -1},
        {"type": "x", "i": True},
        {"type": "x", "i": 0, "value": 3},
        {"type": "x", "i": 0, "meta": [1]},
    ],
)
def test_canon_event_rejects_malformed(ev):
    with pytest.raises(ValueError):
        canon_event(ev)


def test_canon_event_requires_mapping():
    with pytest.raises(TypeError):
        canon_event([("type", "x")])  # type: ignore[arg-type]


def test_disabled_recorder_drops_events():
    rec = TraceRecorder(enabled=False)
    rec.emit("x")
    assert rec.events == []
    assert not rec.enabled
