from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from subprocess import PIPE, run

import jsonschema
import pytest

from closure_pi.program_run_cli import SCHEMA_TAG, main


def _run(args, cwd: Path, env=None):
    return run(
        [sys.executable, "-m", "closure_pi.program_run_cli", *args],
        cwd=str(cwd),
        stdout=PIPE,
        stderr=PIPE,
        text=True,
        env=env,
    )


def _schema(repo_root: Path) -> dict:
    schema_path = repo_root / "docs" / "schemas" / "program_run_schema.json"
    assert schema_path.exists(), f"missing schema: {schema_path}"
    return json.loads(schema_path.read_text())


@pytest.mark.parametrize(
    "program, expected",
    [
        ("closure", "42\n"),
        ("fibonacci", "75025\n"),
        ("let", "3\n"),
        ("list-print", "1\n2\n3\n4\n"),
        ("list-sum", "10\n"),
    ],
)
def test_plain_output(program, expected, repo_root):
    r = _run([program], repo_root)
    assert r.returncode == 0, f"stderr:\n{r.stderr}"
    assert r.stdout == expected


def test_json_payload_validates_against_schema(repo_root):
    r = _run(["list-sum", "--json"], repo_root)
    assert r.returncode == 0, f"stderr:\n{r.stderr}"
    data = json.loads(r.stdout)
    jsonschema.validate(instance=data, schema=_schema(repo_root))
    assert data["schema"] == SCHEMA_TAG
    assert data["output"] == ["10"]
    assert data["value"] == "10"
    assert data["ok"] is True


def test_pretty_payload_for_print_only_program(repo_root):
    r = _run(["list-print", "--pretty"], repo_root)
    assert r.returncode == 0
    data = json.loads(r.stdout)
    jsonschema.validate(instance=data, schema=_schema(repo_root))
    assert data["output"] == ["1", "2", "3", "4"]
    assert data["value"] is None


def test_unknown_program_json_reports_not_ok(repo_root):
    r = _run(["nope", "--json"], repo_root)
    assert r.returncode == 1
    data = json.loads(r.stdout)
    jsonschema.validate(instance=data, schema=_schema(repo_root))
    assert data["ok"] is False
    assert data["output"] == []
    assert "nope" in data["warnings"][0]


def test_unknown_program_plain_exits_2(capsys):
    assert main(["nope"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Unknown program" in captured.err


def test_schema_flag_prints_triplet(capsys):
    assert main(["--schema"]) == 0
    out = capsys.readouterr().out
    assert out.endswith("\n") and out.count("\n") == 1
    tag, doc_md, schema_json = out[:-1].split(" ")
    assert tag == SCHEMA_TAG
    assert doc_md == "docs/program_run_schema.md"
    assert schema_json == "docs/schemas/program_run_schema.json"


def test_schema_flag_paths_exist(capsys, repo_root):
    assert main(["--schema"]) == 0
    _, doc_md, schema_json = capsys.readouterr().out.split()
    assert (repo_root / doc_md).exists()
    assert (repo_root / schema_json).exists()


def test_list_flag(capsys):
    assert main(["--list"]) == 0
    names = capsys.readouterr().out.split()
    assert {"closure", "list-print", "list-sum"} <= set(names)


def test_all_flag_prints_name_value_lines(capsys):
    assert main(["--all"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "fibonacci: 75025" in lines
    assert "let: 3" in lines
    assert "closure: 42" in lines
    assert "list-print: 1 2 3 4" in lines
    assert "list-sum: 10" in lines


def test_missing_program_is_usage_error():
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2


def test_trace_flag_writes_events_to_stderr(repo_root):
    r = _run(["list-sum", "--trace"], repo_root)
    assert r.returncode == 0
    assert r.stdout == "10\n"
    events = [json.loads(line) for line in r.stderr.splitlines()]
    assert [e["type"] for e in events][0] == "traverse.start"
    assert events[-1]["type"] == "traverse.done"
    assert events[-1]["value"] == "10"


def test_trace_env_flag_enables_tracing(repo_root):
    env = dict(os.environ, CLOSURE_PI_TRACE="1")
    r = _run(["list-print"], repo_root, env=env)
    assert r.returncode == 0
    assert r.stdout == "1\n2\n3\n4\n"
    visits = [json.loads(line) for line in r.stderr.splitlines()]
    assert [e["value"] for e in visits if e["type"] == "traverse.visit"] == ["1", "2", "3", "4"]
