import importlib.util
import io
import json
import math
from pathlib import Path

WORKER_PATH = Path(__file__).resolve().parents[1] / "scripts" / "solver_worker.py"


def _load_worker():
    spec = importlib.util.spec_from_file_location("solver_worker", WORKER_PATH)
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


def _run(monkeypatch, capsys, requests):
    worker = _load_worker()
    lines = "\n".join(r if isinstance(r, str) else json.dumps(r) for r in requests) + "\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(lines))
    worker.main()
    out = capsys.readouterr().out
    return [json.loads(x) for x in out.splitlines() if x.strip()]


def test_bad_seed_reports_error_and_worker_keeps_going(monkeypatch, capsys):
    req = {"type": "ev_current", "board": "_" * 20, "sims": 10}
    replies = _run(monkeypatch, capsys, [
        dict(req, seed=-1),
        dict(req, seed="x"),
        dict(req, seed=1),
    ])
    assert len(replies) == 3
    assert replies[0]["type"] == "error"
    assert replies[0]["message"].startswith("Worker exception:")
    assert replies[1]["type"] == "error"
    assert replies[2]["type"] == "ev_current"
    assert math.isfinite(replies[2]["ev"])


def test_solver_errors_are_typed(monkeypatch, capsys):
    replies = _run(monkeypatch, capsys, [
        {"type": "ev_current", "board": "_" * 19, "sims": 10},
        {"type": "ev_after_card", "board": "★" + "_" * 19, "card": "★", "sims": 10},
        {"type": "ev_current", "board": "_" * 20, "sims": 0},
        "not json",
        {"type": "nope"},
    ])
    assert [r.get("kind") for r in replies] == ["InputError", "StateError", "ConfigError", "BadJSON", "UnknownType"]


def test_after_card_sends_null_for_occupied_cells(monkeypatch, capsys):
    replies = _run(monkeypatch, capsys, [
        {"type": "ev_after_card", "board": "K" + "_" * 19, "card": 7, "sims": 20, "seed": 3},
    ])
    vals = replies[0]["values"]
    assert len(vals) == 20
    assert vals[0] is None
    assert all(isinstance(v, float) for v in vals[1:])
