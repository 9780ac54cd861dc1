from __future__ import annotations

import json
import logging
from pathlib import Path

import pandas as pd
import pytest

from enbp import cli
from enbp.io import save_matrix
from enbp.samples import case4


def test_no_arguments_prints_help(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main([])
    assert exc.value.code == 0
    assert "usage: enbp" in capsys.readouterr().out


def test_solve_sample_prints_paths(capsys) -> None:
    cli.main(["solve", "--sample", "case4"])
    out = capsys.readouterr().out
    assert "Input graph: 7 x 7 nodes." in out
    assert "Found 2 paths:" in out
    assert "0 2 4 6" in out
    assert "1 3 5" in out
    assert "Elapsed time:" in out


def test_solve_file_with_exports(tmp_path: Path, capsys) -> None:
    matrix_file = tmp_path / "m.yml"
    save_matrix(case4(), matrix_file)
    results = tmp_path / "out" / "best.json"
    cypher = tmp_path / "graph.cypher"
    csv = tmp_path / "out" / "best.csv"

    cli.main(
        [
            "solve",
            str(matrix_file),
            "--results",
            str(results),
            "--cypher",
            str(cypher),
            "--csv",
            str(csv),
        ]
    )

    payload = json.loads(results.read_text())
    assert payload["num_nodes"] == 7
    assert [p["nodes"] for p in payload["best_paths"]] == [[0, 2, 4, 6], [1, 3, 5]]
    assert cypher.read_text().startswith("MERGE (id0:Node {name:'0'})")
    table = pd.read_csv(csv)
    assert table["num_nodes"].tolist() == [4, 3]


def test_solve_topological_flag(tmp_path: Path, capsys) -> None:
    matrix_file = tmp_path / "rev.yml"
    matrix_file.write_text("data:\n  - [0.0, 0.0]\n  - [0.7, 0.0]\n")
    cli.main(["solve", str(matrix_file), "--topological"])
    out = capsys.readouterr().out
    assert "Found 1 path:" in out
    assert "1 0" in out


def test_solve_custom_key(tmp_path: Path, capsys) -> None:
    matrix_file = tmp_path / "k.yml"
    matrix_file.write_text("weights:\n  - [0.0, 0.3]\n  - [0.0, 0.0]\n")
    cli.main(["solve", str(matrix_file), "--key", "weights"])
    assert "0 1" in capsys.readouterr().out


def test_missing_file_exits_with_error(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(["solve", str(tmp_path / "missing.yml")])
    assert exc.value.code == 1
    assert "Matrix file not found" in capsys.readouterr().out


def test_invalid_matrix_exits_with_error(tmp_path: Path, capsys) -> None:
    matrix_file = tmp_path / "bad.yml"
    matrix_file.write_text("data:\n  - [0.0, 0.5, 0.0]\n  - [0.0, 0.0, 0.0]\n")
    with pytest.raises(SystemExit) as exc:
        cli.main(["solve", str(matrix_file)])
    assert exc.value.code == 1
    assert "square" in capsys.readouterr().out


def test_solve_requires_a_source() -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(["solve"])
    assert exc.value.code == 2


def test_samples_command(capsys) -> None:
    cli.main(["samples"])
    out = capsys.readouterr().out
    for name in ("case1", "case2", "case3", "case4"):
        assert name in out


def test_verbose_and_quiet_switch_levels(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="enbp"):
        cli.main(["--verbose", "solve", "--sample", "case1"])
    assert any("Debug logging enabled" in r.message for r in caplog.records)
    assert any("Removing nodes" in r.message for r in caplog.records)

    caplog.clear()
    with caplog.at_level(logging.INFO, logger="enbp"):
        cli.main(["--quiet", "solve", "--sample", "case1"])
    assert not any(r.levelno == logging.INFO for r in caplog.records)
