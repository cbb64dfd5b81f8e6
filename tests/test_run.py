import json

import pytest

from puzzles import EMPTY, HARD_SINGLES, SCENARIO_A, SCENARIO_A_SOLUTION
from run import format_result, main, write_results_csv
from solver import solve_puzzle


def test_main_inline_puzzle(capsys):
    results = main(["--puzzle", SCENARIO_A, "--show"])

    assert results[0]["status"] == "solved"
    assert results[0]["solution"] == SCENARIO_A_SOLUTION
    out = capsys.readouterr().out
    assert "inline: solved" in out
    assert "Solved 1/1 puzzles" in out


def test_main_text_file_with_csv_output(tmp_path):
    puzzle_file = tmp_path / "data.txt"
    puzzle_file.write_text(f"{SCENARIO_A}\n{EMPTY}\n")
    output_path = tmp_path / "results.csv"

    main([str(puzzle_file), "--output", str(output_path)])

    lines = output_path.read_text().splitlines()
    assert lines[0] == "id,puzzle,status,solution,steps,matches_expected"
    assert lines[1].startswith(f"data-1,{SCENARIO_A},solved,{SCENARIO_A_SOLUTION}")
    assert lines[2].startswith(f"data-2,{EMPTY},stuck,")


def test_main_directory_input(tmp_path):
    for i in range(3):
        f = tmp_path / f"puzzle{i}.json"
        f.write_text(json.dumps({"id": f"puzzle{i}", "puzzle": SCENARIO_A}))
    (tmp_path / "notes.md").write_text("ignored")

    results = main([str(tmp_path), "--strategies", "singles"])
    assert [r["id"] for r in results] == ["puzzle0", "puzzle1", "puzzle2"]
    assert all(r["status"] == "solved" for r in results)


def test_main_reads_path_from_environment(tmp_path, monkeypatch):
    puzzle_file = tmp_path / "env.txt"
    puzzle_file.write_text(SCENARIO_A + "\n")
    monkeypatch.setenv("SUDOKU_DATA_PATH", str(puzzle_file))

    results = main([])
    assert results[0]["id"] == "env-1"


def test_main_requires_some_input(monkeypatch):
    monkeypatch.delenv("SUDOKU_DATA_PATH", raising=False)
    with pytest.raises(SystemExit):
        main([])


def test_main_rejects_unknown_strategy():
    with pytest.raises(SystemExit):
        main(["--puzzle", SCENARIO_A, "--strategies", "singles,guessing"])


def test_main_malformed_puzzle_is_reported(capsys):
    results = main(["--puzzle", "123"])

    assert results[0]["status"] == "error"
    assert results[0]["steps"] == -1
    assert "ERROR" in capsys.readouterr().out


def test_main_writes_trace(tmp_path):
    trace_dir = tmp_path / "traces"
    main(["--puzzle", HARD_SINGLES, "--trace", str(trace_dir)])

    content = (trace_dir / "inline.csv").read_text()
    assert "solution_found" in content
    assert "singles" in content


def test_main_keeps_trace_files_inside_trace_dir(tmp_path):
    puzzle_file = tmp_path / "data.json"
    puzzle_file.write_text(json.dumps({"id": "../escape", "puzzle": SCENARIO_A}))
    trace_dir = tmp_path / "traces"

    main([str(puzzle_file), "--trace", str(trace_dir)])

    assert (trace_dir / "escape.csv").exists()
    assert not (tmp_path / "escape.csv").exists()


def test_format_result_compares_expected_solution():
    record = {"id": "x", "puzzle": SCENARIO_A, "solution": SCENARIO_A_SOLUTION}
    row = format_result(record, solve_puzzle(SCENARIO_A))
    assert row["matches_expected"] is True

    row = format_result({"id": "y", "puzzle": EMPTY}, solve_puzzle(EMPTY))
    assert row["matches_expected"] == ""
    assert row["status"] == "stuck"


def test_write_results_csv_fills_missing_fields(tmp_path):
    output_path = tmp_path / "out.csv"
    write_results_csv([{"id": "bad", "status": "error", "steps": -1}], output_path)
    assert output_path.read_text().splitlines()[1] == "bad,,error,,-1,"
