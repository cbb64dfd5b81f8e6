import json

import pytest

from puzzles import SCENARIO_A, SCENARIO_A_SOLUTION
from src.sudoku.loader import load_puzzles


def test_load_kaggle_style_csv(tmp_path):
    path = tmp_path / "sudoku.csv"
    quiz = SCENARIO_A.replace(".", "0")
    path.write_text(f"quizzes,solutions\n{quiz},{SCENARIO_A_SOLUTION}\n", encoding="utf-8")

    puzzles = load_puzzles(str(path))

    assert puzzles == [{"id": "sudoku-1", "puzzle": quiz, "solution": SCENARIO_A_SOLUTION}]


def test_load_json_array_and_object(tmp_path):
    array_path = tmp_path / "many.json"
    array_path.write_text(json.dumps([{"id": "a", "puzzle": SCENARIO_A}, {"note": "no puzzle"}]))
    object_path = tmp_path / "one.json"
    object_path.write_text(json.dumps({"puzzle": SCENARIO_A, "solution": SCENARIO_A_SOLUTION}))

    assert load_puzzles(str(array_path)) == [{"id": "a", "puzzle": SCENARIO_A}]
    assert load_puzzles(str(object_path))[0]["id"] == "one-1"


def test_load_jsonl_skips_bad_lines(tmp_path):
    path = tmp_path / "batch.jsonl"
    path.write_text(
        json.dumps({"id": "p1", "puzzle": SCENARIO_A}) + "\n{broken\n\n"
        + json.dumps({"id": "p2", "quiz": SCENARIO_A}) + "\n"
    )

    puzzles = load_puzzles(str(path))
    assert [p["id"] for p in puzzles] == ["p1", "p2"]


def test_load_plain_text_one_puzzle_per_line(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text(f"{SCENARIO_A}\nshort line\n{SCENARIO_A_SOLUTION}\n")

    puzzles = load_puzzles(str(path))
    assert puzzles == [
        {"id": "data-1", "puzzle": SCENARIO_A},
        {"id": "data-2", "puzzle": SCENARIO_A_SOLUTION},
    ]


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_puzzles(str(tmp_path / "missing.txt"))
