"""CLI entrypoint: load puzzle(s), run solver, and report results."""

import argparse
import csv
import os
from pathlib import Path
from typing import Any, Dict, List

from solver import solve_puzzle
from src.sudoku.loader import load_puzzles
from src.sudoku.parser import board_to_string, render_board
from src.sudoku.solver_core import SolveResult
from src.sudoku.strategies import DEFAULT_ORDER, STRATEGIES, build_strategies
from src.utils.trace import get_tracer, reset_tracer

PUZZLE_SUFFIXES = [".json", ".jsonl", ".parquet", ".csv", ".txt"]
RESULT_FIELDS = ["id", "puzzle", "status", "solution", "steps", "matches_expected"]


def _strategy_list(value: str) -> List[str]:
    names = [name.strip() for name in value.split(",") if name.strip()]
    unknown = [name for name in names if name not in STRATEGIES]
    if unknown or not names:
        raise argparse.ArgumentTypeError(
            f"unknown strategies {unknown}; choose from {', '.join(STRATEGIES)}"
        )
    return names


def _trace_name(puzzle_id: Any) -> str:
    # Dataset ids may carry path separators; keep trace files inside --trace.
    name = Path(str(puzzle_id)).name
    return name if name not in ("", ".", "..") else "puzzle"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Solve Sudoku puzzles by deduction")
    parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        default=os.environ.get("SUDOKU_DATA_PATH"),
        help="Path to a puzzle file or directory (defaults to $SUDOKU_DATA_PATH)",
    )
    parser.add_argument("--puzzle", default=None, help="Solve a single 81-character puzzle instead")
    parser.add_argument("--output", type=Path, default=None, help="Optional path to write results CSV")
    parser.add_argument(
        "--strategies",
        type=_strategy_list,
        default=list(DEFAULT_ORDER),
        help=f"Comma-separated strategy order (default: {','.join(DEFAULT_ORDER)})",
    )
    parser.add_argument(
        "--strict-hiddens",
        action="store_true",
        help="Only narrow hidden subsets when no other cell of the block holds their values.",
    )
    parser.add_argument("--trace", type=Path, default=None, help="Directory for per-puzzle trace CSVs")
    parser.add_argument("--show", action="store_true", help="Print the board after each solve")
    args = parser.parse_args(argv)
    if args.puzzle is None and args.input is None:
        parser.error("an input path, $SUDOKU_DATA_PATH or --puzzle is required")
    return args


def collect_puzzles(args) -> List[Dict[str, Any]]:
    if args.puzzle is not None:
        return [{"id": "inline", "puzzle": args.puzzle}]

    path = Path(args.input)
    if path.is_file():
        return load_puzzles(str(path))
    if path.is_dir():
        puzzles = []
        for file_path in sorted(path.iterdir()):
            if file_path.suffix in PUZZLE_SUFFIXES:
                puzzles.extend(load_puzzles(str(file_path)))
        return puzzles
    raise ValueError(f"Input path {path} is neither file nor directory")


def format_result(puzzle: Dict[str, Any], result: SolveResult) -> Dict[str, Any]:
    solution = board_to_string(result.board)
    expected = puzzle.get("solution")
    return {
        "id": puzzle.get("id", "unknown"),
        "puzzle": puzzle.get("puzzle", ""),
        "status": result.status.value,
        "solution": solution,
        "steps": result.steps,
        "matches_expected": "" if not expected else solution == expected,
    }


def write_results_csv(results, output_path: Path):
    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=RESULT_FIELDS)
        writer.writeheader()
        for r in results:
            writer.writerow({field: r.get(field, "") for field in RESULT_FIELDS})


def main(argv=None):
    args = parse_args(argv)
    puzzles = collect_puzzles(args)
    results = []

    for puzzle in puzzles:
        reset_tracer()
        tracer = get_tracer()
        puzzle_id = puzzle.get("id", "unknown")

        try:
            strategies = build_strategies(args.strategies, strict_hiddens=args.strict_hiddens)
            result = solve_puzzle(puzzle.get("puzzle", ""), strategies)
        except ValueError as e:
            print(f"ERROR: Failed to solve puzzle {puzzle_id}: {e}")
            results.append({
                "id": puzzle_id,
                "puzzle": puzzle.get("puzzle", ""),
                "status": "error",
                "solution": "",
                "steps": -1,
            })
            continue

        results.append(format_result(puzzle, result))
        print(f"{puzzle_id}: {result.status.value} after {result.steps} strategy steps")
        if result.reason:
            print(f"  {result.reason}")
        if args.show:
            print(render_board(result.board))
            print()
        if args.trace:
            tracer.to_csv(args.trace / f"{_trace_name(puzzle_id)}.csv")

    solved = sum(1 for r in results if r["status"] == "solved")
    print(f"Solved {solved}/{len(results)} puzzles")

    if args.output:
        write_results_csv(results, args.output)
    return results


if __name__ == "__main__":
    main()
