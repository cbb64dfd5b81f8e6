"""Example: How to trace a solve and inspect which strategies fired.

Each strategy records its progress on the global tracer, so a fresh tracer per
puzzle gives a per-puzzle log.
"""

from pathlib import Path
from src.sudoku.parser import render_board
from src.utils.trace import get_tracer, reset_tracer
from solver import solve_puzzle


def solve_and_trace(puzzle: str, output_trace_csv: Path = None):
    """
    Solve a puzzle and log all steps to a trace file.

    Args:
        puzzle: 81-character puzzle string
        output_trace_csv: Path to write trace CSV (optional)

    Returns:
        SolveResult
    """
    # Reset tracer for this puzzle
    reset_tracer()
    tracer = get_tracer()

    result = solve_puzzle(puzzle)

    summary = tracer.summary()
    print(f"\n{'='*50}")
    print(f"Solver Summary:")
    print(f"  Status: {result.status.value}")
    print(f"  Strategy steps: {summary['num_strategy_steps']}")
    print(f"  Saturation passes: {summary['num_saturations']}")
    print(f"  Strategies: {summary['strategy_counts']}")
    print(f"  Time: {summary['elapsed_time_seconds']:.3f}s")
    print(f"{'='*50}\n")
    print(render_board(result.board))

    if output_trace_csv:
        tracer.to_csv(output_trace_csv)

    return result


if __name__ == "__main__":
    example_puzzle = (
        "5286...4913649..257942.563....1..2....78263....25.9.6.24.3..9768.97.2413.7.9.4582"
    )

    trace_output = Path("traces/example_trace.csv")
    solve_and_trace(example_puzzle, trace_output)
