"""Top-level solve interface.

Expose `solve_puzzle(puzzle)` that accepts either a populated Board or an
81-character puzzle string compatible with `src.sudoku.parser.parse_puzzle`.
"""

from typing import Any, Optional, Sequence

from src.sudoku import solver_core
from src.sudoku.model import Board
from src.sudoku.parser import parse_puzzle
from src.sudoku.strategies import Strategy


def solve_puzzle(puzzle: Any, strategies: Optional[Sequence[Strategy]] = None) -> solver_core.SolveResult:
    """
    Solve a puzzle by deduction and return the SolveResult.
    Accepts:
      - Board instances (solved in place)
      - Puzzle strings (parsed via `parse_puzzle`)
    """
    if isinstance(puzzle, Board):
        board = puzzle
    elif isinstance(puzzle, str):
        board = parse_puzzle(puzzle)
    else:
        raise TypeError("solve_puzzle expects a Board instance or puzzle string")

    return solver_core.solve(board, strategies)


__all__ = ["solve_puzzle"]
