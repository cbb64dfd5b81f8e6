"""Deductive Sudoku solver: board model, strategies, and fixed-point driver."""

from .model import Board, Cell, ContradictionError, Grouping
from .parser import PuzzleFormatError, parse_puzzle, render_board
from .solver_core import SolveResult, SolveStatus, solve
from .strategies import build_strategies

__all__ = [
    "Board",
    "Cell",
    "ContradictionError",
    "Grouping",
    "PuzzleFormatError",
    "parse_puzzle",
    "render_board",
    "SolveResult",
    "SolveStatus",
    "solve",
    "build_strategies",
]
