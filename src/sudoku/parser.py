"""Puzzle parser and board rendering.

Puzzles are 81-character strings read row by row: digits 1-9 are givens,
'.' (or '0', as many datasets write it) marks an unknown cell.
"""

from typing import Optional

from .model import SIZE, SYMBOLS, Board

UNKNOWN = ".0"
CELL_WIDTH = 10


class PuzzleFormatError(ValueError):
    """Raised when a puzzle string cannot be read as a 9x9 grid."""


def parse_puzzle(text: str, board: Optional[Board] = None) -> Board:
    """
    Place the givens of `text` on `board` (a fresh board when omitted).
    Cells marked unknown keep whatever possibilities they already have.
    """
    if len(text) != SIZE * SIZE:
        raise PuzzleFormatError(f"Puzzle must have {SIZE * SIZE} characters, got {len(text)}")
    bad = sorted({ch for ch in text if ch not in SYMBOLS and ch not in UNKNOWN})
    if bad:
        raise PuzzleFormatError(f"Unexpected characters in puzzle: {''.join(bad)!r}")

    board = board if board is not None else Board()
    for index, ch in enumerate(text):
        if ch not in UNKNOWN:
            board[index].solve(ch)
    return board


def board_to_string(board: Board) -> str:
    return "".join(cell.possibles[0] if cell.solved else "." for cell in board)


def render_board(board: Board) -> str:
    """Fixed-width grid with '|' between boxes and a '=' rule every three rows."""
    lines = []
    for row in range(SIZE):
        chunks = []
        for start in range(0, SIZE, 3):
            chunk = ""
            for col in range(start, start + 3):
                cell = board.cell(row, col)
                if cell.solved:
                    text = "    " + cell.possibles[0]
                else:
                    text = "".join(cell.possibles)
                chunk += f"{text:<{CELL_WIDTH}}"
            chunks.append(chunk)
        lines.append("|".join(chunks))
        if row in (2, 5):
            lines.append("|".join(["=" * (CELL_WIDTH * 3)] * 3))
    return "\n".join(lines)
