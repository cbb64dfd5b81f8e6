"""Sudoku core data structures: cells, the board, and row/col/box groupings."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, List, Sequence, Tuple

SYMBOLS: Tuple[str, ...] = tuple("123456789")
SIZE = 9


class ContradictionError(RuntimeError):
    """Raised when deduction leaves the board in an impossible state."""


class GroupKind(Enum):
    ROW = "Row"
    COL = "Col"
    BOX = "Box"


@dataclass(eq=False)
class Cell:
    row: int
    col: int
    possibles: Tuple[str, ...] = SYMBOLS

    def __post_init__(self) -> None:
        self.box = (self.row // 3) * 3 + self.col // 3
        self.possibles = tuple(self.possibles)

    @property
    def index(self) -> int:
        return self.row * SIZE + self.col

    @property
    def solved(self) -> bool:
        return len(self.possibles) == 1

    @property
    def value(self) -> str:
        """The placed value, or '' while the cell is unsolved."""
        return self.possibles[0] if self.solved else ""

    def in_group(self, kind: GroupKind, index: int) -> bool:
        if kind is GroupKind.ROW:
            return self.row == index
        if kind is GroupKind.COL:
            return self.col == index
        return self.box == index

    def solve(self, value: str) -> None:
        self.possibles = (value,)

    def set_possibles(self, values: Iterable[str]) -> None:
        values = tuple(values)
        if not values:
            raise ContradictionError(f"Cell {self.label} has no possible values")
        self.possibles = values

    def has_possible(self, value: str) -> bool:
        return not self.solved and value in self.possibles

    def has_all_of(self, values: Iterable[str]) -> bool:
        if self.solved:
            return False
        return all(value in self.possibles for value in values)

    def remove_possible(self, value: str) -> bool:
        if not self.has_possible(value):
            return False
        self.possibles = tuple(p for p in self.possibles if p != value)
        return True

    def remove_possibles(self, values: Iterable[str]) -> bool:
        removed = False
        for value in values:
            # Every value is attempted; no short-circuit.
            if self.remove_possible(value):
                removed = True
        return removed

    @property
    def label(self) -> str:
        return f"r{self.row + 1}c{self.col + 1}"

    def __str__(self) -> str:
        return f"{self.label}={''.join(self.possibles)}"


@dataclass
class Group:
    kind: GroupKind
    index: int
    cells: List[Cell] = field(default_factory=list)

    @property
    def name(self) -> str:
        return f"{self.kind.value} {self.index + 1}"

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    def solved_values(self) -> List[str]:
        return [cell.possibles[0] for cell in self.cells if cell.solved]

    def with_possible(self, value: str) -> List[Cell]:
        return [cell for cell in self.cells if cell.has_possible(value)]

    def outside(self, kind: GroupKind, index: int) -> List[Cell]:
        """Cells of this group that do not belong to the given row/col/box."""
        return [cell for cell in self.cells if not cell.in_group(kind, index)]


def remove_from_cells(cells: Iterable[Cell], values: Sequence[str]) -> int:
    """Remove `values` from every cell; returns how many cells changed."""
    changed = 0
    for cell in cells:
        if cell.remove_possibles(values):
            changed += 1
    return changed


class Board:
    """The 81 cells of a puzzle, addressable by linear index row*9+col."""

    def __init__(self) -> None:
        self.cells: List[Cell] = [Cell(row=i // SIZE, col=i % SIZE) for i in range(SIZE * SIZE)]

    def __getitem__(self, index: int) -> Cell:
        return self.cells[index]

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row * SIZE + col]

    def is_solved(self) -> bool:
        return all(cell.solved for cell in self.cells)

    def unsolved_count(self) -> int:
        return sum(1 for cell in self.cells if not cell.solved)

    def snapshot(self) -> Tuple[Tuple[str, ...], ...]:
        return tuple(cell.possibles for cell in self.cells)

    def copy(self) -> "Board":
        clone = Board()
        for source, target in zip(self.cells, clone.cells):
            target.possibles = source.possibles
        return clone


class Grouping:
    """Rows, columns and boxes of a board, plus the flattened 27-block view.

    Groups hold references to the board's cells, so a change made through
    one view is visible through every other.
    """

    def __init__(self, board: Board) -> None:
        self.rows: List[Group] = [Group(GroupKind.ROW, i) for i in range(SIZE)]
        self.cols: List[Group] = [Group(GroupKind.COL, i) for i in range(SIZE)]
        self.boxes: List[Group] = [Group(GroupKind.BOX, i) for i in range(SIZE)]
        for cell in board:
            self.rows[cell.row].cells.append(cell)
            self.cols[cell.col].cells.append(cell)
            self.boxes[cell.box].cells.append(cell)
        self.blocks: List[Group] = self.rows + self.cols + self.boxes

    def group(self, kind: GroupKind, index: int) -> Group:
        if kind is GroupKind.ROW:
            return self.rows[index]
        if kind is GroupKind.COL:
            return self.cols[index]
        return self.boxes[index]
