"""Deduction strategies and the remove-solved saturation pass.

Every strategy applies at most one action per attempt and reports whether it
made progress; the driver in `solver_core` decides what runs next.
"""

from enum import Enum
from functools import lru_cache
from itertools import combinations as groups_of
from typing import Dict, FrozenSet, List, Optional, Type

from .combinations import COMBINATIONS, Combination, make_combinations
from .model import (
    SYMBOLS,
    Board,
    ContradictionError,
    Group,
    GroupKind,
    Grouping,
    remove_from_cells,
)
from src.utils.trace import Tracer, get_tracer


class Outcome(Enum):
    PROGRESSED = "progressed"
    NO_PROGRESS = "no_progress"


def saturate(board: Board, grouping: Grouping, tracer: Optional[Tracer] = None) -> int:
    """
    Remove every solved value from the other cells of its row, column and box,
    repeating until a full pass over the 27 blocks changes nothing.
    Returns the total number of cell updates made.
    """
    tracer = tracer or get_tracer()
    total = 0
    changed = True
    while changed:
        changed = False
        for group in grouping.blocks:
            solved = group.solved_values()
            if len(solved) != len(set(solved)):
                duplicates = sorted({v for v in solved if solved.count(v) > 1})
                raise ContradictionError(
                    f"{group.name} holds {', '.join(duplicates)} more than once"
                )
            updated = remove_from_cells(group, solved)
            if updated:
                total += updated
                changed = True
    tracer.log_saturation(cells_changed=total, unsolved=board.unsolved_count())
    return total


class Strategy:
    """A deduction rule over the board's groupings."""

    name = "strategy"

    def attempt(self, board: Board, grouping: Grouping, tracer: Optional[Tracer] = None) -> Outcome:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Singles(Strategy):
    """A value that only one cell of a block can hold belongs to that cell."""

    name = "singles"

    def attempt(self, board, grouping, tracer=None):
        tracer = tracer or get_tracer()
        for group in grouping.blocks:
            placed = set(group.solved_values())
            for value in SYMBOLS:
                if value in placed:
                    continue
                matches = group.with_possible(value)
                if len(matches) == 1:
                    cell = matches[0]
                    cell.solve(value)
                    tracer.log_solve(cell.label, value, self.name, group.name)
                    tracer.log_strategy(self.name, group.name, value, cells_changed=1)
                    return Outcome.PROGRESSED
        return Outcome.NO_PROGRESS


@lru_cache(maxsize=None)
def _flavours(combo: Combination) -> FrozenSet[Combination]:
    # [1,2,3] should also match cells holding just [1] or [2,3].
    return frozenset(make_combinations(combo, 1))


class NakedSubsets(Strategy):
    """
    When as many cells as a combination has values hold nothing outside that
    combination, the combination's values can go from the rest of the block.

    A cell counts when its possibilities equal any non-empty sub-combination,
    so a block with cells [1] and [1,2] claims the pair (1, 2). This is wider
    than the textbook naked pair/triple, which wants every cell to match the
    full combination.
    """

    name = "nakeds"

    def attempt(self, board, grouping, tracer=None):
        tracer = tracer or get_tracer()
        for combo in COMBINATIONS:
            flavours = _flavours(combo)
            for group in grouping.blocks:
                matches = [cell for cell in group if cell.possibles in flavours]
                if len(matches) != len(combo):
                    continue
                others = [cell for cell in group if cell not in matches]
                updated = remove_from_cells(others, combo)
                if updated:
                    tracer.log_strategy(
                        self.name,
                        group.name,
                        "".join(combo),
                        cells_changed=updated,
                        reason=f"Naked {''.join(combo)} in {' '.join(str(c) for c in matches)}",
                    )
                    return Outcome.PROGRESSED
        return Outcome.NO_PROGRESS


class HiddenSubsets(Strategy):
    """
    When exactly as many cells as a combination has values hold all of those
    values, those cells are narrowed to the combination.

    With `strict=True` the rule also requires that no other cell of the block
    holds any value of the combination.
    """

    name = "hiddens"

    def __init__(self, strict: bool = False):
        self.strict = strict

    def attempt(self, board, grouping, tracer=None):
        tracer = tracer or get_tracer()
        for combo in COMBINATIONS:
            for group in grouping.blocks:
                matches = [cell for cell in group if cell.has_all_of(combo)]
                if len(matches) != len(combo):
                    continue
                if self.strict and self._leaks(group, matches, combo):
                    continue
                narrowed = [cell for cell in matches if cell.possibles != combo]
                if not narrowed:
                    continue
                for cell in narrowed:
                    cell.set_possibles(combo)
                tracer.log_strategy(
                    self.name,
                    group.name,
                    "".join(combo),
                    cells_changed=len(narrowed),
                    reason=f"Hidden {''.join(combo)} in {' '.join(c.label for c in matches)}",
                )
                return Outcome.PROGRESSED
        return Outcome.NO_PROGRESS

    @staticmethod
    def _leaks(group: Group, matches, combo: Combination) -> bool:
        return any(
            cell.has_possible(value)
            for cell in group
            if cell not in matches
            for value in combo
        )

    def __repr__(self) -> str:
        return f"HiddenSubsets(strict={self.strict})"


class PointingPairs(Strategy):
    """
    If a value's 2 or 3 candidates inside a box share a row (or column), the
    value can be removed from that row (or column) outside the box.
    """

    name = "pointing_pairs"

    def attempt(self, board, grouping, tracer=None):
        tracer = tracer or get_tracer()
        for box in grouping.boxes:
            for value in SYMBOLS:
                matches = box.with_possible(value)
                if len(matches) not in (2, 3):
                    continue
                if len({cell.row for cell in matches}) == 1:
                    line = grouping.rows[matches[0].row]
                elif len({cell.col for cell in matches}) == 1:
                    line = grouping.cols[matches[0].col]
                else:
                    continue
                updated = remove_from_cells(line.outside(GroupKind.BOX, box.index), [value])
                if updated:
                    tracer.log_strategy(
                        self.name,
                        box.name,
                        value,
                        cells_changed=updated,
                        reason=f"Pointing pair: {value} in {box.name} {line.name}",
                    )
                    return Outcome.PROGRESSED
        return Outcome.NO_PROGRESS


class BoxLineReduction(Strategy):
    """
    If a value's 2 or 3 candidates in a row (or column) sit in one box, the
    value can be removed from the rest of that box.
    """

    name = "box_line_reduction"

    def attempt(self, board, grouping, tracer=None):
        tracer = tracer or get_tracer()
        for lines in (grouping.rows, grouping.cols):
            for line in lines:
                for value in SYMBOLS:
                    matches = line.with_possible(value)
                    if len(matches) not in (2, 3) or len({cell.box for cell in matches}) != 1:
                        continue
                    box = grouping.boxes[matches[0].box]
                    updated = remove_from_cells(box.outside(line.kind, line.index), [value])
                    if updated:
                        tracer.log_strategy(
                            self.name,
                            line.name,
                            value,
                            cells_changed=updated,
                            reason=f"Box line reduction: {value} in {box.name} {line.name}",
                        )
                        return Outcome.PROGRESSED
        return Outcome.NO_PROGRESS


class XWing(Strategy):
    """
    If a value has exactly two candidates in each of two rows and they sit in
    the same two columns, it can be removed from those columns elsewhere.
    The same holds with rows and columns swapped.
    """

    name = "x_wing"

    def attempt(self, board, grouping, tracer=None):
        tracer = tracer or get_tracer()
        for value in SYMBOLS:
            for lines, cross in ((grouping.rows, GroupKind.COL), (grouping.cols, GroupKind.ROW)):
                wings = []
                for line in lines:
                    matches = line.with_possible(value)
                    if len(matches) == 2:
                        positions = tuple(
                            cell.col if cross is GroupKind.COL else cell.row for cell in matches
                        )
                        wings.append((line, positions))
                for (first, positions), (second, other_positions) in groups_of(wings, 2):
                    if positions != other_positions:
                        continue
                    updated = 0
                    for position in positions:
                        targets = [
                            cell
                            for cell in grouping.group(cross, position)
                            if not cell.in_group(first.kind, first.index)
                            and not cell.in_group(second.kind, second.index)
                        ]
                        updated += remove_from_cells(targets, [value])
                    if updated:
                        tracer.log_strategy(
                            self.name,
                            f"{first.name}/{second.name}",
                            value,
                            cells_changed=updated,
                            reason=f"X-Wing for {value} in {first.name} and {second.name}",
                        )
                        return Outcome.PROGRESSED
        return Outcome.NO_PROGRESS


class Swordfish(Strategy):
    """
    If a value's candidates in three rows (2 or 3 per row) all fall in the same
    three columns, it can be removed from those columns in every other row.
    The same holds with rows and columns swapped.
    """

    name = "swordfish"

    def attempt(self, board, grouping, tracer=None):
        tracer = tracer or get_tracer()
        for value in SYMBOLS:
            for lines, cross in ((grouping.rows, GroupKind.COL), (grouping.cols, GroupKind.ROW)):
                fins = []
                for line in lines:
                    matches = line.with_possible(value)
                    if len(matches) in (2, 3):
                        positions = {
                            cell.col if cross is GroupKind.COL else cell.row for cell in matches
                        }
                        fins.append((line, positions))
                for trio in groups_of(fins, 3):
                    positions = set().union(*(p for _, p in trio))
                    if len(positions) != 3:
                        continue
                    fish = [line for line, _ in trio]
                    updated = 0
                    for position in sorted(positions):
                        targets = [
                            cell
                            for cell in grouping.group(cross, position)
                            if not any(cell.in_group(line.kind, line.index) for line in fish)
                        ]
                        updated += remove_from_cells(targets, [value])
                    if updated:
                        names = "/".join(line.name for line in fish)
                        tracer.log_strategy(
                            self.name,
                            names,
                            value,
                            cells_changed=updated,
                            reason=f"Swordfish for {value} in {names}",
                        )
                        return Outcome.PROGRESSED
        return Outcome.NO_PROGRESS


STRATEGIES: Dict[str, Type[Strategy]] = {
    cls.name: cls
    for cls in (Singles, NakedSubsets, HiddenSubsets, PointingPairs, BoxLineReduction, XWing, Swordfish)
}

DEFAULT_ORDER: List[str] = ["singles", "nakeds", "hiddens", "pointing_pairs", "box_line_reduction"]


def build_strategies(names: Optional[List[str]] = None, strict_hiddens: bool = False) -> List[Strategy]:
    """Instantiate strategies by registry name, keeping the given priority order."""
    selected = names if names is not None else DEFAULT_ORDER
    unknown = [name for name in selected if name not in STRATEGIES]
    if unknown:
        raise ValueError(
            f"Unknown strategies: {', '.join(unknown)} (choose from {', '.join(STRATEGIES)})"
        )
    strategies: List[Strategy] = []
    for name in selected:
        cls = STRATEGIES[name]
        strategies.append(HiddenSubsets(strict=strict_hiddens) if cls is HiddenSubsets else cls())
    return strategies
