"""Fixed-point driver: saturate, apply strategies in priority order, repeat."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence

from .model import Board, ContradictionError, Grouping
from .strategies import Outcome, Strategy, build_strategies, saturate
from src.utils.trace import Tracer, get_tracer


class SolveStatus(Enum):
    SOLVED = "solved"
    STUCK = "stuck"
    CONTRADICTION = "contradiction"


@dataclass
class SolveResult:
    status: SolveStatus
    board: Board
    steps: int = 0
    strategy_counts: Dict[str, int] = field(default_factory=dict)
    reason: Optional[str] = None

    @property
    def solved(self) -> bool:
        return self.status is SolveStatus.SOLVED


def solve(
    board: Board,
    strategies: Optional[Sequence[Strategy]] = None,
    grouping: Optional[Grouping] = None,
    tracer: Optional[Tracer] = None,
) -> SolveResult:
    """
    Solve `board` in place by deduction alone.

    Saturation runs first; then the strategies are tried in order. The first
    one that makes progress is followed by another saturation pass and the
    scan restarts from the top. A full pass without progress ends the solve as
    STUCK. A contradiction ends it as CONTRADICTION with the board as it was
    when the contradiction surfaced.
    """
    tracer = tracer or get_tracer()
    strategies = list(strategies) if strategies is not None else build_strategies()
    grouping = grouping or Grouping(board)
    result = SolveResult(status=SolveStatus.STUCK, board=board)

    try:
        saturate(board, grouping, tracer)
        while not board.is_solved():
            strategy = _apply_first(strategies, board, grouping, tracer)
            if strategy is None:
                tracer.log_stuck(unsolved=board.unsolved_count())
                return result
            result.steps += 1
            result.strategy_counts[strategy.name] = result.strategy_counts.get(strategy.name, 0) + 1
            saturate(board, grouping, tracer)
    except ContradictionError as exc:
        tracer.log_contradiction(str(exc))
        result.status = SolveStatus.CONTRADICTION
        result.reason = str(exc)
        return result

    tracer.log_solution_found(strategy_steps=result.steps)
    result.status = SolveStatus.SOLVED
    return result


def _apply_first(
    strategies: List[Strategy], board: Board, grouping: Grouping, tracer: Tracer
) -> Optional[Strategy]:
    for strategy in strategies:
        if strategy.attempt(board, grouping, tracer) is Outcome.PROGRESSED:
            return strategy
    return None
