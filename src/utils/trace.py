"""Tracing module: logs solver steps and writes to CSV."""

import csv
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass
class TraceStep:
    """A single step in the solving process."""

    timestamp: float
    step_number: int
    action_type: str  # 'saturation', 'strategy', 'solve', 'stuck', 'contradiction', 'solution_found'
    strategy: Optional[str] = None
    group: Optional[str] = None  # e.g. "Row 3", "Box 7"
    cell: Optional[str] = None
    value: Optional[str] = None
    cells_changed: Optional[int] = None
    unsolved: Optional[int] = None  # Unsolved cells left on the board
    reason: Optional[str] = None


class Tracer:
    """Records solver steps for logging and analysis."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.steps: List[TraceStep] = []
        self.start_time = datetime.now().timestamp()
        self.step_counter = 0

    def _get_timestamp(self) -> float:
        """Get elapsed time in seconds since tracer creation."""
        return datetime.now().timestamp() - self.start_time

    def _record(self, action_type: str, **fields: Any) -> None:
        if not self.enabled:
            return
        self.step_counter += 1
        self.steps.append(TraceStep(
            timestamp=self._get_timestamp(),
            step_number=self.step_counter,
            action_type=action_type,
            **fields,
        ))

    def log_saturation(self, cells_changed: int, unsolved: int):
        """Log a remove-solved pass run to its fixed point."""
        self._record('saturation', cells_changed=cells_changed, unsolved=unsolved)

    def log_strategy(self, strategy: str, group: str, value: str, cells_changed: int, reason: str = ""):
        """Log a strategy that made progress."""
        self._record(
            'strategy',
            strategy=strategy,
            group=group,
            value=value,
            cells_changed=cells_changed,
            reason=reason or None,
        )

    def log_solve(self, cell: str, value: str, strategy: str, group: Optional[str] = None):
        """Log a cell being solved by a strategy."""
        self._record('solve', strategy=strategy, group=group, cell=cell, value=value)

    def log_stuck(self, unsolved: int):
        """Log a fixed point reached with unsolved cells."""
        self._record('stuck', unsolved=unsolved, reason="No strategy made progress")

    def log_contradiction(self, reason: str):
        """Log a contradiction that ended the solve."""
        self._record('contradiction', reason=reason)

    def log_solution_found(self, strategy_steps: int):
        """Log when the board is fully solved."""
        self._record('solution_found', unsolved=0, reason=f"Solved after {strategy_steps} strategy steps")

    def to_csv(self, filepath: Path) -> None:
        """Write trace to CSV file."""
        if not self.steps:
            print("No trace steps to write")
            return

        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        fieldnames = [
            'timestamp', 'step_number', 'action_type', 'strategy', 'group', 'cell',
            'value', 'cells_changed', 'unsolved', 'reason'
        ]

        with open(filepath, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for step in self.steps:
                writer.writerow(asdict(step))

        print(f"Trace written to {filepath} ({len(self.steps)} steps)")

    def summary(self) -> Dict[str, Any]:
        """Get a summary of the trace."""
        action_counts = {}
        strategy_counts = {}
        for step in self.steps:
            action_counts[step.action_type] = action_counts.get(step.action_type, 0) + 1
            if step.action_type == 'strategy':
                strategy_counts[step.strategy] = strategy_counts.get(step.strategy, 0) + 1

        return {
            'total_steps': len(self.steps),
            'elapsed_time_seconds': self._get_timestamp(),
            'action_counts': action_counts,
            'strategy_counts': strategy_counts,
            'num_strategy_steps': action_counts.get('strategy', 0),
            'num_saturations': action_counts.get('saturation', 0),
        }


# Global tracer instance
_global_tracer: Optional[Tracer] = None


def get_tracer() -> Tracer:
    """Get or create the global tracer."""
    global _global_tracer
    if _global_tracer is None:
        _global_tracer = Tracer(enabled=True)
    return _global_tracer


def reset_tracer() -> None:
    """Reset the global tracer."""
    global _global_tracer
    _global_tracer = None


def enable_tracing(enabled: bool = True) -> None:
    """Enable or disable tracing."""
    get_tracer().enabled = enabled
