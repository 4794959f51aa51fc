"""Tracing module: logs puzzle generation steps and writes them to CSV."""

import csv
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass
class TraceStep:
    """A single step in the generation process."""

    timestamp: float
    step_number: int
    action_type: str  # 'attempt', 'place', 'backtrack', 'rejected', 'fallback', 'mask', 'solution_found'
    engine: Optional[str] = None
    row: Optional[int] = None
    col: Optional[int] = None
    value: Optional[Any] = None
    attempt: Optional[int] = None
    depth: Optional[int] = None
    reason: Optional[str] = None


class Tracer:
    """Records generator steps for logging and analysis.

    Attempts, rejections, fallbacks and solutions are always recorded.
    Individual placements and backtracks are only kept when `verbose` is set.
    """

    def __init__(self, enabled: bool = True, verbose: bool = False):
        self.enabled = enabled
        self.verbose = verbose
        self.steps: List[TraceStep] = []
        self.start_time = datetime.now().timestamp()
        self.step_counter = 0
        self.placements = 0
        self.backtracks = 0

    def _get_timestamp(self) -> float:
        """Get elapsed time in seconds since tracer creation."""
        return datetime.now().timestamp() - self.start_time

    def _record(self, action_type: str, **fields: Any) -> None:
        self.step_counter += 1
        self.steps.append(TraceStep(
            timestamp=self._get_timestamp(),
            step_number=self.step_counter,
            action_type=action_type,
            **fields,
        ))

    def log_attempt(self, engine: str, attempt: int):
        """Log the start of a fresh generation attempt."""
        if not self.enabled:
            return
        self._record('attempt', engine=engine, attempt=attempt)

    def log_place(self, engine: str, row: int, col: int, value: Any = None, depth: Optional[int] = None):
        """Log a tentative cell placement during search."""
        if not self.enabled:
            return
        self.placements += 1
        if self.verbose:
            self._record('place', engine=engine, row=row, col=col,
                         value=None if value is None else str(value), depth=depth)

    def log_backtrack(self, engine: str, row: int, col: int, reason: str = "No valid values"):
        """Log a backtrack event."""
        if not self.enabled:
            return
        self.backtracks += 1
        if self.verbose:
            self._record('backtrack', engine=engine, row=row, col=col, reason=reason)

    def log_rejected(self, engine: str, attempt: int, reason: str):
        """Log a candidate puzzle thrown away by a post-generation check."""
        if not self.enabled:
            return
        self._record('rejected', engine=engine, attempt=attempt, reason=reason)

    def log_fallback(self, engine: str, reason: str):
        """Log a switch to a deterministic fallback construction."""
        if not self.enabled:
            return
        self._record('fallback', engine=engine, reason=reason)

    def log_mask(self, engine: str, revealed: int, total: int):
        """Log hint masking of a finished solution."""
        if not self.enabled:
            return
        self._record('mask', engine=engine, value=revealed,
                     reason=f"Revealed {revealed} of {total} cells")

    def log_solution_found(self, engine: str, attempt: Optional[int] = None):
        """Log when a puzzle has been accepted."""
        if not self.enabled:
            return
        self._record('solution_found', engine=engine, attempt=attempt)

    def to_csv(self, filepath: Path) -> None:
        """Write trace to CSV file."""
        if not self.steps:
            print("No trace steps to write")
            return

        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        fieldnames = [
            'timestamp', 'step_number', 'action_type', 'engine', 'row', 'col',
            'value', 'attempt', 'depth', 'reason'
        ]

        with open(filepath, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for step in self.steps:
                writer.writerow(asdict(step))

        print(f"Trace written to {filepath} ({len(self.steps)} steps)")

    def summary(self) -> Dict[str, Any]:
        """Get a summary of the trace."""
        action_counts: Dict[str, int] = {}
        for step in self.steps:
            action_counts[step.action_type] = action_counts.get(step.action_type, 0) + 1

        return {
            'total_steps': len(self.steps),
            'elapsed_time_seconds': self._get_timestamp(),
            'action_counts': action_counts,
            'num_attempts': action_counts.get('attempt', 0),
            'num_placements': self.placements,
            'num_backtracks': self.backtracks,
            'num_rejections': action_counts.get('rejected', 0),
        }


# Global tracer instance
_global_tracer: Optional[Tracer] = None


def get_tracer() -> Tracer:
    """Get or create the global tracer."""
    global _global_tracer
    if _global_tracer is None:
        _global_tracer = Tracer(enabled=True)
    return _global_tracer


def reset_tracer(verbose: bool = False) -> None:
    """Reset the global tracer."""
    global _global_tracer
    _global_tracer = Tracer(enabled=True, verbose=verbose) if verbose else None


def enable_tracing(enabled: bool = True) -> None:
    """Enable or disable tracing."""
    get_tracer().enabled = enabled
