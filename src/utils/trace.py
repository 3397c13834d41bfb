"""Tracing module: records runner steps (loads, solved parts, errors) and writes them to CSV."""

import csv
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass
class TraceStep:
    """A single step of a run."""

    timestamp: float
    step_number: int
    action_type: str  # 'load', 'solve', 'error'
    day: Optional[int] = None
    part: Optional[int] = None
    value: Optional[str] = None
    path: Optional[str] = None
    line_count: Optional[int] = None
    duration_seconds: Optional[float] = None
    reason: Optional[str] = None


class Tracer:
    """Records runner steps for logging and analysis."""

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

    def log_load(self, path: str, line_count: int, day: Optional[int] = None):
        """Log a successful input load."""
        self._record('load', day=day, path=str(path), line_count=line_count)

    def log_part_solved(self, day: Optional[int], part: int, value: Any, duration_seconds: float):
        """Log a solved part and how long it took."""
        self._record(
            'solve',
            day=day,
            part=part,
            value=repr(value),
            duration_seconds=duration_seconds,
        )

    def log_error(self, reason: str, day: Optional[int] = None, part: Optional[int] = None):
        """Log a failure that ended a day's run."""
        self._record('error', day=day, part=part, reason=reason)

    def to_csv(self, filepath: Path) -> None:
        """Write trace to CSV file."""
        if not self.steps:
            print("No trace steps to write")
            return

        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        fieldnames = [
            'timestamp', 'step_number', 'action_type', 'day', 'part', 'value',
            'path', 'line_count', 'duration_seconds', 'reason'
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
            'num_parts_solved': action_counts.get('solve', 0),
            'num_errors': action_counts.get('error', 0),
            'solve_time_seconds': sum(s.duration_seconds or 0.0 for s in self.steps if s.action_type == 'solve'),
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