"""Top-level solve interface.

Expose `solve_day(day, lines)` that runs both parts of a day's puzzle against the
loaded input lines and returns the two answers.
"""

import time
from typing import Any, Callable, List, Tuple

from src.aoc.days import get_day
from src.aoc.errors import AocError, PartNotImplemented
from src.utils.trace import get_tracer


def _run_part(day: int, part: int, fn: Callable[[List[str]], Any], lines: List[str]) -> Any:
    tracer = get_tracer()
    started = time.perf_counter()
    try:
        value = fn(lines)
    except PartNotImplemented as e:
        tracer.log_error(str(e), day=day, part=part)
        if e.day is None:
            raise PartNotImplemented(part, day) from None
        raise
    except AocError as e:
        tracer.log_error(str(e), day=day, part=part)
        raise
    tracer.log_part_solved(day, part, value, time.perf_counter() - started)
    return value


def solve_day(day: int, lines: List[str]) -> Tuple[Any, Any]:
    """
    Solve both parts of `day` in order and return (part1, part2).
    The first failing part stops the run; its error propagates unchanged.
    The input lines are shared by both parts and never modified.
    """
    module = get_day(day)
    first = _run_part(day, 1, module.part1, lines)
    second = _run_part(day, 2, module.part2, lines)
    return first, second


__all__ = ["solve_day"]
