"""Per-day solver modules, each exposing `part1(lines)` and `part2(lines)`."""

import importlib
from types import ModuleType
from typing import List

from src.aoc.errors import UnknownDay

FIRST_DAY = 1
LAST_DAY = 25

IMPLEMENTED_DAYS = [1, 2, 3, 4, 5, 6, 7, 8, 9]


def implemented_days() -> List[int]:
    return list(IMPLEMENTED_DAYS)


def get_day(day: int) -> ModuleType:
    """
    Module holding the solvers for `day`.
    Days in the calendar that have no solver yet get the template, whose parts
    raise PartNotImplemented.
    """
    if not FIRST_DAY <= day <= LAST_DAY:
        raise UnknownDay(day)
    if day in IMPLEMENTED_DAYS:
        return importlib.import_module(f"{__name__}.day{day:02d}")
    return importlib.import_module(f"{__name__}.template")


__all__ = ["FIRST_DAY", "LAST_DAY", "get_day", "implemented_days"]
