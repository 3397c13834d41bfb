"""Starting point for a new day: both parts are unsolved stubs."""

from typing import List

from src.aoc.errors import PartNotImplemented


def part1(lines: List[str]) -> int:
    raise PartNotImplemented(1)


def part2(lines: List[str]) -> int:
    raise PartNotImplemented(2)
