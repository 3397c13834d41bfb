"""Day 1: calibration values from the first and last digit on each line."""

import string
from typing import Iterable, List, Optional, Tuple

from src.aoc.errors import InvalidInput

SPELLED_DIGITS = {
    "one": "1",
    "two": "2",
    "three": "3",
    "four": "4",
    "five": "5",
    "six": "6",
    "seven": "7",
    "eight": "8",
    "nine": "9",
}


def first_and_last_digits(line: str) -> Tuple[str, str]:
    digits = [c for c in line if c in string.digits]
    if not digits:
        raise InvalidInput("No digits on line", line)
    return digits[0], digits[-1]


def first_and_last_digits_spelled(line: str) -> Tuple[str, str]:
    """Like `first_and_last_digits`, but words such as 'two' count too (overlaps allowed)."""
    first: Optional[Tuple[int, str]] = None
    last: Optional[Tuple[int, str]] = None

    patterns = [(str(d), str(d)) for d in range(1, 10)] + list(SPELLED_DIGITS.items())
    for pattern, digit in patterns:
        lo = line.find(pattern)
        if lo == -1:
            continue
        hi = line.rfind(pattern)
        if first is None or lo < first[0]:
            first = (lo, digit)
        if last is None or hi > last[0]:
            last = (hi, digit)

    if first is None or last is None:
        raise InvalidInput("No digits on line", line)
    return first[1], last[1]


def _calibration_sum(pairs: Iterable[Tuple[str, str]]) -> int:
    return sum(int(first + last) for first, last in pairs)


def part1(lines: List[str]) -> int:
    return _calibration_sum(first_and_last_digits(line) for line in lines)


def part2(lines: List[str]) -> int:
    return _calibration_sum(first_and_last_digits_spelled(line) for line in lines)
