"""Day 9: extrapolating sequences by repeated differences."""

from typing import List

from src.aoc.errors import InvalidInput
from src.aoc.parsing import parse_ints


def parse_sequence(line: str) -> List[int]:
    values = parse_ints(line, line, signed=True)
    if not values:
        raise InvalidInput("Empty sequence", line)
    return values


def differences(values: List[int]) -> List[int]:
    return [b - a for a, b in zip(values, values[1:])]


def extrapolate(values: List[int]) -> int:
    if all(v == 0 for v in values):
        return 0
    return values[-1] + extrapolate(differences(values))


def extrapolate_backwards(values: List[int]) -> int:
    if all(v == 0 for v in values):
        return 0
    return values[0] - extrapolate_backwards(differences(values))


def part1(lines: List[str]) -> int:
    return sum(extrapolate(parse_sequence(line)) for line in lines)


def part2(lines: List[str]) -> int:
    return sum(extrapolate_backwards(parse_sequence(line)) for line in lines)
